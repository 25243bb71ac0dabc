"""
Data-transfer shapes for the Bandwidth APIs

Kept free of client imports; the codecs depend on ``schemas.base``.
"""
