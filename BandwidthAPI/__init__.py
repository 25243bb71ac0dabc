"""
BandwidthAPI - client library for the Bandwidth Catapult and Numbers APIs
"""

from .version import __version__
from .clients import CatapultClient, NumbersClient

__all__ = ["__version__", "CatapultClient", "NumbersClient"]
