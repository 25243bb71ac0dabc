"""
Wire format codecs shared by the API clients
"""

from .base import Codec, ErrorDetails
from .json_codec import JSONCodec
from .xml_codec import XMLCodec, XMLModel

__all__ = [
    "Codec",
    "ErrorDetails",
    "JSONCodec",
    "XMLCodec",
    "XMLModel"
]
