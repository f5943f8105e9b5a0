"""
Response body codecs and JSON-ready normalization.

- JsonCodec: default JSON codec with type normalization
- MsgpackCodec: binary MessagePack codec
- normalize_for_json: converts Python types to JSON-ready values
"""

from .json_codec import JsonCodec
from .msgpack_codec import MsgpackCodec
from .normalizers import normalize_for_json

__all__ = [
    # Codecs
    "JsonCodec",
    "MsgpackCodec",
    # Normalization utilities
    "normalize_for_json",
]
