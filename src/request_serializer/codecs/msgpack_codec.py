"""MessagePack codec for compact binary response bodies."""

from typing import Any

import msgpack

from ..core.constants import CONTENT_TYPE_MSGPACK
from ..exceptions import EncodingError
from .normalizers import normalize_for_json


class MsgpackCodec:
    """Codec using MessagePack.

    Data is normalized like JsonCodec does, so both codecs carry the same
    values. MsgPack is more compact than JSON for numeric payloads.
    """

    content_type = CONTENT_TYPE_MSGPACK

    def encode(self, data: Any) -> bytes:
        """Encode Python data to MessagePack bytes.

        Args:
            data: Python object to encode

        Returns:
            MessagePack encoded bytes

        Raises:
            EncodingError: If data contains unsupported types
        """
        try:
            packed: bytes = msgpack.packb(normalize_for_json(data), use_bin_type=True)
            return packed
        except (TypeError, ValueError) as e:
            raise EncodingError(f"MessagePack encoding failed: {e}") from e

    def decode(self, data: bytes) -> Any:
        """Decode MessagePack bytes to Python data.

        Args:
            data: MessagePack encoded bytes

        Returns:
            Decoded Python object

        Raises:
            EncodingError: If data is not bytes or not valid MessagePack
        """
        if not isinstance(data, bytes):
            raise EncodingError(f"Expected bytes, got {type(data).__name__}")

        try:
            return msgpack.unpackb(data, raw=False)
        except (msgpack.UnpackException, ValueError) as e:
            raise EncodingError(f"Invalid MessagePack data: {e}") from e
