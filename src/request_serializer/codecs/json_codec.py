"""
JSON codec implementation.

Default response body codec using Python's built-in json module with type
normalization for complex Python types.
"""

import json
from typing import Any

from ..core.constants import CONTENT_TYPE_JSON
from ..exceptions import EncodingError
from .normalizers import normalize_for_json


class JsonCodec:
    """JSON codec with type normalization.

    Features:
        - Compact JSON representation (no extra whitespace)
        - UTF-8 encoding, non-ASCII characters kept as is
        - Key order of the serialized records preserved

    Example:
        ```python
        codec = JsonCodec()
        body = codec.encode({"id": UUID("550e8400-e29b-41d4-a716-446655440000")})
        # b'{"id":"550e8400-e29b-41d4-a716-446655440000"}'
        ```
    """

    content_type = CONTENT_TYPE_JSON

    def encode(self, data: Any) -> bytes:
        """Encode Python data to JSON bytes.

        Args:
            data: Python object to encode

        Returns:
            UTF-8 encoded JSON bytes

        Raises:
            EncodingError: If data contains unsupported types
        """
        try:
            json_str = json.dumps(
                normalize_for_json(data),
                separators=(",", ":"),  # Compact representation
                ensure_ascii=False,  # Allow Unicode characters
            )
            return json_str.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"JSON encoding failed: {e}") from e

    def decode(self, data: bytes) -> Any:
        """Decode JSON bytes to Python data.

        Args:
            data: UTF-8 encoded JSON bytes

        Returns:
            Decoded Python object

        Raises:
            EncodingError: If data is not bytes or not valid JSON
        """
        if not isinstance(data, bytes):
            raise EncodingError(f"Expected bytes, got {type(data).__name__}")

        try:
            return json.loads(data.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise EncodingError(f"Invalid UTF-8 encoding: {e}") from e
        except json.JSONDecodeError as e:
            raise EncodingError(f"Invalid JSON data: {e}") from e
