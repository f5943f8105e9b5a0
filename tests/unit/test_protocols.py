"""Testes para os protocols estruturais."""

from typing import Any

from request_serializer import JsonCodec, MsgpackCodec
from request_serializer.protocols import Codec, Request


class TestRequestProtocol:
    """Testes para o protocol Request."""

    def test_fake_request_matches(self, fake_request: Any) -> None:
        """Request com app, get e query satisfaz o protocol."""
        assert isinstance(fake_request, Request)

    def test_plain_mapping_does_not_match(self) -> None:
        """Um dict não é um request."""
        assert not isinstance({"app": {}, "get": print, "query": {}}, Request)


class TestCodecProtocol:
    """Testes para o protocol Codec."""

    def test_builtin_codecs_expose_protocol_members(self) -> None:
        """Codecs embutidos expõem content_type, encode e decode."""
        codecs: list[Codec] = [JsonCodec(), MsgpackCodec()]

        for codec in codecs:
            assert isinstance(codec.content_type, str)
            assert codec.decode(codec.encode({"a": 1})) == {"a": 1}
