"""Protocols para extensibilidade da biblioteca.

Define as interfaces estruturais consumidas pelo serializer:
- Request: objeto de request do framework web
- Transform: função de serialização de um item
- SerializerObject: objeto que expõe ``serialize``
- Codec: codificação do corpo da resposta
"""

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Request(Protocol):
    """Protocol para o request de um handler web.

    ``app`` e ``get`` só precisam existir; ``query`` é lido para os
    parâmetros ``only`` e ``except``.

    Example:
        ```python
        class FakeRequest:
            def __init__(self, query=None):
                self.app = object()
                self.query = query or {}

            def get(self, name=None):
                return None
        ```
    """

    app: Any
    query: Mapping[str, Any]

    def get(self, *args: Any) -> Any:
        """Acessor de headers/atributos do framework (nunca chamado)."""
        ...


class Transform(Protocol):
    """Protocol para funções de serialização.

    Pode retornar o valor serializado diretamente ou um awaitable.

    Example:
        ```python
        def user_serializer(request, user, options):
            return {"id": user.id, "name": user.name}

        async def user_serializer_async(request, user, options):
            return {"id": user.id, "avatar": await load_avatar(user)}
        ```
    """

    def __call__(self, request: Any, item: Any, options: Any) -> Any | Awaitable[Any]:
        """Serializa um item."""
        ...


class SerializerObject(Protocol):
    """Protocol para objetos serializer com método ``serialize``."""

    def serialize(self, request: Any, item: Any, options: Any) -> Any | Awaitable[Any]:
        """Serializa um item."""
        ...


class Codec(Protocol):
    """Protocol para codificação do corpo da resposta.

    Example:
        ```python
        import json

        class PrettyJsonCodec:
            content_type = "application/json"

            def encode(self, data: Any) -> bytes:
                return json.dumps(data, indent=2).encode()

            def decode(self, data: bytes) -> Any:
                return json.loads(data.decode())
        ```
    """

    content_type: str

    def encode(self, data: Any) -> bytes:
        """Codifica dados Python em bytes.

        Args:
            data: Dados a codificar

        Returns:
            Corpo da resposta em bytes

        Raises:
            EncodingError: Se falhar ao codificar
        """
        ...

    def decode(self, data: bytes) -> Any:
        """Decodifica bytes em dados Python.

        Args:
            data: Bytes a decodificar

        Returns:
            Dados Python decodificados

        Raises:
            EncodingError: Se falhar ao decodificar
        """
        ...
