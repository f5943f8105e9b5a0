"""request-serializer: serialização de respostas para handlers de API web.

Normaliza um valor ou uma lista de valores com uma função de serialização
fornecida pelo chamador e filtra as propriedades do resultado com
``only``/``except`` vindos das opções e da query string do request.

Uso básico:
    ```python
    from request_serializer import serialize

    def user_serializer(request, user, options):
        return {"id": user.id, "name": user.name, "email": user.email}

    # GET /users?only=id&only=name
    async def list_users(request):
        return await serialize(request, users, user_serializer, {"except": "email"})
    ```

Handlers síncronos:
    ```python
    from request_serializer import serialize_sync

    def get_user(request):
        return serialize_sync(request, user, user_serializer)
    ```

Corpo da resposta codificado:
    ```python
    from request_serializer import MsgpackCodec, render

    body = await render(request, users, user_serializer, codec=MsgpackCodec())
    ```
"""

__version__ = "1.0.1"

# Codecs
from .codecs import JsonCodec, MsgpackCodec, normalize_for_json

# Configuração
from .config import FilterConfig
from .core.validators import ValidationError

# Serialização
from .dispatch import render, serialize, serialize_sync

# Exceções
from .exceptions import (
    EncodingError,
    InvalidRequestError,
    InvalidSerializerError,
    SerializerError,
)

# Filtragem
from .filtering import (
    FilterSpec,
    apply_filter_spec,
    filter_data,
    normalize_paths,
    omit_paths,
    pick_paths,
    resolve_filter_spec,
)

# Protocols (para extensibilidade)
from .protocols import Codec, Request, SerializerObject, Transform

__all__ = [
    # Serialização
    "serialize",
    "serialize_sync",
    "render",
    # Filtragem
    "FilterSpec",
    "filter_data",
    "resolve_filter_spec",
    "apply_filter_spec",
    "normalize_paths",
    "pick_paths",
    "omit_paths",
    # Configuração
    "FilterConfig",
    "ValidationError",
    # Codecs
    "JsonCodec",
    "MsgpackCodec",
    "normalize_for_json",
    # Exceções
    "SerializerError",
    "InvalidRequestError",
    "InvalidSerializerError",
    "EncodingError",
    # Protocols
    "Request",
    "Transform",
    "SerializerObject",
    "Codec",
]
