"""Exceções do request-serializer."""


class SerializerError(Exception):
    """Erro base para operações de serialização."""

    pass


class InvalidRequestError(SerializerError):
    """Primeiro argumento não tem o formato de um request (``app`` e ``get``)."""

    pass


class InvalidSerializerError(SerializerError):
    """Serializer não é função nem objeto com método ``serialize``."""

    pass


class EncodingError(SerializerError):
    """Erro ao codificar/decodificar o corpo da resposta."""

    pass
