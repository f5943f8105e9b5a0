"""Configuração de fixtures para testes."""

from typing import Any

import pytest

from request_serializer.core.constants import ENV_EXCEPT_PARAM, ENV_ONLY_PARAM, ENV_PATH_SEPARATOR


class FakeRequest:
    """Request mínimo com ``app``, ``get`` e ``query``."""

    def __init__(self, query: dict[str, Any] | None = None) -> None:
        self.app: dict = {}
        self.query = query or {}

    def get(self, name: str | None = None) -> None:
        return None


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove overrides de configuração do ambiente."""
    for name in (ENV_ONLY_PARAM, ENV_EXCEPT_PARAM, ENV_PATH_SEPARATOR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_request() -> type[FakeRequest]:
    """Fábrica de requests com query string."""
    return FakeRequest


@pytest.fixture
def fake_request() -> FakeRequest:
    """Request sem parâmetros de filtro."""
    return FakeRequest()


@pytest.fixture
def person() -> dict:
    """Registro de exemplo para filtragem."""
    return {"first": "John", "last": "Doe", "age": 42, "email": "jdoe@example.com"}


@pytest.fixture
def person_with_address(person: dict) -> dict:
    """Registro de exemplo com propriedade aninhada."""
    person["address"] = {"city": "Sunnydale", "state": "California"}
    return person


def identity(request: Any, item: Any, options: Any) -> Any:
    """Serializer que devolve o próprio item."""
    return item


@pytest.fixture
def identity_serializer() -> Any:
    """Serializer que devolve o próprio item."""
    return identity
