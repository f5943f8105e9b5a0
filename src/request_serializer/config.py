"""
Configuration management for request filtering.

Handles environment variables, default values, and parameter validation
for the query parameter names and property path separator.
"""

import os
from dataclasses import dataclass

from .core.constants import (
    DEFAULT_EXCEPT_PARAM,
    DEFAULT_ONLY_PARAM,
    DEFAULT_PATH_SEPARATOR,
    ENV_EXCEPT_PARAM,
    ENV_ONLY_PARAM,
    ENV_PATH_SEPARATOR,
)
from .core.validators import validate_filter_config


@dataclass(frozen=True)
class FilterConfig:
    """Immutable configuration for property filtering.

    Resolution follows the precedence rules:

    1. Explicit argument (highest precedence)
    2. Environment variable
    3. Default value (lowest precedence)

    Attributes:
        only_param: Query parameter holding the allow-list
        except_param: Query parameter holding the deny-list
        separator: Property path separator
    """

    only_param: str = DEFAULT_ONLY_PARAM
    except_param: str = DEFAULT_EXCEPT_PARAM
    separator: str = DEFAULT_PATH_SEPARATOR

    def __post_init__(self) -> None:
        validate_filter_config(self.only_param, self.except_param, self.separator)

    @classmethod
    def resolve(
        cls,
        only_param: str | None = None,
        except_param: str | None = None,
        separator: str | None = None,
    ) -> "FilterConfig":
        """Resolve configuration following precedence rules.

        Args:
            only_param: Explicit allow-list query parameter name
            except_param: Explicit deny-list query parameter name
            separator: Explicit property path separator

        Returns:
            Validated FilterConfig

        Raises:
            ValidationError: If a resolved value is invalid
        """
        return cls(
            only_param=cls._resolve_value(only_param, ENV_ONLY_PARAM, DEFAULT_ONLY_PARAM),
            except_param=cls._resolve_value(except_param, ENV_EXCEPT_PARAM, DEFAULT_EXCEPT_PARAM),
            separator=cls._resolve_value(separator, ENV_PATH_SEPARATOR, DEFAULT_PATH_SEPARATOR),
        )

    @staticmethod
    def _resolve_value(explicit_value: str | None, env_name: str, default: str) -> str:
        if explicit_value is not None:
            return explicit_value

        env_value = os.getenv(env_name)
        if env_value:
            return env_value

        return default
