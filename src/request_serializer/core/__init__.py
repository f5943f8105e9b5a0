"""
Core serializer components.

Boundary validators, the sync/async bridge and shared constants.
"""

from . import constants
from .sync_async_bridge import (
    get_thread_pool,
    invoke_transform,
    is_async_context,
    resolve_result,
    run_coroutine_sync,
    shutdown_thread_pool,
)
from .validators import (
    ValidationError,
    resolve_transform,
    validate_filter_config,
    validate_param_name,
    validate_request,
)

__all__ = [
    # Sync/Async bridge
    "get_thread_pool",
    "shutdown_thread_pool",
    "invoke_transform",
    "resolve_result",
    "run_coroutine_sync",
    "is_async_context",
    # Boundary validators
    "ValidationError",
    "resolve_transform",
    "validate_request",
    "validate_param_name",
    "validate_filter_config",
    # Constants module
    "constants",
]
