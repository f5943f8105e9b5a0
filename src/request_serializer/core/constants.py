"""
Constants for serializer core components.

Defines default values, environment variable names and error message
templates used throughout the library to eliminate magic strings.
"""

# Query parameter defaults
DEFAULT_ONLY_PARAM = "only"  # Allow-list query parameter
DEFAULT_EXCEPT_PARAM = "except"  # Deny-list query parameter
DEFAULT_PATH_SEPARATOR = "."  # Property path separator

# Options keys (fixed, never renamed by configuration)
OPTION_ONLY = "only"
OPTION_EXCEPT = "except"

# Environment variables
ENV_ONLY_PARAM = "REQUEST_SERIALIZER_ONLY_PARAM"
ENV_EXCEPT_PARAM = "REQUEST_SERIALIZER_EXCEPT_PARAM"
ENV_PATH_SEPARATOR = "REQUEST_SERIALIZER_PATH_SEPARATOR"

# Thread pool configuration
MAX_THREAD_WORKERS = 32  # Maximum threads in executor pool
THREAD_POOL_PREFIX = "request-serializer-sync"  # Thread name prefix

# Codec content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MSGPACK = "application/msgpack"

# Error message templates
ERROR_INVALID_REQUEST = "First argument must be an Express Request object"
ERROR_INVALID_SERIALIZER = 'Serializer must be a function or have a "serialize" property that is a function'
ERROR_PARAM_TYPE_INVALID = "{param_name} must be str, got {type_name}"
ERROR_PARAM_EMPTY = "{param_name} cannot be empty or whitespace-only"
ERROR_PARAMS_CONFLICT = "only_param and except_param must differ, both are '{value}'"
