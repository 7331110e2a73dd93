"""Transport and query plumbing for the engine's GraphQL API."""

from .auth import (
    Auth,
    BearerAuth,
    HeaderAuth,
    NoAuth,
    SessionTokenAuth,
)
from .config import ClientSettings
from .errors import (
    ConfigurationError,
    DaggerError,
    ExecError,
    GraphQLError,
    classify_error,
)
from .executor import GraphQLExecutor
from .query_builder import HasID, Selection, is_zero_value
from .scalars import (
    EnumHandler,
    JSONHandler,
    ScalarHandler,
    ScalarRegistry,
    VoidHandler,
    default_registry,
)

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "HeaderAuth",
    "NoAuth",
    "SessionTokenAuth",
    # Config
    "ClientSettings",
    # Errors
    "ConfigurationError",
    "DaggerError",
    "ExecError",
    "GraphQLError",
    "classify_error",
    # Executor
    "GraphQLExecutor",
    # Query Builder
    "HasID",
    "Selection",
    "is_zero_value",
    # Scalars
    "EnumHandler",
    "JSONHandler",
    "ScalarHandler",
    "ScalarRegistry",
    "VoidHandler",
    "default_registry",
]
