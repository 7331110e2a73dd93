"""Typed async client for the Dagger engine's GraphQL API."""

from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all
from .connection import Connection
from .core import (
    ClientSettings,
    ConfigurationError,
    DaggerError,
    ExecError,
    GraphQLError,
    GraphQLExecutor,
    Selection,
)

__version__ = "0.1.0"

__all__ = [
    *_api_all,
    "ClientSettings",
    "ConfigurationError",
    "Connection",
    "DaggerError",
    "ExecError",
    "GraphQLError",
    "GraphQLExecutor",
    "Selection",
]
