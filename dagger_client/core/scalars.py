"""Custom scalar handlers.

Maps GraphQL custom scalars to Python values. Most engine scalars (IDs,
``Platform``) are plain strings on the wire and need no handler; ``JSON``
carries a JSON document encoded as a string and ``Void`` is always null.

Example usage:
    from dagger_client.core.scalars import default_registry

    handler = default_registry.get("JSON")
    handler.deserialize('{"a": 1}')  # {"a": 1}
"""

import json
from enum import Enum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for custom scalar handlers."""

    def serialize(self, value: Any) -> Any:
        """Convert Python value to JSON-serializable format for GraphQL."""
        ...

    def deserialize(self, value: Any) -> Any:
        """Convert JSON value from GraphQL to Python type."""
        ...


class JSONHandler:
    """Handler for JSON scalars, which travel as JSON-encoded strings."""

    def serialize(self, value: Any) -> str:
        return json.dumps(value)

    def deserialize(self, value: Any) -> Any:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            # already decoded by the transport
            return value
        return json.loads(value)


class VoidHandler:
    """Handler for Void, the placeholder result of resolvers returning nothing."""

    def serialize(self, value: Any) -> None:
        return None

    def deserialize(self, value: Any) -> None:
        return None


class EnumHandler:
    """Handler for enum-typed results, decoded into a Python Enum class."""

    def __init__(self, enum_cls: type[Enum]):
        self.enum_cls = enum_cls

    def serialize(self, value: Enum) -> str:
        return value.value

    def deserialize(self, value: Any) -> Enum | str | None:
        if value is None:
            return None
        try:
            return self.enum_cls(value)
        except ValueError:
            # values added by newer engines stay plain strings
            return value


class ScalarRegistry:
    """Registry for custom scalar handlers.

    Manages the mapping between GraphQL scalar names and their handlers.
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        self._register_defaults()

    def _register_defaults(self):
        self.register("JSON", JSONHandler())
        self.register("Void", VoidHandler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        if not isinstance(handler, ScalarHandler):
            raise TypeError(f"{type(handler).__name__} does not implement serialize and deserialize")
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str) -> ScalarHandler | None:
        """Get the handler for a scalar type, or None if not registered."""
        return self._handlers.get(scalar_name)

    def serialize(self, scalar_name: str, value: Any) -> Any:
        """Encode ``value`` with the registered handler, or return it unchanged."""
        handler = self.get(scalar_name)
        if handler is None:
            return value
        return handler.serialize(value)

    def deserialize(self, scalar_name: str, value: Any) -> Any:
        """Decode ``value`` with the registered handler, or return it unchanged."""
        handler = self.get(scalar_name)
        if handler is None:
            return value
        return handler.deserialize(value)


default_registry = ScalarRegistry()
