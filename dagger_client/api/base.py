"""Base classes for typed handles.

A handle wraps a deferred :class:`Selection` and the executor that will
eventually run it. Object-returning methods build a new handle one field
deeper; terminal accessors execute the accumulated selection.

Handles of other types are constructed through a registry keyed by the
GraphQL type name, so the API modules never import each other at runtime.
"""

from typing import Any, Callable, ClassVar, TypeVar

from ..core.executor import GraphQLExecutor
from ..core.query_builder import Selection, is_zero_value
from ..core.scalars import ScalarRegistry, default_registry

T = TypeVar("T", bound="Type")

_registry: dict[str, type["Type"]] = {}


def handle_class(graphql_name: str) -> type["Type"]:
    """Look up the handle class for a GraphQL type name."""
    try:
        return _registry[graphql_name]
    except KeyError:
        raise LookupError(f"no handle class registered for {graphql_name!r}") from None


class Type:
    """A handle to an object of the engine schema."""

    graphql_name: ClassVar[str] = ""
    scalars: ClassVar[ScalarRegistry] = default_registry

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.graphql_name:
            _registry[cls.graphql_name] = cls

    def __init__(self, query: Selection, executor: GraphQLExecutor):
        self._query = query
        self._executor = executor

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._query!r})"

    def with_(self: T, fn: Callable[[T], T]) -> T:
        """Call ``fn`` with this handle, keeping the calling chain unbroken."""
        return fn(self)

    def _select(
        self,
        field: str,
        args: dict[str, Any] | None = None,
        optional: dict[str, Any] | None = None,
    ) -> Selection:
        """Select a field, binding required and non-zero optional arguments."""
        q = self._query.select(field)
        for name, value in (args or {}).items():
            if value is None:
                raise ValueError(f"unexpected None for argument {name!r}")
            q = q.arg(name, value)
        for name, value in (optional or {}).items():
            if not is_zero_value(value):
                q = q.arg(name, value)
        return q

    def _object(
        self,
        field: str,
        graphql_name: str,
        args: dict[str, Any] | None = None,
        optional: dict[str, Any] | None = None,
    ) -> Any:
        """Select a field returning an object, without executing anything."""
        q = self._select(field, args, optional)
        return handle_class(graphql_name)(q, self._executor)

    def _json_arg(self, value: Any) -> str | None:
        """Encode a ``JSON`` argument; ``None`` stays unset."""
        if value is None:
            return None
        return self.scalars.serialize("JSON", value)

    async def _scalar(
        self,
        field: str,
        args: dict[str, Any] | None = None,
        optional: dict[str, Any] | None = None,
        *,
        scalar: str | None = None,
    ) -> Any:
        """Execute a field returning a scalar or a list of scalars."""
        q = self._select(field, args, optional)
        value = await self._executor.resolve(q)
        if scalar is not None:
            value = self.scalars.deserialize(scalar, value)
        return value

    async def _object_list(
        self,
        field: str,
        graphql_name: str,
        args: dict[str, Any] | None = None,
        optional: dict[str, Any] | None = None,
    ) -> list[Any]:
        """Execute a field returning a list of objects.

        Only the IDs are fetched; each element is rebuilt as a handle that
        loads the object from its ID.
        """
        q = self._select(field, args, optional).select("id")
        ids = await self._executor.resolve(q) or []
        return [load_from_id(graphql_name, id_, self._executor) for id_ in ids]

    async def _sync(self: T, field: str, optional: dict[str, Any] | None = None) -> T:
        """Execute a field for its side effects and return this handle."""
        await self._executor.resolve(self._select(field, None, optional))
        return self


class ObjectType(Type):
    """A handle to an object that has an ID."""

    def __init__(self, query: Selection, executor: GraphQLExecutor, *, id_: str | None = None):
        super().__init__(query, executor)
        self._id = id_

    async def id(self) -> str:
        """A unique identifier for this object.

        Returns the known ID without a round trip when the handle was loaded
        from one.
        """
        if self._id is not None:
            return self._id
        return await self._scalar("id")


def load_from_id(graphql_name: str, id_: str, executor: GraphQLExecutor) -> Any:
    """Build a handle for an existing object from its ID."""
    if id_ is None:
        raise ValueError("unexpected None for argument 'id'")
    loader = f"load{graphql_name}FromID"
    return handle_class(graphql_name)(Selection().select(loader).arg("id", id_), executor, id_=id_)
