"""Query builder for lazily constructed GraphQL selections.

A :class:`Selection` is an immutable chain of fields, each with its own
arguments. Handles extend the chain one field at a time; nothing is sent to
the engine until a terminal accessor builds and executes the document.

Example:
    q = Selection().select("container").select("from").arg("address", "alpine")
    q = q.select("stdout")
    await q.build()
    # {
    #   container {
    #     from(address: "alpine") {
    #       stdout
    #     }
    #   }
    # }
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    DocumentNode,
    EnumValueNode,
    FieldNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NameNode,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    StringValueNode,
    ValueNode,
    print_ast,
)
from pydantic import BaseModel


@runtime_checkable
class HasID(Protocol):
    """Protocol for objects that are passed to the engine by their ID."""

    async def id(self) -> str:
        ...


@dataclass(frozen=True)
class SelectedField:
    """A single field in a selection chain."""
    name: str
    args: tuple[tuple[str, Any], ...] = field(default_factory=tuple)

    def with_arg(self, name: str, value: Any) -> "SelectedField":
        args = tuple((k, v) for k, v in self.args if k != name)
        return SelectedField(self.name, args + ((name, value),))


def is_zero_value(value: Any) -> bool:
    """Check if a value is the zero value for its type.

    Optional arguments holding a zero value are left out of the query.
    """
    if value is None:
        return True
    if isinstance(value, Enum):
        return False
    if isinstance(value, (bool, int, float, str, list, tuple, dict)):
        return not value
    return False


class Selection:
    """An accumulated, not-yet-executed GraphQL query."""

    def __init__(self, fields: tuple[SelectedField, ...] = ()):
        self._fields = fields

    def select(self, name: str) -> "Selection":
        """Return a new selection with ``name`` nested under the current leaf."""
        return Selection(self._fields + (SelectedField(name),))

    def arg(self, name: str, value: Any) -> "Selection":
        """Return a new selection with an argument bound on the leaf field."""
        if not self._fields:
            raise ValueError(f"cannot bind argument {name!r} without a selected field")
        *head, leaf = self._fields
        return Selection(tuple(head) + (leaf.with_arg(name, value),))

    @property
    def fields(self) -> tuple[SelectedField, ...]:
        return self._fields

    @property
    def path(self) -> list[str]:
        """Field names from the root to the leaf."""
        return [f.name for f in self._fields]

    def __repr__(self) -> str:
        return f"Selection({'.'.join(self.path) or '<root>'})"

    async def build(self) -> str:
        """Build the GraphQL query string.

        Object arguments are resolved to their IDs, which may require
        executing their own selections first.
        """
        if not self._fields:
            raise ValueError("cannot build an empty selection")

        node: FieldNode | None = None
        for selected in reversed(self._fields):
            arguments = []
            for name, value in selected.args:
                arguments.append(
                    ArgumentNode(name=NameNode(value=name), value=await to_value_node(value))
                )
            node = FieldNode(
                alias=None,
                name=NameNode(value=selected.name),
                arguments=tuple(arguments),
                directives=(),
                selection_set=(
                    SelectionSetNode(selections=(node,)) if node is not None else None
                ),
            )

        operation = OperationDefinitionNode(
            operation=OperationType.QUERY,
            name=None,
            variable_definitions=(),
            directives=(),
            selection_set=SelectionSetNode(selections=(node,)),
        )
        return print_ast(DocumentNode(definitions=(operation,)))


async def to_value_node(value: Any) -> ValueNode:
    """Convert a Python value into a GraphQL literal."""
    if value is None:
        return NullValueNode()
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return BooleanValueNode(value=value)
    if isinstance(value, Enum):
        return EnumValueNode(value=str(value.value))
    if isinstance(value, int):
        return IntValueNode(value=str(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot encode non-finite float {value!r}")
        return FloatValueNode(value=repr(value))
    if isinstance(value, str):
        return StringValueNode(value=value, block=False)
    if isinstance(value, BaseModel):
        return await to_value_node(value.model_dump(by_alias=True, exclude_none=True))
    if isinstance(value, HasID):
        return StringValueNode(value=await value.id(), block=False)
    if isinstance(value, dict):
        fields = []
        for key, item in value.items():
            fields.append(
                ObjectFieldNode(name=NameNode(value=key), value=await to_value_node(item))
            )
        return ObjectValueNode(fields=tuple(fields))
    if isinstance(value, (list, tuple)):
        return ListValueNode(values=tuple([await to_value_node(v) for v in value]))
    raise TypeError(f"unsupported argument value of type {type(value).__name__}")
