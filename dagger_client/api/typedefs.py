"""Type definitions and functions served by modules."""

from __future__ import annotations

from typing import Any, Optional

from .base import ObjectType
from .enums import TypeDefKind
from .ids import JSON


class TypeDef(ObjectType):
    """A definition of a parameter or return type in a Module."""

    graphql_name = "TypeDef"

    def as_input(self) -> InputTypeDef:
        """If kind is INPUT, the input-specific type definition."""
        return self._object("asInput", "InputTypeDef")

    def as_interface(self) -> InterfaceTypeDef:
        """If kind is INTERFACE, the interface-specific type definition."""
        return self._object("asInterface", "InterfaceTypeDef")

    def as_list(self) -> ListTypeDef:
        """If kind is LIST, the list-specific type definition."""
        return self._object("asList", "ListTypeDef")

    def as_object(self) -> ObjectTypeDef:
        """If kind is OBJECT, the object-specific type definition."""
        return self._object("asObject", "ObjectTypeDef")

    async def kind(self) -> TypeDefKind:
        """The kind of type this is (e.g. primitive, list, object)."""
        return await self._scalar("kind", scalar="TypeDefKind")

    async def optional(self) -> bool:
        """Whether this type can be set to null. Defaults to false."""
        return await self._scalar("optional")

    def with_constructor(self, function: Function) -> TypeDef:
        """Adds a function for constructing a new instance of an Object TypeDef."""
        return self._object("withConstructor", "TypeDef", {"function": function})

    def with_field(
        self, name: str, type_def: TypeDef, *, description: Optional[str] = None
    ) -> TypeDef:
        """Adds a static field for an Object TypeDef, failing if the type is not an object.

        Args:
            name: The name of the field in the object
            type_def: The type of the field
            description: A doc string for the field, if any
        """
        return self._object("withField", "TypeDef", {"name": name, "typeDef": type_def}, {
            "description": description,
        })

    def with_function(self, function: Function) -> TypeDef:
        """Adds a function for an Object or Interface TypeDef."""
        return self._object("withFunction", "TypeDef", {"function": function})

    def with_interface(self, name: str, *, description: Optional[str] = None) -> TypeDef:
        """Returns a TypeDef of kind Interface with the provided name."""
        return self._object("withInterface", "TypeDef", {"name": name}, {
            "description": description,
        })

    def with_kind(self, kind: TypeDefKind) -> TypeDef:
        """Sets the kind of the type."""
        return self._object("withKind", "TypeDef", {"kind": kind})

    def with_list_of(self, element_type: TypeDef) -> TypeDef:
        """Returns a TypeDef of kind List with the provided type for its elements."""
        return self._object("withListOf", "TypeDef", {"elementType": element_type})

    def with_object(self, name: str, *, description: Optional[str] = None) -> TypeDef:
        """Returns a TypeDef of kind Object with the provided name.

        An object's fields and functions may be omitted if the intent is only
        to refer to an object. This is how functions are able to return their
        own object, or any other circular reference.
        """
        return self._object("withObject", "TypeDef", {"name": name}, {
            "description": description,
        })

    def with_optional(self, optional: bool) -> TypeDef:
        """Sets whether this type can be set to null."""
        return self._object("withOptional", "TypeDef", {"optional": optional})


class ObjectTypeDef(ObjectType):
    """A definition of a custom object defined in a Module."""

    graphql_name = "ObjectTypeDef"

    def constructor(self) -> Function:
        """The function used to construct new instances of this object, if any."""
        return self._object("constructor", "Function")

    async def description(self) -> str:
        return await self._scalar("description")

    async def fields(self) -> list[FieldTypeDef]:
        """Static fields defined on this object, if any."""
        return await self._object_list("fields", "FieldTypeDef")

    async def functions(self) -> list[Function]:
        """Functions defined on this object, if any."""
        return await self._object_list("functions", "Function")

    async def name(self) -> str:
        return await self._scalar("name")

    async def source_module_name(self) -> str:
        """If this ObjectTypeDef is associated with a Module, the name of the module. Unset otherwise."""
        return await self._scalar("sourceModuleName")


class InterfaceTypeDef(ObjectType):
    """A definition of a custom interface defined in a Module."""

    graphql_name = "InterfaceTypeDef"

    async def description(self) -> str:
        return await self._scalar("description")

    async def functions(self) -> list[Function]:
        """Functions defined on this interface, if any."""
        return await self._object_list("functions", "Function")

    async def name(self) -> str:
        return await self._scalar("name")

    async def source_module_name(self) -> str:
        return await self._scalar("sourceModuleName")


class InputTypeDef(ObjectType):
    """A graphql input type, which is essentially just a group of named args.

    This is currently only used to represent pre-existing usage of graphql
    input types in the core API. It is not used by user modules.
    """

    graphql_name = "InputTypeDef"

    async def fields(self) -> list[FieldTypeDef]:
        return await self._object_list("fields", "FieldTypeDef")

    async def name(self) -> str:
        return await self._scalar("name")


class ListTypeDef(ObjectType):
    """A definition of a list type in a Module."""

    graphql_name = "ListTypeDef"

    def element_type_def(self) -> TypeDef:
        """The type of the elements in the list."""
        return self._object("elementTypeDef", "TypeDef")


class FieldTypeDef(ObjectType):
    """A definition of a field on a custom object defined in a Module."""

    graphql_name = "FieldTypeDef"

    async def description(self) -> str:
        return await self._scalar("description")

    async def name(self) -> str:
        return await self._scalar("name")

    def type_def(self) -> TypeDef:
        """The type of the field."""
        return self._object("typeDef", "TypeDef")


class Function(ObjectType):
    """Function represents a resolver provided by a Module.

    A function always evaluates against a parent object and is given a set
    of named arguments.
    """

    graphql_name = "Function"

    async def args(self) -> list[FunctionArg]:
        """Arguments accepted by the function, if any."""
        return await self._object_list("args", "FunctionArg")

    async def description(self) -> str:
        return await self._scalar("description")

    async def name(self) -> str:
        return await self._scalar("name")

    def return_type(self) -> TypeDef:
        """The type returned by the function."""
        return self._object("returnType", "TypeDef")

    def with_arg(
        self,
        name: str,
        type_def: TypeDef,
        *,
        description: Optional[str] = None,
        default_value: Optional[JSON] = None,
    ) -> Function:
        """Returns the function with the provided argument.

        Args:
            name: The name of the argument
            type_def: The type of the argument
            description: A doc string for the argument, if any
            default_value: A default value to use for this argument if not
                explicitly set by the caller, if any
        """
        return self._object("withArg", "Function", {"name": name, "typeDef": type_def}, {
            "description": description,
            "defaultValue": self._json_arg(default_value),
        })

    def with_description(self, description: str) -> Function:
        """Returns the function with the given doc string."""
        return self._object("withDescription", "Function", {"description": description})


class FunctionArg(ObjectType):
    """An argument accepted by a function.

    This is a specification for an argument at function definition time, not
    an argument passed at function call time.
    """

    graphql_name = "FunctionArg"

    async def default_value(self) -> Any:
        """A default value to use for this argument when not explicitly set by the caller, if any."""
        return await self._scalar("defaultValue", scalar="JSON")

    async def description(self) -> str:
        return await self._scalar("description")

    async def name(self) -> str:
        return await self._scalar("name")

    def type_def(self) -> TypeDef:
        """The type of the argument."""
        return self._object("typeDef", "TypeDef")


class FunctionCall(ObjectType):
    """An active function call."""

    graphql_name = "FunctionCall"

    async def input_args(self) -> list[FunctionCallArgValue]:
        """The argument values the function is being invoked with."""
        return await self._object_list("inputArgs", "FunctionCallArgValue")

    async def name(self) -> str:
        """The name of the function being called."""
        return await self._scalar("name")

    async def parent(self) -> Any:
        """The value of the parent object of the function being called.

        If the function is top-level to the module, this is always an empty
        object.
        """
        return await self._scalar("parent", scalar="JSON")

    async def parent_name(self) -> str:
        """The name of the parent object of the function being called.

        If the function is top-level to the module, this is the name of the
        module.
        """
        return await self._scalar("parentName")

    async def return_value(self, value: JSON) -> None:
        """Set the return value of the function call to the provided value."""
        encoded = self.scalars.serialize("JSON", value)
        return await self._scalar("returnValue", {"value": encoded}, scalar="Void")


class FunctionCallArgValue(ObjectType):
    """A value passed as a named argument to a function call."""

    graphql_name = "FunctionCallArgValue"

    async def name(self) -> str:
        """The name of the argument."""
        return await self._scalar("name")

    async def value(self) -> Any:
        """The value of the argument represented as a JSON serialized string."""
        return await self._scalar("value", scalar="JSON")
