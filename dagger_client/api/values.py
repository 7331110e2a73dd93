"""Cache volumes, secrets, environment variables and labels."""

from .base import ObjectType


class CacheVolume(ObjectType):
    """A directory whose contents persist across runs."""

    graphql_name = "CacheVolume"


class Secret(ObjectType):
    """A reference to a secret value, which can be handled more safely than the value itself."""

    graphql_name = "Secret"

    async def plaintext(self) -> str:
        """The value of this secret."""
        return await self._scalar("plaintext")


class EnvVariable(ObjectType):
    """An environment variable name and value."""

    graphql_name = "EnvVariable"

    async def name(self) -> str:
        return await self._scalar("name")

    async def value(self) -> str:
        return await self._scalar("value")


class Label(ObjectType):
    """A simple key value object that represents a label."""

    graphql_name = "Label"

    async def name(self) -> str:
        return await self._scalar("name")

    async def value(self) -> str:
        return await self._scalar("value")
