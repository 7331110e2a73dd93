"""Session connection.

Example usage:
    from dagger_client import Connection

    async with Connection() as client:
        platform = await client.default_platform()
"""

import logging

import httpx

from .api.client import Client
from .core.config import ClientSettings
from .core.executor import GraphQLExecutor
from .core.query_builder import Selection

logger = logging.getLogger(__name__)


class Connection:
    """Connect to a running engine session and yield a :class:`Client`.

    The session endpoint and token come from :class:`ClientSettings`, so
    inside a process started by the engine no arguments are needed.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings if settings is not None else ClientSettings()
        self._transport = transport
        self._executor: GraphQLExecutor | None = None

    async def __aenter__(self) -> Client:
        endpoint = self.settings.endpoint
        logger.debug("connecting to engine session at %s", endpoint)
        self._executor = GraphQLExecutor(
            endpoint,
            auth=self.settings.auth(),
            timeout=self.settings.timeout,
            transport=self._transport,
        )
        return Client(Selection(), self._executor)

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._executor is not None:
            await self._executor.close()
            self._executor = None
        logger.debug("engine session connection closed")
