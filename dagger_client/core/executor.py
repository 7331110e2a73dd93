"""GraphQL executor for running selections against the engine.

Handles HTTP communication, error classification, and response parsing.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from .auth import Auth, NoAuth
from .errors import GraphQLError, classify_error
from .query_builder import Selection

logger = logging.getLogger(__name__)


class GraphQLExecutor:
    """Executes GraphQL queries against an engine session endpoint.

    Supports pluggable authentication via the Auth protocol.

    Examples:
        executor = GraphQLExecutor(url, auth=SessionTokenAuth(token))
        data = await executor.execute("{ defaultPlatform }")

        # Resolve a lazily built selection
        platform = await executor.resolve(Selection().select("defaultPlatform"))
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds, None to wait indefinitely
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth if auth is not None else NoAuth()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a raw GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The 'data' portion of the response

        Raises:
            ExecError: If the engine reports a failed command
            GraphQLError: If the response contains other errors
            httpx.HTTPError: On transport failures
        """
        client = await self._get_client()

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = self._serialize_variables(variables)

        logger.debug("executing query against %s:\n%s", self.url, query)
        response = await client.post(self.url, json=payload)

        result = self._parse_body(response)
        if result is not None and result.get("errors"):
            errors = result["errors"]
            error_messages = "; ".join(
                e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors
            )
            err = GraphQLError(error_messages, errors)
            exec_err = classify_error(err)
            if exec_err is not None:
                logger.debug("command %s exited with code %d", exec_err.cmd, exec_err.exit_code)
                raise exec_err from err
            raise err

        response.raise_for_status()
        if result is None:
            raise GraphQLError(f"unexpected response body from {self.url}", [])

        return result.get("data") or {}

    async def resolve(self, selection: Selection) -> Any:
        """Build and execute a selection, returning the value at its leaf."""
        query = await selection.build()
        data = await self.execute(query)
        return self._extract_path(data, selection.path)

    @staticmethod
    def _parse_body(response: httpx.Response) -> dict[str, Any] | None:
        """Decode a JSON object body, or None if the body isn't one.

        GraphQL errors may come with a non-2xx status, so the body is
        inspected before the status code.
        """
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    def _extract_path(self, data: Any, path: list[str]) -> Any:
        """Extract nested data at the given path.

        Lists along the path are mapped element-wise, so selecting
        ``envVariables.id`` yields a list of IDs.
        """
        result = data
        for i, segment in enumerate(path):
            if result is None:
                return None
            if isinstance(result, list):
                return [self._extract_path(item, path[i:]) for item in result]
            if isinstance(result, dict):
                result = result.get(segment)
            else:
                return None
        return result

    def _serialize_variables(self, variables: dict[str, Any]) -> dict[str, Any]:
        """Serialize variables for the GraphQL request.

        Handles Pydantic models by converting them to dicts.
        """
        result = {}
        for key, value in variables.items():
            if value is None:
                continue
            if isinstance(value, BaseModel):
                result[key] = value.model_dump(by_alias=True, exclude_none=True, mode="json")
            elif isinstance(value, list):
                result[key] = [
                    v.model_dump(by_alias=True, exclude_none=True, mode="json")
                    if isinstance(v, BaseModel) else v
                    for v in value
                ]
            else:
                result[key] = value
        return result
