"""Tests for the GraphQL executor."""

import json

import httpx
import pytest

from dagger_client.api.inputs import PortForward
from dagger_client.core.auth import SessionTokenAuth
from dagger_client.core.errors import ExecError, GraphQLError
from dagger_client.core.executor import GraphQLExecutor
from dagger_client.core.query_builder import Selection

ENDPOINT = "http://127.0.0.1:8080/query"


class TestExecute:
    """Tests for GraphQLExecutor.execute."""

    @pytest.mark.asyncio
    async def test_returns_data(self, engine, executor):
        """Test the query is POSTed and its data returned."""
        engine.reply({"defaultPlatform": "linux/amd64"})

        data = await executor.execute("{ defaultPlatform }")

        assert data == {"defaultPlatform": "linux/amd64"}
        request = engine.requests[0]
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert json.loads(request.content) == {"query": "{ defaultPlatform }"}

    @pytest.mark.asyncio
    async def test_null_data(self, engine, executor):
        """Test null data becomes an empty dict."""
        engine.reply(None)
        assert await executor.execute("{ a }") == {}

    @pytest.mark.asyncio
    async def test_auth_headers(self, engine):
        """Test auth headers are sent with each request."""
        executor = GraphQLExecutor(ENDPOINT, SessionTokenAuth("tok"), transport=engine.transport)
        engine.reply({"a": 1})

        await executor.execute("{ a }")

        headers = engine.requests[0].headers
        assert headers["Authorization"] == SessionTokenAuth("tok").get_headers()["Authorization"]
        assert headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_variables_serialized(self, engine, executor):
        """Test pydantic variables are dumped and None variables dropped."""
        engine.reply({"a": 1})
        await executor.execute("query($p: [PortForward!]) { a }", {
            "p": [PortForward(backend=80)],
            "skip": None,
        })

        payload = json.loads(engine.requests[0].content)
        assert payload["variables"] == {"p": [{"backend": 80}]}

    @pytest.mark.asyncio
    async def test_graphql_error(self, engine, executor):
        """Test messages of all entries are joined."""
        engine.reply(None, errors=[{"message": "first"}, {"message": "second"}])

        with pytest.raises(GraphQLError) as exc_info:
            await executor.execute("{ a }")

        assert not isinstance(exc_info.value, ExecError)
        assert str(exc_info.value) == "first; second"
        assert len(exc_info.value.errors) == 2

    @pytest.mark.asyncio
    async def test_string_error_entries(self, engine, executor):
        """Test bare string entries still produce a readable GraphQLError."""
        engine.reply(None, errors=["boom"])

        with pytest.raises(GraphQLError) as exc_info:
            await executor.execute("{ x }")

        assert str(exc_info.value) == "boom"
        assert exc_info.value.extensions == {}

    @pytest.mark.asyncio
    async def test_exec_error_is_classified(self, engine, executor):
        """Test EXEC_ERROR entries raise ExecError chained to the GraphQLError."""
        engine.reply(None, errors=[{
            "message": "process did not complete successfully: exit code: 2",
            "extensions": {
                "_type": "EXEC_ERROR",
                "cmd": ["sh", "-c", "false"],
                "exitCode": 2,
                "stdout": "",
                "stderr": "nope",
            },
        }])

        with pytest.raises(ExecError) as exc_info:
            await executor.execute("{ a }")

        err = exc_info.value
        assert err.exit_code == 2
        assert err.cmd == ["sh", "-c", "false"]
        assert isinstance(err.__cause__, GraphQLError)
        assert err.original is err.__cause__
        assert str(err).endswith("\nStderr:\nnope")

    @pytest.mark.asyncio
    async def test_errors_checked_before_status(self, engine, executor):
        """GraphQL errors sent with an error status are still classified."""
        engine.reply(None, errors=[{"message": "bad", "extensions": {"_type": "EXEC_ERROR"}}],
                     status_code=400)

        with pytest.raises(ExecError):
            await executor.execute("{ a }")

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, engine, executor):
        """Test a non-JSON error body raises HTTPStatusError."""
        engine.reply_raw(httpx.Response(502, text="bad gateway"))

        with pytest.raises(httpx.HTTPStatusError):
            await executor.execute("{ a }")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        executor = GraphQLExecutor(ENDPOINT, transport=httpx.MockTransport(refuse))
        with pytest.raises(httpx.ConnectError):
            await executor.execute("{ a }")

    @pytest.mark.asyncio
    async def test_close(self, engine, executor):
        """Test close releases the HTTP client."""
        engine.reply({"a": 1})
        await executor.execute("{ a }")
        await executor.close()
        assert executor._client is None
        # closing twice is harmless
        await executor.close()


class TestResolve:
    """Tests for GraphQLExecutor.resolve."""

    @pytest.mark.asyncio
    async def test_extracts_leaf(self, engine, executor):
        """Test the value at the end of the selection path is returned."""
        engine.reply({"container": {"from": {"stdout": "hello\n"}}})

        q = Selection().select("container").select("from").arg("address", "alpine").select("stdout")
        assert await executor.resolve(q) == "hello\n"

    @pytest.mark.asyncio
    async def test_maps_over_lists(self, engine, executor):
        """Test the remaining path is applied to each list element."""
        engine.reply({"container": {"envVariables": [{"id": "e1"}, {"id": "e2"}]}})

        q = Selection().select("container").select("envVariables").select("id")
        assert await executor.resolve(q) == ["e1", "e2"]

    @pytest.mark.asyncio
    async def test_missing_value_is_none(self, engine, executor):
        engine.reply({"container": None})

        q = Selection().select("container").select("stdout")
        assert await executor.resolve(q) is None
