"""Tests for the lazy query builder."""

import math
from enum import Enum

import pytest

from dagger_client.api.enums import NetworkProtocol
from dagger_client.api.inputs import BuildArg, PortForward
from dagger_client.core.query_builder import Selection, is_zero_value


class FakeHandle:
    """Stands in for a handle: passed to the engine by ID."""

    def __init__(self, id_):
        self._id = id_

    async def id(self):
        return self._id


class TestIsZeroValue:
    """Tests for is_zero_value."""

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", [], (), {}])
    def test_zero(self, value):
        """Test zero values of every supported kind."""
        assert is_zero_value(value)

    @pytest.mark.parametrize("value", [True, 1, -1, 0.5, "x", ["a"], ("a",), {"a": 1}])
    def test_non_zero(self, value):
        assert not is_zero_value(value)

    def test_enum_is_never_zero(self):
        """Test enum members count as set even with an empty value."""
        class Empty(str, Enum):
            BLANK = ""

        assert not is_zero_value(Empty.BLANK)

    def test_handle_is_not_zero(self):
        assert not is_zero_value(FakeHandle("id"))


class TestSelection:
    """Tests for Selection."""

    def test_immutable(self):
        """Test select returns a new selection and leaves the receiver alone."""
        root = Selection().select("container")
        child = root.select("stdout")
        assert root.path == ["container"]
        assert child.path == ["container", "stdout"]

    def test_arg_without_field(self):
        """Test arguments need a selected field."""
        with pytest.raises(ValueError):
            Selection().arg("id", "x")

    def test_arg_replaces_same_name(self):
        """Test setting an argument twice keeps the last value."""
        q = Selection().select("container").arg("platform", "a").arg("platform", "b")
        assert q.fields[-1].args == (("platform", "b"),)

    def test_repr(self):
        assert repr(Selection()) == "Selection(<root>)"
        assert repr(Selection().select("host").select("directory")) == "Selection(host.directory)"

    @pytest.mark.asyncio
    async def test_build_empty(self):
        with pytest.raises(ValueError):
            await Selection().build()

    @pytest.mark.asyncio
    async def test_build_nested(self):
        """Test nested fields render as nested selection sets."""
        q = (
            Selection()
            .select("container")
            .select("from")
            .arg("address", "alpine")
            .select("stdout")
        )
        query = await q.build()
        assert query.startswith("{")
        assert "container {" in query
        assert 'from(address: "alpine") {' in query
        assert "stdout" in query

    @pytest.mark.asyncio
    async def test_build_scalar_arguments(self):
        """Test literals for strings, lists, null, ints, floats and booleans."""
        q = (
            Selection()
            .select("container")
            .select("withExec")
            .arg("args", ["echo", 'a"b'])
            .arg("expect", None)
            .select("withNewFile")
            .arg("permissions", 420)
            .arg("ratio", 1.5)
            .arg("force", True)
        )
        query = await q.build()
        assert 'withExec(args: ["echo", "a\\"b"], expect: null)' in query
        assert "withNewFile(permissions: 420, ratio: 1.5, force: true)" in query

    @pytest.mark.asyncio
    async def test_build_enum_is_literal(self):
        q = Selection().select("container").select("withExposedPort").arg("port", 53).arg(
            "protocol", NetworkProtocol.UDP
        )
        query = await q.build()
        assert "withExposedPort(port: 53, protocol: UDP)" in query

    @pytest.mark.asyncio
    async def test_build_handle_by_id(self):
        """Test handles are sent as their ID."""
        q = Selection().select("container").select("withRootfs").arg(
            "directory", FakeHandle("dir-123")
        )
        query = await q.build()
        assert 'withRootfs(directory: "dir-123")' in query

    @pytest.mark.asyncio
    async def test_build_input_objects(self):
        """Test pydantic inputs render as object literals."""
        q = (
            Selection()
            .select("host")
            .select("service")
            .arg("ports", [PortForward(backend=80, frontend=8080)])
            .select("directory")
            .arg("buildArgs", [BuildArg(name="GO_VERSION", value="1.22")])
        )
        query = await q.build()
        compact = "".join(query.split())
        # unset optional fields are left out
        assert "service(ports:[{backend:80,frontend:8080}])" in compact
        assert 'directory(buildArgs:[{name:"GO_VERSION",value:"1.22"}])' in compact

    @pytest.mark.asyncio
    async def test_build_unsupported_value(self):
        q = Selection().select("container").arg("id", object())
        with pytest.raises(TypeError):
            await q.build()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    async def test_build_non_finite_float(self, value):
        """Test infinities and NaN have no GraphQL literal."""
        q = Selection().select("withNewFile").arg("ratio", value)
        with pytest.raises(ValueError, match="non-finite"):
            await q.build()
