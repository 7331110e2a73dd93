"""Tests for custom scalar handlers."""

import pytest

from dagger_client.api.enums import NetworkProtocol, TypeDefKind
from dagger_client.core.scalars import (
    EnumHandler,
    JSONHandler,
    ScalarHandler,
    ScalarRegistry,
    VoidHandler,
    default_registry,
)


class TestJSONHandler:
    """Tests for JSONHandler."""

    def test_serialize(self):
        """Test values are encoded as a JSON string."""
        handler = JSONHandler()
        assert handler.serialize({"a": [1, 2]}) == '{"a": [1, 2]}'

    def test_serialize_none(self):
        """Test None encodes as JSON null."""
        assert JSONHandler().serialize(None) == "null"

    def test_deserialize(self):
        """Test JSON strings are decoded."""
        handler = JSONHandler()
        assert handler.deserialize('{"a": 1}') == {"a": 1}

    def test_deserialize_empty(self):
        """Test empty and null values decode to None."""
        handler = JSONHandler()
        assert handler.deserialize("") is None
        assert handler.deserialize(None) is None

    def test_deserialize_already_decoded(self):
        handler = JSONHandler()
        assert handler.deserialize({"a": 1}) == {"a": 1}


class TestVoidHandler:
    """Tests for VoidHandler."""

    def test_always_none(self):
        """Test both directions always produce None."""
        handler = VoidHandler()
        assert handler.deserialize(None) is None
        assert handler.deserialize("anything") is None
        assert handler.serialize(1) is None


class TestEnumHandler:
    """Tests for EnumHandler."""

    def test_round_trip(self):
        """Test members encode to their value and decode back."""
        handler = EnumHandler(NetworkProtocol)
        assert handler.serialize(NetworkProtocol.UDP) == "UDP"
        assert handler.deserialize("UDP") is NetworkProtocol.UDP

    def test_none(self):
        assert EnumHandler(NetworkProtocol).deserialize(None) is None

    def test_unknown_value_kept_as_string(self):
        """Test values missing from the enum are returned unchanged."""
        value = EnumHandler(TypeDefKind).deserialize("FLOAT_KIND")
        assert value == "FLOAT_KIND"
        assert not isinstance(value, TypeDefKind)


class TestScalarRegistry:
    """Tests for ScalarRegistry."""

    def test_default_handlers(self):
        """Test JSON and Void are registered out of the box."""
        registry = ScalarRegistry()
        assert isinstance(registry.get("JSON"), JSONHandler)
        assert isinstance(registry.get("Void"), VoidHandler)

    def test_register_custom(self):
        """Test custom handlers are used in both directions."""
        class UpperHandler:
            def serialize(self, value):
                return value.lower()

            def deserialize(self, value):
                return value.upper()

        registry = ScalarRegistry()
        registry.register("Shout", UpperHandler())
        assert isinstance(registry.get("Shout"), ScalarHandler)
        assert registry.deserialize("Shout", "hey") == "HEY"
        assert registry.serialize("Shout", "HEY") == "hey"

    def test_register_rejects_incomplete_handler(self):
        """Test handlers without serialize are refused."""
        class DecodeOnly:
            def deserialize(self, value):
                return value

        registry = ScalarRegistry()
        with pytest.raises(TypeError, match="DecodeOnly"):
            registry.register("Half", DecodeOnly())
        assert registry.get("Half") is None

    def test_unregistered_passthrough(self):
        """Test unknown scalars pass through unchanged."""
        registry = ScalarRegistry()
        assert registry.get("Platform") is None
        assert registry.deserialize("Platform", "linux/amd64") == "linux/amd64"
        assert registry.serialize("Platform", "linux/arm64") == "linux/arm64"

    def test_serialize_by_name(self):
        registry = ScalarRegistry()
        assert registry.serialize("JSON", [1, "a"]) == '[1, "a"]'
        assert registry.serialize("Void", "ignored") is None

    def test_enums_registered_by_default(self):
        """Test every engine enum has a handler in the default registry."""
        assert default_registry.deserialize("TypeDefKind", "LIST_KIND") is TypeDefKind.LIST_KIND
        assert default_registry.serialize("NetworkProtocol", NetworkProtocol.TCP) == "TCP"
