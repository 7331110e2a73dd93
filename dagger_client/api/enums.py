"""Enums of the engine schema. Values are the wire names."""

from enum import Enum

from ..core.scalars import EnumHandler, default_registry


class CacheSharingMode(str, Enum):
    """Sharing mode of the cache volume."""
    LOCKED = "LOCKED"  # shared, but writes are serialized
    PRIVATE = "PRIVATE"  # one cache per build pipeline
    SHARED = "SHARED"


class ImageLayerCompression(str, Enum):
    """Compression algorithm to use for image layers."""
    ESTARGZ = "EStarGZ"
    GZIP = "Gzip"
    UNCOMPRESSED = "Uncompressed"
    ZSTD = "Zstd"


class ImageMediaTypes(str, Enum):
    """Mediatypes to use in published or exported image metadata."""
    DOCKER_MEDIA_TYPES = "DockerMediaTypes"
    OCI_MEDIA_TYPES = "OCIMediaTypes"


class ModuleSourceKind(str, Enum):
    """The kind of module source."""
    GIT_SOURCE = "GIT_SOURCE"
    LOCAL_SOURCE = "LOCAL_SOURCE"


class NetworkProtocol(str, Enum):
    """Transport layer network protocol associated to a port."""
    TCP = "TCP"
    UDP = "UDP"


class TypeDefKind(str, Enum):
    """Distinguishes the different kinds of TypeDefs."""
    BOOLEAN_KIND = "BOOLEAN_KIND"
    # only used when representing the core API via TypeDefs
    INPUT_KIND = "INPUT_KIND"
    INTEGER_KIND = "INTEGER_KIND"
    INTERFACE_KIND = "INTERFACE_KIND"
    LIST_KIND = "LIST_KIND"
    OBJECT_KIND = "OBJECT_KIND"
    STRING_KIND = "STRING_KIND"
    # the outer TypeDef of a void result is always optional
    VOID_KIND = "VOID_KIND"


for _enum in (
    CacheSharingMode,
    ImageLayerCompression,
    ImageMediaTypes,
    ModuleSourceKind,
    NetworkProtocol,
    TypeDefKind,
):
    default_registry.register(_enum.__name__, EnumHandler(_enum))
