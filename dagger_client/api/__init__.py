"""Typed handles for the engine's GraphQL schema.

Every module is imported here so that the handle registry knows all types
before the first query is built.
"""

from .base import ObjectType, Type, handle_class, load_from_id
from .client import Client
from .container import Container
from .enums import (
    CacheSharingMode,
    ImageLayerCompression,
    ImageMediaTypes,
    ModuleSourceKind,
    NetworkProtocol,
    TypeDefKind,
)
from .filesystem import Directory, File
from .git import GitRef, GitRepository
from .ids import (
    JSON,
    CacheVolumeID,
    ContainerID,
    CurrentModuleID,
    DirectoryID,
    EnvVariableID,
    FieldTypeDefID,
    FileID,
    FunctionArgID,
    FunctionCallArgValueID,
    FunctionCallID,
    FunctionID,
    GeneratedCodeID,
    GitModuleSourceID,
    GitRefID,
    GitRepositoryID,
    HostID,
    InputTypeDefID,
    InterfaceTypeDefID,
    LabelID,
    ListTypeDefID,
    LocalModuleSourceID,
    ModuleDependencyID,
    ModuleID,
    ModuleSourceID,
    ObjectTypeDefID,
    Platform,
    PortID,
    SecretID,
    ServiceID,
    SocketID,
    TerminalID,
    TypeDefID,
    Void,
)
from .inputs import BuildArg, PipelineLabel, PortForward
from .module import (
    CurrentModule,
    GeneratedCode,
    GitModuleSource,
    LocalModuleSource,
    Module,
    ModuleDependency,
    ModuleSource,
)
from .network import Host, Port, Service, Socket, Terminal
from .typedefs import (
    FieldTypeDef,
    Function,
    FunctionArg,
    FunctionCall,
    FunctionCallArgValue,
    InputTypeDef,
    InterfaceTypeDef,
    ListTypeDef,
    ObjectTypeDef,
    TypeDef,
)
from .values import CacheVolume, EnvVariable, Label, Secret

__all__ = [
    # Base
    "ObjectType",
    "Type",
    "handle_class",
    "load_from_id",
    # Objects
    "CacheVolume",
    "Client",
    "Container",
    "CurrentModule",
    "Directory",
    "EnvVariable",
    "FieldTypeDef",
    "File",
    "Function",
    "FunctionArg",
    "FunctionCall",
    "FunctionCallArgValue",
    "GeneratedCode",
    "GitModuleSource",
    "GitRef",
    "GitRepository",
    "Host",
    "InputTypeDef",
    "InterfaceTypeDef",
    "Label",
    "ListTypeDef",
    "LocalModuleSource",
    "Module",
    "ModuleDependency",
    "ModuleSource",
    "ObjectTypeDef",
    "Port",
    "Secret",
    "Service",
    "Socket",
    "Terminal",
    "TypeDef",
    # Enums
    "CacheSharingMode",
    "ImageLayerCompression",
    "ImageMediaTypes",
    "ModuleSourceKind",
    "NetworkProtocol",
    "TypeDefKind",
    # Inputs
    "BuildArg",
    "PipelineLabel",
    "PortForward",
    # Scalars
    "JSON",
    "Platform",
    "Void",
    "CacheVolumeID",
    "ContainerID",
    "CurrentModuleID",
    "DirectoryID",
    "EnvVariableID",
    "FieldTypeDefID",
    "FileID",
    "FunctionArgID",
    "FunctionCallArgValueID",
    "FunctionCallID",
    "FunctionID",
    "GeneratedCodeID",
    "GitModuleSourceID",
    "GitRefID",
    "GitRepositoryID",
    "HostID",
    "InputTypeDefID",
    "InterfaceTypeDefID",
    "LabelID",
    "ListTypeDefID",
    "LocalModuleSourceID",
    "ModuleDependencyID",
    "ModuleID",
    "ModuleSourceID",
    "ObjectTypeDefID",
    "PortID",
    "SecretID",
    "ServiceID",
    "SocketID",
    "TerminalID",
    "TypeDefID",
]
