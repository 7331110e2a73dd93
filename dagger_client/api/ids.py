"""Scalar types of the engine schema.

Object IDs are opaque strings; the aliases document which object an ID
refers to.
"""

from typing import Any, NewType

CacheVolumeID = NewType("CacheVolumeID", str)
ContainerID = NewType("ContainerID", str)
CurrentModuleID = NewType("CurrentModuleID", str)
DirectoryID = NewType("DirectoryID", str)
EnvVariableID = NewType("EnvVariableID", str)
FieldTypeDefID = NewType("FieldTypeDefID", str)
FileID = NewType("FileID", str)
FunctionArgID = NewType("FunctionArgID", str)
FunctionCallArgValueID = NewType("FunctionCallArgValueID", str)
FunctionCallID = NewType("FunctionCallID", str)
FunctionID = NewType("FunctionID", str)
GeneratedCodeID = NewType("GeneratedCodeID", str)
GitModuleSourceID = NewType("GitModuleSourceID", str)
GitRefID = NewType("GitRefID", str)
GitRepositoryID = NewType("GitRepositoryID", str)
HostID = NewType("HostID", str)
InputTypeDefID = NewType("InputTypeDefID", str)
InterfaceTypeDefID = NewType("InterfaceTypeDefID", str)
LabelID = NewType("LabelID", str)
ListTypeDefID = NewType("ListTypeDefID", str)
LocalModuleSourceID = NewType("LocalModuleSourceID", str)
ModuleDependencyID = NewType("ModuleDependencyID", str)
ModuleID = NewType("ModuleID", str)
ModuleSourceID = NewType("ModuleSourceID", str)
ObjectTypeDefID = NewType("ObjectTypeDefID", str)
PortID = NewType("PortID", str)
SecretID = NewType("SecretID", str)
ServiceID = NewType("ServiceID", str)
SocketID = NewType("SocketID", str)
TerminalID = NewType("TerminalID", str)
TypeDefID = NewType("TypeDefID", str)

# The platform config OS and architecture in a Container, e.g. "linux/amd64".
Platform = NewType("Platform", str)

# Any JSON-encodable value.
JSON = Any

# Placeholder result of resolvers that do not return anything.
Void = None
