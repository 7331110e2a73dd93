"""The root of the engine API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .base import Type, handle_class
from .ids import (
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
)
from .inputs import PipelineLabel

if TYPE_CHECKING:
    from .container import Container
    from .filesystem import Directory, File
    from .git import GitRef, GitRepository
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


class Client(Type):
    """Entry point of the API: every query starts from here.

    Example usage:
        async with Connection() as client:
            out = await (
                client.container()
                .from_("alpine:3.19")
                .with_exec(["echo", "hello"])
                .stdout()
            )
    """

    graphql_name = "Query"

    def _load(self, graphql_name: str, id: str) -> Any:
        """Select ``load<Type>FromID`` and keep the ID on the resulting handle."""
        q = self._select(f"load{graphql_name}FromID", {"id": id})
        return handle_class(graphql_name)(q, self._executor, id_=id)

    def blob(self, digest: str, size: int, media_type: str, uncompressed: str) -> Directory:
        """Retrieves a content-addressed blob.

        Args:
            digest: Digest of the blob
            size: Size of the blob
            media_type: Media type of the blob
            uncompressed: Digest of the uncompressed blob
        """
        return self._object("blob", "Directory", {
            "digest": digest,
            "size": size,
            "mediaType": media_type,
            "uncompressed": uncompressed,
        })

    def cache_volume(self, key: str) -> CacheVolume:
        """Constructs a cache volume for a given cache key."""
        return self._object("cacheVolume", "CacheVolume", {"key": key})

    async def check_version_compatibility(self, version: str) -> bool:
        """Checks if the current engine is compatible with an SDK's required version."""
        return await self._scalar("checkVersionCompatibility", {"version": version})

    def container(
        self, *, id: Optional[ContainerID] = None, platform: Optional[Platform] = None
    ) -> Container:
        """Creates a scratch container.

        Optional platform argument initializes new containers to execute and
        publish as that platform. Platform defaults to that of the builder's
        host.

        Args:
            id: Deprecated, use :meth:`load_container_from_id` instead.
            platform: Platform to initialize the container with.
        """
        return self._object("container", "Container", optional={"id": id, "platform": platform})

    def current_function_call(self) -> FunctionCall:
        """The FunctionCall context that the SDK caller is currently executing in.

        If the caller is not currently executing in a function, this will
        return an error.
        """
        return self._object("currentFunctionCall", "FunctionCall")

    def current_module(self) -> CurrentModule:
        """The module currently being served in the session, if any."""
        return self._object("currentModule", "CurrentModule")

    async def current_type_defs(self) -> list[TypeDef]:
        """The TypeDef representations of the objects currently being served in the session."""
        return await self._object_list("currentTypeDefs", "TypeDef")

    async def default_platform(self) -> Platform:
        """The default platform of the engine."""
        return await self._scalar("defaultPlatform")

    def directory(self, *, id: Optional[DirectoryID] = None) -> Directory:
        """Creates an empty directory.

        Args:
            id: Deprecated, use :meth:`load_directory_from_id` instead.
        """
        return self._object("directory", "Directory", optional={"id": id})

    def file(self, id: FileID) -> File:
        """Deprecated, use :meth:`load_file_from_id` instead."""
        return self._object("file", "File", {"id": id})

    def function(self, name: str, return_type: TypeDef) -> Function:
        """Creates a function."""
        return self._object("function", "Function", {"name": name, "returnType": return_type})

    def generated_code(self, code: Directory) -> GeneratedCode:
        """Create a code generation result, given a directory containing the generated code."""
        return self._object("generatedCode", "GeneratedCode", {"code": code})

    def git(
        self,
        url: str,
        *,
        keep_git_dir: Optional[bool] = None,
        experimental_service_host: Optional[Service] = None,
        ssh_known_hosts: Optional[str] = None,
        ssh_auth_socket: Optional[Socket] = None,
    ) -> GitRepository:
        """Queries a Git repository.

        Args:
            url: Url of the git repository. Can be formatted as
                ``https://{host}/{owner}/{repo}`` or ``git@{host}:{owner}/{repo}``.
                Suffix ".git" is optional.
            keep_git_dir: Set to true to keep .git directory.
            experimental_service_host: A service which must be started
                before the repo is fetched.
            ssh_known_hosts: Set SSH known hosts
            ssh_auth_socket: Set SSH auth socket
        """
        return self._object("git", "GitRepository", {"url": url}, {
            "keepGitDir": keep_git_dir,
            "experimentalServiceHost": experimental_service_host,
            "sshKnownHosts": ssh_known_hosts,
            "sshAuthSocket": ssh_auth_socket,
        })

    def host(self) -> Host:
        """Queries the host environment."""
        return self._object("host", "Host")

    def http(self, url: str, *, experimental_service_host: Optional[Service] = None) -> File:
        """Returns a file containing an http remote url content."""
        return self._object("http", "File", {"url": url}, {
            "experimentalServiceHost": experimental_service_host,
        })

    def load_cache_volume_from_id(self, id: CacheVolumeID) -> CacheVolume:
        """Load a CacheVolume from its ID."""
        return self._load("CacheVolume", id)

    def load_container_from_id(self, id: ContainerID) -> Container:
        """Load a Container from its ID."""
        return self._load("Container", id)

    def load_current_module_from_id(self, id: CurrentModuleID) -> CurrentModule:
        return self._load("CurrentModule", id)

    def load_directory_from_id(self, id: DirectoryID) -> Directory:
        """Load a Directory from its ID."""
        return self._load("Directory", id)

    def load_env_variable_from_id(self, id: EnvVariableID) -> EnvVariable:
        return self._load("EnvVariable", id)

    def load_field_type_def_from_id(self, id: FieldTypeDefID) -> FieldTypeDef:
        return self._load("FieldTypeDef", id)

    def load_file_from_id(self, id: FileID) -> File:
        """Load a File from its ID."""
        return self._load("File", id)

    def load_function_arg_from_id(self, id: FunctionArgID) -> FunctionArg:
        return self._load("FunctionArg", id)

    def load_function_call_arg_value_from_id(self, id: FunctionCallArgValueID) -> FunctionCallArgValue:
        return self._load("FunctionCallArgValue", id)

    def load_function_call_from_id(self, id: FunctionCallID) -> FunctionCall:
        return self._load("FunctionCall", id)

    def load_function_from_id(self, id: FunctionID) -> Function:
        return self._load("Function", id)

    def load_generated_code_from_id(self, id: GeneratedCodeID) -> GeneratedCode:
        return self._load("GeneratedCode", id)

    def load_git_module_source_from_id(self, id: GitModuleSourceID) -> GitModuleSource:
        return self._load("GitModuleSource", id)

    def load_git_ref_from_id(self, id: GitRefID) -> GitRef:
        return self._load("GitRef", id)

    def load_git_repository_from_id(self, id: GitRepositoryID) -> GitRepository:
        return self._load("GitRepository", id)

    def load_host_from_id(self, id: HostID) -> Host:
        return self._load("Host", id)

    def load_input_type_def_from_id(self, id: InputTypeDefID) -> InputTypeDef:
        return self._load("InputTypeDef", id)

    def load_interface_type_def_from_id(self, id: InterfaceTypeDefID) -> InterfaceTypeDef:
        return self._load("InterfaceTypeDef", id)

    def load_label_from_id(self, id: LabelID) -> Label:
        return self._load("Label", id)

    def load_list_type_def_from_id(self, id: ListTypeDefID) -> ListTypeDef:
        return self._load("ListTypeDef", id)

    def load_local_module_source_from_id(self, id: LocalModuleSourceID) -> LocalModuleSource:
        return self._load("LocalModuleSource", id)

    def load_module_dependency_from_id(self, id: ModuleDependencyID) -> ModuleDependency:
        return self._load("ModuleDependency", id)

    def load_module_from_id(self, id: ModuleID) -> Module:
        """Load a Module from its ID."""
        return self._load("Module", id)

    def load_module_source_from_id(self, id: ModuleSourceID) -> ModuleSource:
        return self._load("ModuleSource", id)

    def load_object_type_def_from_id(self, id: ObjectTypeDefID) -> ObjectTypeDef:
        return self._load("ObjectTypeDef", id)

    def load_port_from_id(self, id: PortID) -> Port:
        return self._load("Port", id)

    def load_secret_from_id(self, id: SecretID) -> Secret:
        """Load a Secret from its ID."""
        return self._load("Secret", id)

    def load_service_from_id(self, id: ServiceID) -> Service:
        """Load a Service from its ID."""
        return self._load("Service", id)

    def load_socket_from_id(self, id: SocketID) -> Socket:
        return self._load("Socket", id)

    def load_terminal_from_id(self, id: TerminalID) -> Terminal:
        return self._load("Terminal", id)

    def load_type_def_from_id(self, id: TypeDefID) -> TypeDef:
        return self._load("TypeDef", id)

    def module(self) -> Module:
        """Create a new module."""
        return self._object("module", "Module")

    def module_dependency(self, source: ModuleSource, *, name: Optional[str] = None) -> ModuleDependency:
        """Create a new module dependency configuration from a module source and name.

        Args:
            source: The source for the dependency module.
            name: If set, the name to use for the dependency. Otherwise, once
                installed to a parent module, the name of the dependency
                module will be used by default.
        """
        return self._object("moduleDependency", "ModuleDependency", {"source": source}, {
            "name": name,
        })

    def module_source(self, ref_string: str, *, stable: Optional[bool] = None) -> ModuleSource:
        """Create a new module source instance from a source ref string.

        Args:
            ref_string: The string ref representation of the module source
            stable: If true, enforce that the source is a stable version for
                source kinds that support versioning.
        """
        return self._object("moduleSource", "ModuleSource", {"refString": ref_string}, {
            "stable": stable,
        })

    def pipeline(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        labels: Optional[list[PipelineLabel]] = None,
    ) -> Client:
        """Creates a named sub-pipeline."""
        return self._object("pipeline", "Query", {"name": name}, {
            "description": description,
            "labels": labels,
        })

    def secret(self, name: str) -> Secret:
        """Reference a secret by name."""
        return self._object("secret", "Secret", {"name": name})

    def set_secret(self, name: str, plaintext: str) -> Secret:
        """Sets a secret given a user defined name to its plaintext and returns the secret.

        The plaintext value is limited to a size of 128000 bytes.
        """
        return self._object("setSecret", "Secret", {"name": name, "plaintext": plaintext})

    def socket(self, id: SocketID) -> Socket:
        """Deprecated, use :meth:`load_socket_from_id` instead."""
        return self._object("socket", "Socket", {"id": id})

    def type_def(self) -> TypeDef:
        """Create a new TypeDef."""
        return self._object("typeDef", "TypeDef")
