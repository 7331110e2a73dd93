"""An OCI-compatible container, also known as a Docker container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import ObjectType
from .enums import CacheSharingMode, ImageLayerCompression, ImageMediaTypes, NetworkProtocol
from .ids import Platform
from .inputs import BuildArg, PipelineLabel

if TYPE_CHECKING:
    from .filesystem import Directory, File
    from .network import Port, Service, Socket, Terminal
    from .values import CacheVolume, EnvVariable, Label, Secret


class Container(ObjectType):
    """An OCI-compatible container, also known as a Docker container."""

    graphql_name = "Container"

    def as_service(self) -> Service:
        """Turn the container into a Service.

        Be sure to set any exposed ports before this conversion.
        """
        return self._object("asService", "Service")

    def as_tarball(
        self,
        *,
        platform_variants: Optional[list[Container]] = None,
        forced_compression: Optional[ImageLayerCompression] = None,
        media_types: Optional[ImageMediaTypes] = None,
    ) -> File:
        """Returns a File representing the container serialized to a tarball."""
        return self._object("asTarball", "File", optional={
            "platformVariants": platform_variants,
            "forcedCompression": forced_compression,
            "mediaTypes": media_types,
        })

    def build(
        self,
        context: Directory,
        *,
        dockerfile: Optional[str] = None,
        target: Optional[str] = None,
        build_args: Optional[list[BuildArg]] = None,
        secrets: Optional[list[Secret]] = None,
    ) -> Container:
        """Initializes this container from a Dockerfile build.

        Args:
            context: Directory context used by the Dockerfile
            dockerfile: Path to the Dockerfile to use
            target: Target build stage to build
            build_args: Additional build arguments
            secrets: Secrets to pass to the build, mounted at
                /run/secrets/[secret-name] in the build container
        """
        return self._object("build", "Container", {"context": context}, {
            "dockerfile": dockerfile,
            "target": target,
            "buildArgs": build_args,
            "secrets": secrets,
        })

    async def default_args(self) -> list[str]:
        """Retrieves default arguments for future commands."""
        return await self._scalar("defaultArgs")

    def directory(self, path: str) -> Directory:
        """Retrieves a directory at the given path. Mounts are included."""
        return self._object("directory", "Directory", {"path": path})

    async def entrypoint(self) -> list[str]:
        """Retrieves entrypoint to be prepended to the arguments of all commands."""
        return await self._scalar("entrypoint")

    async def env_variable(self, name: str) -> Optional[str]:
        """Retrieves the value of the specified environment variable."""
        return await self._scalar("envVariable", {"name": name})

    async def env_variables(self) -> list[EnvVariable]:
        """Retrieves the list of environment variables passed to commands."""
        return await self._object_list("envVariables", "EnvVariable")

    def experimental_with_all_gpus(self) -> Container:
        """Configures all available GPUs on the host to be accessible to this container.

        Experimental; currently works for Nvidia devices only.
        """
        return self._object("experimentalWithAllGPUs", "Container")

    def experimental_with_gpu(self, devices: list[str]) -> Container:
        """Configures the provided list of devices to be accessible to this container.

        Experimental; currently works for Nvidia devices only.
        """
        return self._object("experimentalWithGPU", "Container", {"devices": devices})

    async def export(
        self,
        path: str,
        *,
        platform_variants: Optional[list[Container]] = None,
        forced_compression: Optional[ImageLayerCompression] = None,
        media_types: Optional[ImageMediaTypes] = None,
    ) -> bool:
        """Writes the container as an OCI tarball to the destination file path on the host.

        Return true on success. It can also export platform variants.
        """
        return await self._scalar("export", {"path": path}, {
            "platformVariants": platform_variants,
            "forcedCompression": forced_compression,
            "mediaTypes": media_types,
        })

    async def exposed_ports(self) -> list[Port]:
        """Retrieves the list of exposed ports.

        This includes ports already exposed by the image, even if not
        explicitly added.
        """
        return await self._object_list("exposedPorts", "Port")

    def file(self, path: str) -> File:
        """Retrieves a file at the given path. Mounts are included."""
        return self._object("file", "File", {"path": path})

    def from_(self, address: str) -> Container:
        """Initializes this container from a pulled base image.

        Args:
            address: Image's address from its registry,
                e.g. "docker.io/library/alpine:3.19"
        """
        return self._object("from", "Container", {"address": address})

    async def image_ref(self) -> str:
        """The unique image reference which can only be retrieved immediately after from_."""
        return await self._scalar("imageRef")

    def import_(self, source: File, *, tag: Optional[str] = None) -> Container:
        """Reads the container from an OCI tarball."""
        return self._object("import", "Container", {"source": source}, {"tag": tag})

    async def label(self, name: str) -> Optional[str]:
        """Retrieves the value of the specified label."""
        return await self._scalar("label", {"name": name})

    async def labels(self) -> list[Label]:
        """Retrieves the list of labels passed to container."""
        return await self._object_list("labels", "Label")

    async def mounts(self) -> list[str]:
        """Retrieves the list of paths where a directory is mounted."""
        return await self._scalar("mounts")

    def pipeline(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        labels: Optional[list[PipelineLabel]] = None,
    ) -> Container:
        """Creates a named sub-pipeline."""
        return self._object("pipeline", "Container", {"name": name}, {
            "description": description,
            "labels": labels,
        })

    async def platform(self) -> Platform:
        """The platform this container executes and publishes as."""
        return await self._scalar("platform")

    async def publish(
        self,
        address: str,
        *,
        platform_variants: Optional[list[Container]] = None,
        forced_compression: Optional[ImageLayerCompression] = None,
        media_types: Optional[ImageMediaTypes] = None,
    ) -> str:
        """Publishes this container as a new image to the specified address.

        Publish returns a fully qualified ref. It can also publish platform
        variants.
        """
        return await self._scalar("publish", {"address": address}, {
            "platformVariants": platform_variants,
            "forcedCompression": forced_compression,
            "mediaTypes": media_types,
        })

    def rootfs(self) -> Directory:
        """Retrieves this container's root filesystem. Mounts are not included."""
        return self._object("rootfs", "Directory")

    async def stderr(self) -> str:
        """The error stream of the last executed command.

        Will execute default command if none is set, or error if there's no
        default.
        """
        return await self._scalar("stderr")

    async def stdout(self) -> str:
        """The output stream of the last executed command.

        Will execute default command if none is set, or error if there's no
        default.
        """
        return await self._scalar("stdout")

    async def sync(self) -> Container:
        """Forces evaluation of the pipeline in the engine.

        It doesn't run the default command if no exec has been set.
        """
        return await self._sync("sync")

    def terminal(self, *, cmd: Optional[list[str]] = None) -> Terminal:
        """Return an interactive terminal for this container using its configured default terminal command if not overridden by args (or sh as a fallback default)."""
        return self._object("terminal", "Terminal", optional={"cmd": cmd})

    async def user(self) -> str:
        """Retrieves the user to be set for all commands."""
        return await self._scalar("user")

    def with_default_args(self, args: list[str]) -> Container:
        """Configures default arguments for future commands."""
        return self._object("withDefaultArgs", "Container", {"args": args})

    def with_default_terminal_cmd(self, args: list[str]) -> Container:
        """Set the default command to invoke for the container's terminal API."""
        return self._object("withDefaultTerminalCmd", "Container", {"args": args})

    def with_directory(
        self,
        path: str,
        directory: Directory,
        *,
        exclude: Optional[list[str]] = None,
        include: Optional[list[str]] = None,
        owner: Optional[str] = None,
    ) -> Container:
        """Retrieves this container plus a directory written at the given path.

        Args:
            path: Location of the written directory (e.g., "/tmp/directory")
            directory: Identifier of the directory to write
            exclude: Patterns to exclude in the written directory
            include: Patterns to include in the written directory
            owner: A user:group to set for the directory and its contents
        """
        return self._object("withDirectory", "Container", {"path": path, "directory": directory}, {
            "exclude": exclude,
            "include": include,
            "owner": owner,
        })

    def with_entrypoint(self, args: list[str], *, keep_default_args: Optional[bool] = None) -> Container:
        """Retrieves this container but with a different command entrypoint."""
        return self._object("withEntrypoint", "Container", {"args": args}, {
            "keepDefaultArgs": keep_default_args,
        })

    def with_env_variable(self, name: str, value: str, *, expand: Optional[bool] = None) -> Container:
        """Retrieves this container plus the given environment variable.

        Args:
            name: The name of the environment variable (e.g., "HOST")
            value: The value of the environment variable (e.g., "localhost")
            expand: Replace `${VAR}` or `$VAR` in the value according to the
                current environment variables defined in the container
        """
        return self._object("withEnvVariable", "Container", {"name": name, "value": value}, {
            "expand": expand,
        })

    def with_exec(
        self,
        args: list[str],
        *,
        skip_entrypoint: Optional[bool] = None,
        stdin: Optional[str] = None,
        redirect_stdout: Optional[str] = None,
        redirect_stderr: Optional[str] = None,
        experimental_privileged_nesting: Optional[bool] = None,
        insecure_root_capabilities: Optional[bool] = None,
    ) -> Container:
        """Retrieves this container after executing the specified command inside it.

        Args:
            args: Command to run instead of the container's default command
                (e.g., ["run", "main.go"])
            skip_entrypoint: If the container has an entrypoint, ignore it
                for args rather than using it to wrap them
            stdin: Content to write to the command's standard input before
                closing
            redirect_stdout: Redirect the command's standard output to a
                file in the container (e.g., "/tmp/stdout")
            redirect_stderr: Redirect the command's standard error to a
                file in the container (e.g., "/tmp/stderr")
            experimental_privileged_nesting: Provides engine access to the
                executed command. The command is granted full access to
                the host filesystem.
            insecure_root_capabilities: Execute the command with all root
                capabilities, like "docker run --privileged"
        """
        return self._object("withExec", "Container", {"args": args}, {
            "skipEntrypoint": skip_entrypoint,
            "stdin": stdin,
            "redirectStdout": redirect_stdout,
            "redirectStderr": redirect_stderr,
            "experimentalPrivilegedNesting": experimental_privileged_nesting,
            "insecureRootCapabilities": insecure_root_capabilities,
        })

    def with_exposed_port(
        self,
        port: int,
        *,
        protocol: Optional[NetworkProtocol] = None,
        description: Optional[str] = None,
        experimental_skip_healthcheck: Optional[bool] = None,
    ) -> Container:
        """Expose a network port.

        Exposed ports serve two purposes: they provide information about
        which ports a service listens on, and they let services health-check
        the container before it is considered started.
        """
        return self._object("withExposedPort", "Container", {"port": port}, {
            "protocol": protocol,
            "description": description,
            "experimentalSkipHealthcheck": experimental_skip_healthcheck,
        })

    def with_file(
        self,
        path: str,
        source: File,
        *,
        permissions: Optional[int] = None,
        owner: Optional[str] = None,
    ) -> Container:
        """Retrieves this container plus the contents of the given file copied to the given path."""
        return self._object("withFile", "Container", {"path": path, "source": source}, {
            "permissions": permissions,
            "owner": owner,
        })

    def with_files(
        self,
        path: str,
        sources: list[File],
        *,
        permissions: Optional[int] = None,
        owner: Optional[str] = None,
    ) -> Container:
        """Retrieves this container plus the contents of the given files copied to the given path."""
        return self._object("withFiles", "Container", {"path": path, "sources": sources}, {
            "permissions": permissions,
            "owner": owner,
        })

    def with_focus(self) -> Container:
        """Indicate that subsequent operations should be featured more prominently in the UI."""
        return self._object("withFocus", "Container")

    def with_label(self, name: str, value: str) -> Container:
        """Retrieves this container plus the given label."""
        return self._object("withLabel", "Container", {"name": name, "value": value})

    def with_mounted_cache(
        self,
        path: str,
        cache: CacheVolume,
        *,
        source: Optional[Directory] = None,
        sharing: Optional[CacheSharingMode] = None,
        owner: Optional[str] = None,
    ) -> Container:
        """Retrieves this container plus a cache volume mounted at the given path.

        Args:
            path: Location of the cache directory (e.g., "/cache/node_modules")
            cache: Identifier of the cache volume to mount
            source: Identifier of the directory to use as the cache volume's root
            sharing: Sharing mode of the cache volume
            owner: A user:group to set for the mounted cache directory
        """
        return self._object("withMountedCache", "Container", {"path": path, "cache": cache}, {
            "source": source,
            "sharing": sharing,
            "owner": owner,
        })

    def with_mounted_directory(
        self, path: str, source: Directory, *, owner: Optional[str] = None
    ) -> Container:
        """Retrieves this container plus a directory mounted at the given path."""
        return self._object("withMountedDirectory", "Container", {"path": path, "source": source}, {
            "owner": owner,
        })

    def with_mounted_file(self, path: str, source: File, *, owner: Optional[str] = None) -> Container:
        """Retrieves this container plus a file mounted at the given path."""
        return self._object("withMountedFile", "Container", {"path": path, "source": source}, {
            "owner": owner,
        })

    def with_mounted_secret(
        self,
        path: str,
        source: Secret,
        *,
        owner: Optional[str] = None,
        mode: Optional[int] = None,
    ) -> Container:
        """Retrieves this container plus a secret mounted into a file at the given path."""
        return self._object("withMountedSecret", "Container", {"path": path, "source": source}, {
            "owner": owner,
            "mode": mode,
        })

    def with_mounted_temp(self, path: str) -> Container:
        """Retrieves this container plus a temporary directory mounted at the given path."""
        return self._object("withMountedTemp", "Container", {"path": path})

    def with_new_file(
        self,
        path: str,
        *,
        contents: Optional[str] = None,
        permissions: Optional[int] = None,
        owner: Optional[str] = None,
    ) -> Container:
        """Retrieves this container plus a new file written at the given path."""
        return self._object("withNewFile", "Container", {"path": path}, {
            "contents": contents,
            "permissions": permissions,
            "owner": owner,
        })

    def with_registry_auth(self, address: str, username: str, secret: Secret) -> Container:
        """Retrieves this container with a registry authentication for a given address.

        Args:
            address: Registry's address to bind the authentication to
            username: The username of the registry's account (e.g., "Dagger")
            secret: The API key, password or token to authenticate to this registry
        """
        return self._object("withRegistryAuth", "Container", {
            "address": address,
            "username": username,
            "secret": secret,
        })

    def with_rootfs(self, directory: Directory) -> Container:
        """Retrieves the container with the given directory mounted to /."""
        return self._object("withRootfs", "Container", {"directory": directory})

    def with_secret_variable(self, name: str, secret: Secret) -> Container:
        """Retrieves this container plus an env variable containing the given secret."""
        return self._object("withSecretVariable", "Container", {"name": name, "secret": secret})

    def with_service_binding(self, alias: str, service: Service) -> Container:
        """Establish a runtime dependency on a service.

        The service will be started automatically when needed and detached
        when it is no longer needed, executing the default command if none
        is set. The service will be reachable from the container via the
        provided hostname alias.
        """
        return self._object("withServiceBinding", "Container", {"alias": alias, "service": service})

    def with_unix_socket(self, path: str, source: Socket, *, owner: Optional[str] = None) -> Container:
        """Retrieves this container plus a socket forwarded to the given Unix socket path."""
        return self._object("withUnixSocket", "Container", {"path": path, "source": source}, {
            "owner": owner,
        })

    def with_user(self, name: str) -> Container:
        """Retrieves this container with a different command user."""
        return self._object("withUser", "Container", {"name": name})

    def with_workdir(self, path: str) -> Container:
        """Retrieves this container with a different working directory."""
        return self._object("withWorkdir", "Container", {"path": path})

    def without_default_args(self) -> Container:
        """Retrieves this container with unset default arguments for future commands."""
        return self._object("withoutDefaultArgs", "Container")

    def without_entrypoint(self, *, keep_default_args: Optional[bool] = None) -> Container:
        """Retrieves this container with an unset command entrypoint."""
        return self._object("withoutEntrypoint", "Container", optional={
            "keepDefaultArgs": keep_default_args,
        })

    def without_env_variable(self, name: str) -> Container:
        """Retrieves this container minus the given environment variable."""
        return self._object("withoutEnvVariable", "Container", {"name": name})

    def without_exposed_port(self, port: int, *, protocol: Optional[NetworkProtocol] = None) -> Container:
        """Unexpose a previously exposed port."""
        return self._object("withoutExposedPort", "Container", {"port": port}, {"protocol": protocol})

    def without_focus(self) -> Container:
        """Indicate that subsequent operations should not be featured more prominently in the UI."""
        return self._object("withoutFocus", "Container")

    def without_label(self, name: str) -> Container:
        """Retrieves this container minus the given environment label."""
        return self._object("withoutLabel", "Container", {"name": name})

    def without_mount(self, path: str) -> Container:
        """Retrieves this container after unmounting everything at the given path."""
        return self._object("withoutMount", "Container", {"path": path})

    def without_registry_auth(self, address: str) -> Container:
        """Retrieves this container without the registry authentication of a given address."""
        return self._object("withoutRegistryAuth", "Container", {"address": address})

    def without_unix_socket(self, path: str) -> Container:
        """Retrieves this container with a previously added Unix socket removed."""
        return self._object("withoutUnixSocket", "Container", {"path": path})

    def without_user(self) -> Container:
        """Retrieves this container with an unset command user.

        Should default to root.
        """
        return self._object("withoutUser", "Container")

    def without_workdir(self) -> Container:
        """Retrieves this container with an unset working directory.

        Should default to "/".
        """
        return self._object("withoutWorkdir", "Container")

    async def workdir(self) -> str:
        """Retrieves the working directory for all commands."""
        return await self._scalar("workdir")
