"""Services, ports, sockets and the host."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import ObjectType
from .enums import NetworkProtocol
from .inputs import PortForward

if TYPE_CHECKING:
    from .filesystem import Directory, File
    from .values import Secret


class Service(ObjectType):
    """A content-addressed service providing TCP connectivity."""

    graphql_name = "Service"

    async def endpoint(self, *, port: Optional[int] = None, scheme: Optional[str] = None) -> str:
        """Retrieves an endpoint that clients can use to reach this container.

        If no port is specified, the first exposed port is used. If none
        exist an error is returned.

        If a scheme is specified, a URL is returned. Otherwise, a host:port
        pair is returned.
        """
        return await self._scalar("endpoint", optional={"port": port, "scheme": scheme})

    async def hostname(self) -> str:
        """Retrieves a hostname which can be used by clients to reach this container."""
        return await self._scalar("hostname")

    async def ports(self) -> list[Port]:
        """Retrieves the list of ports provided by the service."""
        return await self._object_list("ports", "Port")

    async def start(self) -> Service:
        """Start the service and wait for its health checks to succeed.

        Services bound to a Container do not need to be manually started.
        """
        return await self._sync("start")

    async def stop(self, *, kill: Optional[bool] = None) -> Service:
        """Stop the service.

        Args:
            kill: Immediately kill the service without waiting for a
                graceful exit
        """
        return await self._sync("stop", {"kill": kill})

    async def up(self, *, ports: Optional[list[PortForward]] = None, random: Optional[bool] = None) -> None:
        """Creates a tunnel that forwards traffic from the caller's network to this service.

        Args:
            ports: Frontend/backend port mappings to forward
            random: Bind each tunnel port to a random port on the host
        """
        return await self._scalar("up", optional={"ports": ports, "random": random}, scalar="Void")


class Port(ObjectType):
    """A port exposed by a container."""

    graphql_name = "Port"

    async def description(self) -> Optional[str]:
        return await self._scalar("description")

    async def experimental_skip_healthcheck(self) -> bool:
        return await self._scalar("experimentalSkipHealthcheck")

    async def port(self) -> int:
        """The port number."""
        return await self._scalar("port")

    async def protocol(self) -> NetworkProtocol:
        """The transport layer protocol."""
        return await self._scalar("protocol", scalar="NetworkProtocol")


class Host(ObjectType):
    """Information about the host environment."""

    graphql_name = "Host"

    def directory(
        self,
        path: str,
        *,
        exclude: Optional[list[str]] = None,
        include: Optional[list[str]] = None,
    ) -> Directory:
        """Accesses a directory on the host.

        Args:
            path: Location of the directory to access (e.g., ".")
            exclude: Exclude artifacts that match the given pattern
                (e.g., ["node_modules/", ".git*"])
            include: Include only artifacts that match the given pattern
                (e.g., ["app/", "package.*"])
        """
        return self._object("directory", "Directory", {"path": path}, {
            "exclude": exclude,
            "include": include,
        })

    def file(self, path: str) -> File:
        """Accesses a file on the host."""
        return self._object("file", "File", {"path": path})

    def service(self, ports: list[PortForward], *, host: Optional[str] = None) -> Service:
        """Creates a service that forwards traffic to a specified address via the host.

        Args:
            ports: Ports to expose via the service, forwarding through the
                host network
            host: Upstream host to forward traffic to, "localhost" if unset
        """
        return self._object("service", "Service", {"ports": ports}, {"host": host})

    def set_secret_file(self, name: str, path: str) -> Secret:
        """Sets a secret given a user-defined name and the file path on the host, and returns the secret.

        The file is limited to a size of 512000 bytes.
        """
        return self._object("setSecretFile", "Secret", {"name": name, "path": path})

    def tunnel(
        self,
        service: Service,
        *,
        ports: Optional[list[PortForward]] = None,
        native: Optional[bool] = None,
    ) -> Service:
        """Creates a tunnel that forwards traffic from the host to a service.

        Args:
            service: Service to send traffic from the tunnel
            ports: Frontend/backend port mappings; with none, each port the
                service exposes is forwarded to a random host port
            native: Map each service port to the same port on the host
        """
        return self._object("tunnel", "Service", {"service": service}, {
            "ports": ports,
            "native": native,
        })

    def unix_socket(self, path: str) -> Socket:
        """Accesses a Unix socket on the host."""
        return self._object("unixSocket", "Socket", {"path": path})


class Socket(ObjectType):
    """A Unix or TCP/IP socket that can be mounted into a container."""

    graphql_name = "Socket"


class Terminal(ObjectType):
    """An interactive terminal that clients can connect to."""

    graphql_name = "Terminal"

    async def websocket_endpoint(self) -> str:
        """An http endpoint at which this terminal can be connected to over a websocket."""
        return await self._scalar("websocketEndpoint")
