"""Git repositories and references."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import ObjectType

if TYPE_CHECKING:
    from .filesystem import Directory
    from .network import Socket


class GitRepository(ObjectType):
    """A git repository."""

    graphql_name = "GitRepository"

    def branch(self, name: str) -> GitRef:
        """Returns details of a branch."""
        return self._object("branch", "GitRef", {"name": name})

    def commit(self, id: str) -> GitRef:
        """Returns details of a commit.

        Args:
            id: Identifier of the commit (e.g., "b6315d8f2810962c601af73f86831f6866ea798b")
        """
        return self._object("commit", "GitRef", {"id": id})

    def ref(self, name: str) -> GitRef:
        """Returns details of a ref.

        Args:
            name: Ref's name (can be a commit identifier, a tag name, a
                branch name, or a fully-qualified ref)
        """
        return self._object("ref", "GitRef", {"name": name})

    def tag(self, name: str) -> GitRef:
        """Returns details of a tag."""
        return self._object("tag", "GitRef", {"name": name})


class GitRef(ObjectType):
    """A git ref (tag, branch, or commit)."""

    graphql_name = "GitRef"

    async def commit(self) -> str:
        """The resolved commit id at this ref."""
        return await self._scalar("commit")

    def tree(
        self,
        *,
        ssh_known_hosts: Optional[str] = None,
        ssh_auth_socket: Optional[Socket] = None,
    ) -> Directory:
        """The filesystem tree at this ref."""
        return self._object("tree", "Directory", optional={
            "sshKnownHosts": ssh_known_hosts,
            "sshAuthSocket": ssh_auth_socket,
        })
