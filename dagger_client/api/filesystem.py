"""Directory and file handles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import ObjectType
from .ids import Platform
from .inputs import BuildArg, PipelineLabel

if TYPE_CHECKING:
    from .container import Container
    from .module import Module
    from .values import Secret


class Directory(ObjectType):
    """A directory."""

    graphql_name = "Directory"

    def as_module(self, *, source_root_path: Optional[str] = None) -> Module:
        """Load the directory as a module.

        Args:
            source_root_path: An optional subpath of the directory which
                contains the module's configuration file. Defaults to the
                root of the directory.
        """
        return self._object("asModule", "Module", optional={"sourceRootPath": source_root_path})

    def diff(self, other: Directory) -> Directory:
        """Gets the difference between this directory and an another directory."""
        return self._object("diff", "Directory", {"other": other})

    def directory(self, path: str) -> Directory:
        """Retrieves a directory at the given path."""
        return self._object("directory", "Directory", {"path": path})

    def docker_build(
        self,
        *,
        platform: Optional[Platform] = None,
        dockerfile: Optional[str] = None,
        target: Optional[str] = None,
        build_args: Optional[list[BuildArg]] = None,
        secrets: Optional[list[Secret]] = None,
    ) -> Container:
        """Builds a new Docker container from this directory."""
        return self._object("dockerBuild", "Container", optional={
            "platform": platform,
            "dockerfile": dockerfile,
            "target": target,
            "buildArgs": build_args,
            "secrets": secrets,
        })

    async def entries(self, *, path: Optional[str] = None) -> list[str]:
        """Returns a list of files and directories at the given path."""
        return await self._scalar("entries", optional={"path": path})

    async def export(self, path: str) -> bool:
        """Writes the contents of the directory to a path on the host."""
        return await self._scalar("export", {"path": path})

    def file(self, path: str) -> File:
        """Retrieves a file at the given path."""
        return self._object("file", "File", {"path": path})

    async def glob(self, pattern: str) -> list[str]:
        """Returns a list of files and directories that match the given pattern."""
        return await self._scalar("glob", {"pattern": pattern})

    def pipeline(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        labels: Optional[list[PipelineLabel]] = None,
    ) -> Directory:
        """Creates a named sub-pipeline."""
        return self._object("pipeline", "Directory", {"name": name}, {
            "description": description,
            "labels": labels,
        })

    async def sync(self) -> Directory:
        """Force evaluation in the engine."""
        return await self._sync("sync")

    def with_directory(
        self,
        path: str,
        directory: Directory,
        *,
        exclude: Optional[list[str]] = None,
        include: Optional[list[str]] = None,
    ) -> Directory:
        """Retrieves this directory plus a directory written at the given path."""
        return self._object("withDirectory", "Directory", {"path": path, "directory": directory}, {
            "exclude": exclude,
            "include": include,
        })

    def with_file(self, path: str, source: File, *, permissions: Optional[int] = None) -> Directory:
        """Retrieves this directory plus the contents of the given file copied to the given path."""
        return self._object("withFile", "Directory", {"path": path, "source": source}, {
            "permissions": permissions,
        })

    def with_files(
        self, path: str, sources: list[File], *, permissions: Optional[int] = None
    ) -> Directory:
        """Retrieves this directory plus the contents of the given files copied to the given path."""
        return self._object("withFiles", "Directory", {"path": path, "sources": sources}, {
            "permissions": permissions,
        })

    def with_new_directory(self, path: str, *, permissions: Optional[int] = None) -> Directory:
        """Retrieves this directory plus a new directory created at the given path."""
        return self._object("withNewDirectory", "Directory", {"path": path}, {
            "permissions": permissions,
        })

    def with_new_file(
        self, path: str, contents: str, *, permissions: Optional[int] = None
    ) -> Directory:
        """Retrieves this directory plus a new file written at the given path.

        Args:
            path: Location of the written file (e.g., "/file.txt")
            contents: Content of the written file (e.g., "Hello world!")
            permissions: Permission given to the copied file (e.g., 0600)
        """
        return self._object("withNewFile", "Directory", {"path": path, "contents": contents}, {
            "permissions": permissions,
        })

    def with_timestamps(self, timestamp: int) -> Directory:
        """Retrieves this directory with all file/dir timestamps set to the given time.

        Args:
            timestamp: Timestamp to set dir/files in, as seconds since the
                Unix epoch
        """
        return self._object("withTimestamps", "Directory", {"timestamp": timestamp})

    def without_directory(self, path: str) -> Directory:
        """Retrieves this directory with the directory at the given path removed."""
        return self._object("withoutDirectory", "Directory", {"path": path})

    def without_file(self, path: str) -> Directory:
        """Retrieves this directory with the file at the given path removed."""
        return self._object("withoutFile", "Directory", {"path": path})


class File(ObjectType):
    """A file."""

    graphql_name = "File"

    async def contents(self) -> str:
        """Retrieves the contents of the file."""
        return await self._scalar("contents")

    async def export(self, path: str, *, allow_parent_dir_path: Optional[bool] = None) -> bool:
        """Writes the file to a file path on the host.

        Args:
            path: Location of the written file (e.g., "output.txt")
            allow_parent_dir_path: If allowed, the file is written into the
                given path when it is a directory
        """
        return await self._scalar("export", {"path": path}, {
            "allowParentDirPath": allow_parent_dir_path,
        })

    async def name(self) -> str:
        """Retrieves the name of the file."""
        return await self._scalar("name")

    async def size(self) -> int:
        """Retrieves the size of the file, in bytes."""
        return await self._scalar("size")

    async def sync(self) -> File:
        """Force evaluation in the engine."""
        return await self._sync("sync")

    def with_timestamps(self, timestamp: int) -> File:
        """Retrieves this file with its created/modified timestamps set to the given time."""
        return self._object("withTimestamps", "File", {"timestamp": timestamp})
