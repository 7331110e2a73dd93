"""Modules, module sources and their dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import ObjectType
from .enums import ModuleSourceKind

if TYPE_CHECKING:
    from .container import Container
    from .filesystem import Directory, File
    from .typedefs import TypeDef


class Module(ObjectType):
    """A Dagger module."""

    graphql_name = "Module"

    async def dependencies(self) -> list[Module]:
        """Modules used by this module."""
        return await self._object_list("dependencies", "Module")

    async def dependency_config(self) -> list[ModuleDependency]:
        """The dependencies as configured by the module."""
        return await self._object_list("dependencyConfig", "ModuleDependency")

    async def description(self) -> str:
        """The doc string of the module, if any."""
        return await self._scalar("description")

    def generated_context_diff(self) -> Directory:
        """The generated files and directories made on top of the module source's context directory."""
        return self._object("generatedContextDiff", "Directory")

    def generated_context_directory(self) -> Directory:
        """The module source's context plus any configuration and source files created by codegen."""
        return self._object("generatedContextDirectory", "Directory")

    def initialize(self) -> Module:
        """Retrieves the module with the objects loaded via its SDK."""
        return self._object("initialize", "Module")

    async def interfaces(self) -> list[TypeDef]:
        """Interfaces served by this module."""
        return await self._object_list("interfaces", "TypeDef")

    async def name(self) -> str:
        """The name of the module."""
        return await self._scalar("name")

    async def objects(self) -> list[TypeDef]:
        """Objects served by this module."""
        return await self._object_list("objects", "TypeDef")

    def runtime(self) -> Container:
        """The container that runs the module's entrypoint."""
        return self._object("runtime", "Container")

    async def sdk(self) -> str:
        """The SDK used by this module."""
        return await self._scalar("sdk")

    async def serve(self) -> None:
        """Serve a module's API in the current session.

        This can only be called once per session.
        """
        return await self._scalar("serve", scalar="Void")

    def source(self) -> ModuleSource:
        """The source for the module."""
        return self._object("source", "ModuleSource")

    def with_description(self, description: str) -> Module:
        """Retrieves the module with the given description."""
        return self._object("withDescription", "Module", {"description": description})

    def with_interface(self, iface: TypeDef) -> Module:
        """This module plus the given Interface type and associated functions."""
        return self._object("withInterface", "Module", {"iface": iface})

    def with_object(self, object: TypeDef) -> Module:
        """This module plus the given Object type and associated functions."""
        return self._object("withObject", "Module", {"object": object})

    def with_source(self, source: ModuleSource) -> Module:
        """Retrieves the module with basic configuration loaded if present."""
        return self._object("withSource", "Module", {"source": source})


class ModuleDependency(ObjectType):
    """The configuration of dependency of a module."""

    graphql_name = "ModuleDependency"

    async def name(self) -> str:
        """The name of the dependency module."""
        return await self._scalar("name")

    def source(self) -> ModuleSource:
        """The source for the dependency module."""
        return self._object("source", "ModuleSource")


class ModuleSource(ObjectType):
    """The source needed to load and run a module, along with any metadata about the source such as versions/urls/etc."""

    graphql_name = "ModuleSource"

    def as_git_source(self) -> GitModuleSource:
        """If the source is of kind git, the git source representation of it."""
        return self._object("asGitSource", "GitModuleSource")

    def as_local_source(self) -> LocalModuleSource:
        """If the source is of kind local, the local source representation of it."""
        return self._object("asLocalSource", "LocalModuleSource")

    def as_module(self) -> Module:
        """Load the source as a module.

        If this is a local source, the parent directory must have been
        provided during module source creation.
        """
        return self._object("asModule", "Module")

    async def as_string(self) -> str:
        """A human readable ref string representation of this module source."""
        return await self._scalar("asString")

    async def config_exists(self) -> bool:
        """Returns whether the module source has a configuration file."""
        return await self._scalar("configExists")

    def context_directory(self) -> Directory:
        """The directory containing everything needed to load and use the module."""
        return self._object("contextDirectory", "Directory")

    async def dependencies(self) -> list[ModuleDependency]:
        """The dependencies of the module source."""
        return await self._object_list("dependencies", "ModuleDependency")

    def directory(self, path: str) -> Directory:
        """The directory containing the module configuration and source code (source code may be in a subdir)."""
        return self._object("directory", "Directory", {"path": path})

    async def kind(self) -> ModuleSourceKind:
        """The kind of source (e.g. local, git, etc.)"""
        return await self._scalar("kind", scalar="ModuleSourceKind")

    async def module_name(self) -> str:
        """If set, the name of the module this source references, including any overrides at runtime by callers."""
        return await self._scalar("moduleName")

    async def module_original_name(self) -> str:
        """The original name of the module this source references, as defined in the module configuration."""
        return await self._scalar("moduleOriginalName")

    async def resolve_context_path_from_caller(self) -> str:
        """The path to the module source's context directory on the caller's filesystem.

        Only valid for local sources.
        """
        return await self._scalar("resolveContextPathFromCaller")

    def resolve_dependency(self, dep: ModuleSource) -> ModuleSource:
        """Resolve the provided module source arg as a dependency relative to this module source."""
        return self._object("resolveDependency", "ModuleSource", {"dep": dep})

    def resolve_from_caller(self) -> ModuleSource:
        """Load the source from its path on the caller's filesystem, including only needed+configured files and directories.

        Only valid for local sources.
        """
        return self._object("resolveFromCaller", "ModuleSource")

    async def source_root_subpath(self) -> str:
        """The path relative to context of the root of the module source, which contains dagger.json.

        It also contains the module implementation source code, but that may
        or may not being a subdir of this root.
        """
        return await self._scalar("sourceRootSubpath")

    async def source_subpath(self) -> str:
        """The path relative to context of the module implementation source code."""
        return await self._scalar("sourceSubpath")

    def with_context_directory(self, dir: Directory) -> ModuleSource:
        """Update the module source with a new context directory. Only valid for local sources."""
        return self._object("withContextDirectory", "ModuleSource", {"dir": dir})

    def with_dependencies(self, dependencies: list[ModuleDependency]) -> ModuleSource:
        """Append the provided dependencies to the module source's dependency list."""
        return self._object("withDependencies", "ModuleSource", {"dependencies": dependencies})

    def with_name(self, name: str) -> ModuleSource:
        """Update the module source with a new name."""
        return self._object("withName", "ModuleSource", {"name": name})

    def with_sdk(self, sdk: str) -> ModuleSource:
        """Update the module source with a new SDK."""
        return self._object("withSDK", "ModuleSource", {"sdk": sdk})

    def with_source_subpath(self, path: str) -> ModuleSource:
        """Update the module source with a new source subpath."""
        return self._object("withSourceSubpath", "ModuleSource", {"path": path})


class CurrentModule(ObjectType):
    """Reflective module API provided to functions at runtime."""

    graphql_name = "CurrentModule"

    async def name(self) -> str:
        """The name of the module being executed in."""
        return await self._scalar("name")

    def source(self) -> Directory:
        """The directory containing the module's source code loaded into the engine (plus any generated code that may have been created)."""
        return self._object("source", "Directory")

    def workdir(
        self,
        path: str,
        *,
        exclude: Optional[list[str]] = None,
        include: Optional[list[str]] = None,
    ) -> Directory:
        """Load a directory from the module's scratch working directory.

        Includes any changes that may have been made to it during module
        function execution.

        Args:
            path: Location of the directory to access (e.g., ".")
            exclude: Exclude artifacts that match the given pattern
                (e.g., ["node_modules/", ".git*"])
            include: Include only artifacts that match the given pattern
                (e.g., ["app/", "package.*"])
        """
        return self._object("workdir", "Directory", {"path": path}, {
            "exclude": exclude,
            "include": include,
        })

    def workdir_file(self, path: str) -> File:
        """Load a file from the module's scratch working directory."""
        return self._object("workdirFile", "File", {"path": path})


class GitModuleSource(ObjectType):
    """Module source originating from a git repo."""

    graphql_name = "GitModuleSource"

    async def clone_url(self) -> str:
        """The URL from which the source's git repo can be cloned."""
        return await self._scalar("cloneURL")

    async def commit(self) -> str:
        return await self._scalar("commit")

    def context_directory(self) -> Directory:
        """The directory containing everything needed to load and use the module."""
        return self._object("contextDirectory", "Directory")

    async def html_url(self) -> str:
        """The URL to the source's git repo in a web browser."""
        return await self._scalar("htmlURL")

    async def root_subpath(self) -> str:
        """The path to the root of the module source under the context directory."""
        return await self._scalar("rootSubpath")

    async def version(self) -> str:
        return await self._scalar("version")


class LocalModuleSource(ObjectType):
    """Module source that that originates from a path locally relative to an arbitrary directory."""

    graphql_name = "LocalModuleSource"

    def context_directory(self) -> Directory:
        """The directory containing everything needed to load and use the module."""
        return self._object("contextDirectory", "Directory")

    async def root_subpath(self) -> str:
        """The path to the root of the module source under the context directory."""
        return await self._scalar("rootSubpath")


class GeneratedCode(ObjectType):
    """The result of running an SDK's codegen."""

    graphql_name = "GeneratedCode"

    def code(self) -> Directory:
        """The directory containing the generated code."""
        return self._object("code", "Directory")

    async def vcs_generated_paths(self) -> list[str]:
        """List of paths to mark generated in version control (i.e. .gitattributes)."""
        return await self._scalar("vcsGeneratedPaths")

    async def vcs_ignored_paths(self) -> list[str]:
        """List of paths to ignore in version control (i.e. .gitignore)."""
        return await self._scalar("vcsIgnoredPaths")

    def with_vcs_generated_paths(self, paths: list[str]) -> GeneratedCode:
        """Set the list of paths to mark generated in version control."""
        return self._object("withVCSGeneratedPaths", "GeneratedCode", {"paths": paths})

    def with_vcs_ignored_paths(self, paths: list[str]) -> GeneratedCode:
        """Set the list of paths to ignore in version control."""
        return self._object("withVCSIgnoredPaths", "GeneratedCode", {"paths": paths})
