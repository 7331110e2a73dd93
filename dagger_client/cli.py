"""Command-line interface for dagger-client."""

import asyncio
import json
import logging
import sys
from typing import Any

import click
import httpx
from pydantic import ValidationError

from .api.client import Client
from .core.config import ClientSettings
from .core.errors import DaggerError
from .core.executor import GraphQLExecutor
from .core.query_builder import Selection


def _load_settings(url: str | None, port: int | None, token: str | None) -> ClientSettings:
    """Settings from the environment, with command-line values taking precedence."""
    overrides: dict[str, Any] = {}
    if url is not None:
        overrides["session_url"] = url
    if port is not None:
        overrides["session_port"] = port
    if token is not None:
        overrides["session_token"] = token
    return ClientSettings(**overrides)


def _configure_logging(settings: ClientSettings, verbose: bool):
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _executor(settings: ClientSettings) -> GraphQLExecutor:
    return GraphQLExecutor(settings.endpoint, auth=settings.auth(), timeout=settings.timeout)


async def _run_query(settings: ClientSettings, document: str) -> dict[str, Any]:
    executor = _executor(settings)
    try:
        return await executor.execute(document)
    finally:
        await executor.close()


async def _check_version(settings: ClientSettings, version: str) -> bool:
    executor = _executor(settings)
    try:
        return await Client(Selection(), executor).check_version_compatibility(version)
    finally:
        await executor.close()


def _fail(err: Exception):
    click.echo(f"Error: {err}", err=True)
    sys.exit(1)


session_options = [
    click.option("--url", help="GraphQL endpoint URL (overrides DAGGER_SESSION_URL)."),
    click.option("--port", type=int, help="Engine session port (overrides DAGGER_SESSION_PORT)."),
    click.option("--token", help="Engine session token (overrides DAGGER_SESSION_TOKEN)."),
    click.option("--verbose", "-v", is_flag=True, help="Enable verbose output."),
]


def with_session_options(fn):
    for option in reversed(session_options):
        fn = option(fn)
    return fn


@click.group()
@click.version_option(package_name="dagger-gql-client")
def main():
    """Typed GraphQL client for the Dagger engine.

    Talks to the engine session described by the DAGGER_SESSION_PORT and
    DAGGER_SESSION_TOKEN environment variables.
    """
    pass


@main.command()
@click.option(
    "--file",
    "-f",
    "document",
    type=click.File("r"),
    default="-",
    help="File containing the GraphQL document (default: stdin).",
)
@with_session_options
def query(document, url: str | None, port: int | None, token: str | None, verbose: bool):
    """Execute a raw GraphQL query and print the resulting data as JSON.

    Examples:

        echo '{ defaultPlatform }' | dagger-client query

        dagger-client query --file ./build.graphql --port 8080
    """
    try:
        settings = _load_settings(url, port, token)
    except ValidationError as e:
        _fail(e)
    _configure_logging(settings, verbose)

    source = document.read()
    if not source.strip():
        _fail(click.UsageError("empty GraphQL document"))

    try:
        data = asyncio.run(_run_query(settings, source))
    except (DaggerError, httpx.HTTPError) as e:
        _fail(e)

    click.echo(json.dumps(data, indent=2))


@main.command("check-version")
@click.argument("version")
@with_session_options
def check_version(version: str, url: str | None, port: int | None, token: str | None, verbose: bool):
    """Check whether the engine is compatible with an SDK version.

    Exits with status 1 when it is not.

    Examples:

        dagger-client check-version v0.9.7
    """
    try:
        settings = _load_settings(url, port, token)
    except ValidationError as e:
        _fail(e)
    _configure_logging(settings, verbose)

    try:
        compatible = asyncio.run(_check_version(settings, version))
    except (DaggerError, httpx.HTTPError) as e:
        _fail(e)

    if compatible:
        click.echo(f"Engine is compatible with {version}")
    else:
        click.echo(f"Engine is not compatible with {version}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
