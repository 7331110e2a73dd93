#!/usr/bin/env python3
"""Demonstration of the typed engine client.

This script shows how to:
1. Connect to the engine session started by ``dagger run``
2. Chain container operations lazily
3. Handle a failed command

Run it with:
    dagger run python examples/build_pipeline.py
"""

import asyncio
import sys

from dagger_client import BuildArg, Connection, ExecError


async def main():
    async with Connection() as client:
        print("=== Typed Client Demo ===\n")

        print("1. Engine platform:", await client.default_platform())

        src = client.host().directory(".", exclude=[".git", "__pycache__"])

        # Nothing runs until a terminal accessor is awaited
        ctr = (
            client.container()
            .from_("python:3.12-slim")
            .with_directory("/src", src)
            .with_workdir("/src")
            .with_env_variable("PIP_DISABLE_PIP_VERSION_CHECK", "1")
        )

        print("2. Python version:", (await ctr.with_exec(["python", "--version"]).stdout()).strip())

        image = src.docker_build(build_args=[BuildArg(name="PYTHON_VERSION", value="3.12")])
        print("3. Built image platform:", await image.platform())

        print("4. Running a failing command...")
        try:
            await ctr.with_exec(["sh", "-c", "echo oops >&2; exit 3"]).sync()
        except ExecError as e:
            print(f"   exit code {e.exit_code}, stderr: {e.stderr.strip()}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(130)
