"""Exceptions raised by the Dagger GraphQL client.

GraphQL responses that carry an ``errors`` list become :class:`GraphQLError`.
Errors whose extensions describe a failed command (``_type == "EXEC_ERROR"``)
are reclassified into :class:`ExecError`, which exposes the command, exit
code and captured output.
"""

from typing import Any


class DaggerError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(DaggerError):
    """Raised when no engine endpoint can be derived from the settings."""


class GraphQLError(DaggerError):
    """Exception raised for GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.message, self.errors))

    @property
    def extensions(self) -> dict[str, Any]:
        """Extensions of the first error entry, or an empty dict."""
        if not self.errors:
            return {}
        first = self.errors[0]
        if not isinstance(first, dict):
            return {}
        ext = first.get("extensions")
        return ext if isinstance(ext, dict) else {}


class ExecError(DaggerError):
    """A command executed by the engine exited unsuccessfully.

    Attributes:
        original: The GraphQL error this was classified from
        cmd: The command that was run
        exit_code: The command's exit code
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(
        self,
        original: GraphQLError,
        message: str,
        *,
        cmd: list[str] | None = None,
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
    ):
        self.original = original
        self.message = message
        self.cmd = cmd or []
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)

    def __reduce__(self):
        # keyword-only fields are restored into __dict__
        return (type(self), (self.original, self.message), self.__dict__)

    def __str__(self) -> str:
        # stdout and stderr are included for visibility when just printing
        msg = self.message
        if self.stdout.strip():
            msg += "\nStdout:\n" + self.stdout
        if self.stderr.strip():
            msg += "\nStderr:\n" + self.stderr
        return msg


EXEC_ERROR = "EXEC_ERROR"


def classify_error(err: BaseException) -> ExecError | None:
    """Convert a GraphQL error into a more specific error type.

    Returns None when the error carries no recognized extension, in which
    case the caller should propagate the original error unchanged.
    """
    if not isinstance(err, GraphQLError):
        return None

    for entry in err.errors:
        if not isinstance(entry, dict):
            continue
        ext = entry.get("extensions")
        if not isinstance(ext, dict):
            continue
        if ext.get("_type") != EXEC_ERROR:
            continue
        return _exec_error_from_extensions(err, entry, ext)

    return None


def _exec_error_from_extensions(
    err: GraphQLError,
    entry: dict[str, Any],
    ext: dict[str, Any],
) -> ExecError:
    message = entry.get("message")
    if not isinstance(message, str):
        message = err.message

    exit_code = 0
    code = ext.get("exitCode")
    if isinstance(code, (int, float)) and not isinstance(code, bool):
        exit_code = int(code)

    cmd: list[str] = []
    args = ext.get("cmd")
    if isinstance(args, list) and all(isinstance(a, str) for a in args):
        cmd = list(args)

    stdout = ext.get("stdout")
    stderr = ext.get("stderr")

    return ExecError(
        err,
        message,
        cmd=cmd,
        exit_code=exit_code,
        stdout=stdout if isinstance(stdout, str) else "",
        stderr=stderr if isinstance(stderr, str) else "",
    )
