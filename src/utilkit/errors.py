"""Exceptions raised by the recoverable helpers."""

from __future__ import annotations


class UtilkitError(Exception):
    """Base class for all utilkit errors."""


class InvalidHashError(UtilkitError, ValueError):
    """The value does not look like an md5, sha1, sha256 or sha512 hex digest."""

    def __init__(self, value: str):
        super().__init__("This is not a valid hash.")
        self.value = value


class CommandError(UtilkitError):
    """A child process could not be launched or exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        command: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class CommandTimeoutError(CommandError):
    """A child process ran past its deadline and was killed."""

    def __init__(self, command: str, timeout: float, *, stdout: str = "", stderr: str = ""):
        super().__init__(f"Command {command} timed out.", command=command, stdout=stdout, stderr=stderr)
        self.timeout = timeout
