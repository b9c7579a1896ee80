"""Run a single child process and capture its output."""

from __future__ import annotations

import os
import subprocess
import time
from collections.abc import Mapping

import structlog

from ..errors import CommandError, CommandTimeoutError

logger = structlog.get_logger(__name__)


def _as_text(output: str | bytes | None) -> str:
    # invalid UTF-8 from the child is replaced, never raised
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def run_command(
    cmd: str,
    *args: str,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
    cwd: str | os.PathLike[str] | None = None,
) -> str:
    """Run *cmd* with *args* and return its standard output.

    No shell is involved and stdin is closed. Without *timeout* the call blocks
    until the child exits; with it, the child is killed once *timeout* seconds
    have passed.

    Raises:
        CommandTimeoutError: the deadline elapsed.
        CommandError: the child could not be started, or exited non-zero.
            A non-zero exit is a failure even if the child wrote output.
    """
    argv = [cmd, *args]
    logger.debug("command_started", command=cmd, args=list(args), timeout=timeout)
    start = time.monotonic()

    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout,
            env=dict(env) if env is not None else None,
            cwd=cwd,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        logger.warning("command_timed_out", command=cmd, timeout=timeout)
        raise CommandTimeoutError(
            cmd, timeout, stdout=_as_text(e.stdout), stderr=_as_text(e.stderr)
        ) from e
    except OSError as e:
        logger.warning("command_launch_failed", command=cmd, error=str(e))
        raise CommandError(f"Command {cmd} could not be started: {e}", command=cmd) from e

    stdout = _as_text(completed.stdout)
    stderr = _as_text(completed.stderr)
    elapsed_ms = int((time.monotonic() - start) * 1000)
    if completed.returncode != 0:
        logger.warning(
            "command_failed",
            command=cmd,
            returncode=completed.returncode,
            stderr=stderr[-500:],
            elapsed_ms=elapsed_ms,
        )
        raise CommandError(
            f"Command {cmd} exited with status {completed.returncode}",
            command=cmd,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )

    logger.debug("command_finished", command=cmd, elapsed_ms=elapsed_ms)
    return stdout
