"""Fail-fast guard for unrecoverable startup conditions."""

from __future__ import annotations

import os
import sys
from typing import NoReturn, overload

import structlog

logger = structlog.get_logger(__name__)

# os._exit ends the whole process from any thread and cannot be caught
_exit = os._exit


@overload
def assert_ok(err: None) -> None: ...


@overload
def assert_ok(err: BaseException) -> NoReturn: ...


def assert_ok(err: BaseException | None) -> None:
    """Log *err* and terminate the process with status 1; no-op when *err* is None.

    Termination is immediate, even from a worker thread. Meant for top-level
    code only. Library callers that can recover should catch the exception
    themselves instead.
    """
    if err is None:
        return
    logger.critical("fatal_error", error=str(err), error_type=type(err).__name__)
    sys.stdout.flush()
    sys.stderr.flush()
    _exit(1)
