"""Environment variable lookup."""

from __future__ import annotations

import os
from collections.abc import Mapping


def getopt(name: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    """Return environment variable *name*, or *default* when unset or empty.

    *environ* defaults to ``os.environ``; pass any mapping to look up a fixed
    environment instead of the process one.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(name, "")
    return value or default
