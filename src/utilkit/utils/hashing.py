"""Hashing utilities for file integrity checks and hash classification."""

from __future__ import annotations

import hashlib
import os
import re
from pathlib import Path

from ..errors import InvalidHashError
from .fatal import assert_ok

# Lengths are disjoint, so at most one pattern can match.
_HASH_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("md5", re.compile(r"[0-9a-fA-F]{32}")),
    ("sha1", re.compile(r"[0-9a-fA-F]{40}")),
    ("sha256", re.compile(r"[0-9a-fA-F]{64}")),
    ("sha512", re.compile(r"[0-9a-fA-F]{128}")),
)


def compute_bytes_hash(data: bytes) -> str:
    """Return the SHA-256 hex digest of arbitrary bytes."""
    return hashlib.sha256(data).hexdigest()


def compute_file_hash(path: str | os.PathLike[str]) -> str:
    """Return the SHA-256 hex digest of the file at *path*.

    The whole file is read into memory. ``OSError`` from the read propagates.
    """
    return compute_bytes_hash(Path(path).read_bytes())


def get_sha256(path: str | os.PathLike[str]) -> str:
    """Fail-fast variant of :func:`compute_file_hash`.

    An unreadable file is logged and the process exits with status 1.
    """
    try:
        return compute_file_hash(path)
    except OSError as e:
        assert_ok(e)
        raise


def get_hash_type(value: str) -> str:
    """Classify a hex digest by length.

    Returns one of ``"md5"``, ``"sha1"``, ``"sha256"`` or ``"sha512"``.
    Raises :class:`InvalidHashError` for anything else.
    """
    for name, pattern in _HASH_PATTERNS:
        if pattern.fullmatch(value):
            return name
    raise InvalidHashError(value)
