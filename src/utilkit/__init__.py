"""Small, self-contained helpers for strings, environment, hashing and subprocesses."""

from .errors import CommandError, CommandTimeoutError, InvalidHashError, UtilkitError
from .utils.env import getopt
from .utils.fatal import assert_ok
from .utils.hashing import compute_bytes_hash, compute_file_hash, get_hash_type, get_sha256
from .utils.process import run_command
from .utils.text import camel_case, remove_duplicates, slice_contains_string, string_in_slice

__all__ = [
    "CommandError",
    "CommandTimeoutError",
    "InvalidHashError",
    "UtilkitError",
    "assert_ok",
    "camel_case",
    "compute_bytes_hash",
    "compute_file_hash",
    "get_hash_type",
    "get_sha256",
    "getopt",
    "remove_duplicates",
    "run_command",
    "slice_contains_string",
    "string_in_slice",
]
