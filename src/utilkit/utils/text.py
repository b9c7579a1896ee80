"""String and string-list helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WORD_RUN = re.compile(r"[0-9A-Za-z]+")


def camel_case(src: str) -> str:
    """Convert *src* to its camel case equivalent.

    Runs of ASCII letters and digits are kept, everything else is dropped.
    The first run is left as-is; each later run gets its first character
    upper-cased and the remainder untouched:

        "hello world" -> "helloWorld"
        "a_b-c"       -> "aBC"
    """
    chunks = _WORD_RUN.findall(src)
    return "".join(
        chunk if idx == 0 else chunk[0].upper() + chunk[1:]
        for idx, chunk in enumerate(chunks)
    )


def remove_duplicates(elements: Iterable[str]) -> list[str]:
    """Return the distinct items of *elements*, in order of first appearance."""
    seen: set[str] = set()
    result: list[str] = []
    for element in elements:
        if element in seen:
            continue
        seen.add(element)
        result.append(element)
    return result


def slice_contains_string(target: str, candidates: Iterable[str]) -> bool:
    """Return True if *target* occurs as a substring of any candidate."""
    return any(target in candidate for candidate in candidates)


def string_in_slice(target: str, candidates: Iterable[str]) -> bool:
    """Return True if some candidate is exactly equal to *target*."""
    return any(candidate == target for candidate in candidates)
