"""Workspace glob matching.

Workspace globs follow the npm/yarn conventions: ``*`` and ``?`` stay within a
path segment, ``**`` spans any number of segments, and ``[...]`` and ``{a,b}``
are supported (braces may contain ``/``). A pattern with a leading ``!``
matches every path the rest of the pattern does not. Wildcards do not match
segments that start with a dot unless the pattern spells the dot out.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SEGMENT = r"(?!\.)[^/]+"


def _normalise(path: str) -> str:
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path.strip("/")


def _split_braces(body: str) -> list[str]:
    alternatives: list[str] = []
    depth = 0
    current = ""
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            alternatives.append(current)
            current = ""
            continue
        current += char
    alternatives.append(current)
    return alternatives


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` groups into separate patterns, e.g. ``{apps/*,libs}``."""
    depth = 0
    start = -1
    for index, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0:
                alternatives = _split_braces(pattern[start + 1 : index])
                if len(alternatives) > 1:
                    prefix, suffix = pattern[:start], pattern[index + 1 :]
                    return [
                        expanded
                        for alternative in alternatives
                        for expanded in expand_braces(prefix + alternative + suffix)
                    ]
    return [pattern]


def _translate_segment(segment: str) -> str:
    out = ""
    i = 0
    n = len(segment)
    while i < n:
        char = segment[i]
        if char == "*":
            while i + 1 < n and segment[i + 1] == "*":
                i += 1
            out += "[^/]*"
        elif char == "?":
            out += "[^/]"
        elif char == "[":
            end = segment.find("]", i + 2)
            if end == -1:
                out += re.escape(char)
            else:
                body = segment[i + 1 : end]
                if body[0] in "!^":
                    body = "^" + body[1:]
                out += "[" + body.replace("\\", "\\\\") + "]"
                i = end
        else:
            out += re.escape(char)
        i += 1

    if segment[:1] in ("*", "?", "["):
        out = r"(?!\.)" + out
    return out


def translate(pattern: str) -> str:
    """Translate a brace-free workspace glob into an anchored regular expression."""
    segments: list[str] = []
    for segment in _normalise(pattern).split("/"):
        if segment == "**" and segments and segments[-1] == "**":
            continue
        segments.append(segment)

    out = ""
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            if not last:
                out += f"(?:{_SEGMENT}/)*"
            elif out.endswith("/"):
                # "a/**" also matches "a" itself
                out = out[:-1] + f"(?:/{_SEGMENT}(?:/{_SEGMENT})*)?"
            else:
                out += f"(?:{_SEGMENT}(?:/{_SEGMENT})*)?"
        else:
            out += _translate_segment(segment) + ("" if last else "/")

    return "^" + out + "$"


def _matches_one(path: str, pattern: str) -> bool:
    negated = pattern.startswith("!")
    body = pattern[1:] if negated else pattern
    found = any(re.match(translate(p), path) for p in expand_braces(body))
    return not found if negated else found


def matches(relative_path: str, patterns: Iterable[str]) -> bool:
    """Return True if ``relative_path`` matches any of the workspace globs.

    Each pattern is tested on its own, so ``["pkgs/*", "!pkgs/b"]`` still
    matches ``pkgs/b`` through the first pattern.
    """
    path = _normalise(relative_path)
    return any(_matches_one(path, pattern) for pattern in patterns)
