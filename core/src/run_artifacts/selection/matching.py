from __future__ import annotations

import re
from collections.abc import Iterable

_SEPARATOR = "/"


def match_any_name(names: Iterable[str], candidate: str) -> bool:
    """Exact, case-sensitive name match."""
    return any(candidate == name for name in names)


def match_any_pattern(patterns: Iterable[str], candidate: str) -> bool:
    """
    Shell-glob match against any pattern.

    `*` and `?` never match "/", and a backslash makes the next character
    literal. Malformed patterns never match and do not stop the remaining
    patterns from being tried.
    """
    for pattern in patterns:
        compiled = _compile(pattern)
        if compiled is not None and compiled.fullmatch(candidate):
            return True
    return False


def _compile(pattern: str) -> re.Pattern[str] | None:
    translated = _translate(pattern)
    if translated is None:
        return None
    try:
        return re.compile(translated)
    except re.error:
        # e.g. a reversed range such as [z-a]
        return None


def _translate(pattern: str) -> str | None:
    parts: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        index += 1
        if char == "*":
            parts.append(f"[^{_SEPARATOR}]*")
        elif char == "?":
            parts.append(f"[^{_SEPARATOR}]")
        elif char == "\\":
            if index == length:
                return None
            parts.append(re.escape(pattern[index]))
            index += 1
        elif char == "[":
            parsed = _translate_class(pattern, index)
            if parsed is None:
                return None
            class_regex, index = parsed
            parts.append(class_regex)
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def _translate_class(pattern: str, index: int) -> tuple[str, int] | None:
    """Translate the class body starting after "[", returning it and the index past "]"."""
    length = len(pattern)
    negate = index < length and pattern[index] == "^"
    if negate:
        index += 1

    items: list[str] = []
    while True:
        if index >= length:
            return None
        if pattern[index] == "]" and items:
            index += 1
            break
        low = _class_char(pattern, index)
        if low is None:
            return None
        low_char, index = low
        if index < length and pattern[index] == "-":
            high = _class_char(pattern, index + 1)
            if high is None:
                return None
            high_char, index = high
            items.append(f"{re.escape(low_char)}-{re.escape(high_char)}")
        else:
            items.append(re.escape(low_char))

    return f"[{'^' if negate else ''}{''.join(items)}]", index


def _class_char(pattern: str, index: int) -> tuple[str, int] | None:
    if index >= len(pattern) or pattern[index] in "-]":
        return None
    if pattern[index] == "\\":
        index += 1
        if index >= len(pattern):
            return None
    return pattern[index], index + 1
