"""Glob and regular expression pattern compilation.

Globs are translated to anchored regular expressions. Supported syntax:

- ``*`` any run of characters except the separator
- ``**`` any run of characters including the separator
- ``?`` one character except the separator
- ``[abc]``, ``[a-z]``, ``[!abc]`` / ``[^abc]`` character classes
- ``{a,b}`` alternation (nestable, alternatives may contain wildcards)
- ``\\`` escapes the next character

Regular expressions are compiled with :mod:`re` and searched, not
anchored, against the candidate string.
"""

import os
import re
from dataclasses import dataclass
from typing import Protocol


class PatternError(ValueError):
    """Raised when a glob or regular expression cannot be compiled."""


class Pattern(Protocol):
    """A compiled pattern that can test candidate strings."""

    source: str

    def matches(self, text: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class GlobPattern:
    """Compiled glob pattern matched against the whole string."""

    source: str
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.fullmatch(text) is not None


@dataclass(frozen=True, slots=True)
class RegexPattern:
    """Compiled regular expression searched anywhere in the string."""

    source: str
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


def compile_glob(pattern: str, separator: str = os.sep) -> GlobPattern:
    """Compile a glob pattern.

    Args:
        pattern: Glob pattern text.
        separator: Path separator that ``*`` and ``?`` never match.

    Returns:
        Compiled GlobPattern.

    Raises:
        PatternError: If the pattern is malformed.
    """
    translated = _translate_glob(pattern, separator)
    try:
        regex = re.compile(translated, re.DOTALL)
    except re.error as e:
        raise PatternError(str(e)) from e
    return GlobPattern(source=pattern, regex=regex)


def compile_regex(pattern: str) -> RegexPattern:
    """Compile a regular expression.

    Raises:
        PatternError: If the expression is malformed.
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise PatternError(str(e)) from e
    return RegexPattern(source=pattern, regex=regex)


def _translate_glob(pattern: str, separator: str) -> str:
    not_sep = f"[^{_class_char(separator)}]"
    out: list[str] = []
    brace_depth = 0
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]
        if c == "*":
            if i + 1 < n and pattern[i + 1] == "*":
                while i < n and pattern[i] == "*":
                    i += 1
                out.append(".*")
                continue
            out.append(f"{not_sep}*")
        elif c == "?":
            out.append(not_sep)
        elif c == "[":
            cls, i = _translate_class(pattern, i, separator)
            out.append(cls)
            continue
        elif c == "{":
            brace_depth += 1
            out.append("(?:")
        elif c == "," and brace_depth:
            out.append("|")
        elif c == "}" and brace_depth:
            brace_depth -= 1
            out.append(")")
        elif c == "\\":
            if i + 1 >= n:
                msg = "unexpected end of pattern after '\\'"
                raise PatternError(msg)
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        else:
            out.append(re.escape(c))
        i += 1

    if brace_depth:
        msg = "unclosed '{'"
        raise PatternError(msg)
    return "".join(out)


def _translate_class(pattern: str, start: int, separator: str) -> tuple[str, int]:
    """Translate a ``[...]`` class starting at ``start``.

    Returns:
        Tuple of (regex fragment, index just past the closing bracket).
    """
    n = len(pattern)
    i = start + 1
    negate = i < n and pattern[i] in "!^"
    if negate:
        i += 1

    parts: list[str] = []
    while True:
        if i >= n:
            msg = "unclosed '['"
            raise PatternError(msg)
        c = pattern[i]
        if c == "]":
            break
        if c == "\\":
            i += 1
            if i >= n:
                msg = "unclosed '['"
                raise PatternError(msg)
            c = pattern[i]
        i += 1

        if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
            hi = pattern[i + 1]
            i += 2
            if hi == "\\" and i < n:
                hi = pattern[i]
                i += 1
            if c > hi:
                msg = f"invalid range '{c}-{hi}'"
                raise PatternError(msg)
            parts.append(f"{_class_char(c)}-{_class_char(hi)}")
        else:
            parts.append(_class_char(c))

    if not parts:
        msg = "empty character class"
        raise PatternError(msg)

    body = "".join(parts)
    if negate:
        return f"[^{body}{_class_char(separator)}]", i + 1
    return f"[{body}]", i + 1


def _class_char(c: str) -> str:
    if c in "\\]^-[":
        return "\\" + c
    return c
