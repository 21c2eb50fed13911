"""Wildcard pattern compilation.

Patterns support two wildcards only: ``?`` matches exactly one character
and ``*`` matches any sequence of characters, including the empty one.
Every other character, regex metacharacters included, is literal.
"""

import re


def compile_wildcard(pattern: str) -> re.Pattern[str]:
    """Translate a wildcard pattern into a compiled regular expression.

    The returned expression is meant to be applied with ``fullmatch`` so
    that the whole base name has to match, not just a substring.

    Args:
        pattern: Wildcard pattern, e.g. ``"file?001"`` or ``"d*a"``.

    Returns:
        Compiled regular expression equivalent to the pattern.
    """
    parts: list[str] = []
    for char in pattern:
        if char == "?":
            parts.append(".")
        elif char == "*":
            parts.append(".*")
        else:
            parts.append(re.escape(char))
    # DOTALL: names may legally contain newlines on POSIX
    return re.compile("".join(parts), re.DOTALL)


def matches_wildcard(pattern: str, name: str) -> bool:
    """Check whether a base name matches a wildcard pattern."""
    return compile_wildcard(pattern).fullmatch(name) is not None
