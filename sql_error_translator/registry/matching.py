"""
Wildcard matching for database product names.

Patterns are literal text where ``*`` matches any run of characters:
``"DB2*"`` matches by prefix, ``"*Oracle"`` by suffix, ``"*Oracle*"`` by
substring, and a pattern without ``*`` only matches itself.
"""

from typing import Iterable, Optional


def simple_match(pattern: Optional[str], text: Optional[str]) -> bool:
    """
    Match text against a simple ``*`` wildcard pattern.

    Args:
        pattern: Pattern to match against
        text: Text to test

    Returns:
        True if the pattern matches the whole text
    """
    if pattern is None or text is None:
        return False

    first_index = pattern.find("*")
    if first_index == -1:
        return pattern == text

    if first_index == 0:
        if len(pattern) == 1:
            return True
        next_index = pattern.find("*", 1)
        if next_index == -1:
            return text.endswith(pattern[1:])
        part = pattern[1:next_index]
        if part == "":
            return simple_match(pattern[next_index:], text)
        part_index = text.find(part)
        while part_index != -1:
            if simple_match(pattern[next_index:], text[part_index + len(part):]):
                return True
            part_index = text.find(part, part_index + 1)
        return False

    return (
        len(text) >= first_index
        and pattern[:first_index] == text[:first_index]
        and simple_match(pattern[first_index:], text[first_index:])
    )


def match_any(patterns: Iterable[str], text: Optional[str]) -> bool:
    """Return True if any of the patterns matches the text."""
    return any(simple_match(pattern, text) for pattern in patterns)
