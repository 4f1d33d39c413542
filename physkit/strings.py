"""String helpers: trimming, splitting, joining and nested list parsing."""

from __future__ import annotations

import string
from typing import Any, Callable, Iterable

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_BRACKET_PAIRS = ("()", "[]", "{}", "<>")
_NAME_CHARS = frozenset(
    string.ascii_lowercase + string.ascii_uppercase + string.digits + "_.-!@#$%^&*+=?"
)


def strip(s: str, c: str) -> str:
    """Return s with every occurrence of the character c removed."""
    return s.replace(c, "")


def split(s: str, delim: str) -> list[str]:
    """Split s at every occurrence of delim, keeping empty pieces."""
    if not delim:
        raise ValueError("split delimiter must not be empty")
    return s.split(delim)


def starts_with(s: str, start: str) -> bool:
    """True if s begins with start."""
    return s.startswith(start)


def trim(s: str, c: str = " ") -> str:
    """Remove leading and trailing runs of the character c."""
    return s.strip(c) if c else s


def strint(s: str, i: int) -> str:
    """Append a space and the integer i to s."""
    return f"{s} {i}"


def upper_case(s: str) -> str:
    """Upper-case the ASCII letters of s, leaving every other character alone."""
    return s.translate(_ASCII_UPPER)


def join(items: Iterable[Any], sep: str, func: Callable[[Any], Any] | None = None) -> str:
    """Join the string form of items (or of func(item)) with sep."""
    convert = func if func is not None else (lambda x: x)
    return sep.join(str(convert(item)) for item in items)


def join_if(
    items: Iterable[Any],
    check: Callable[[Any], bool],
    sep: str,
    func: Callable[[Any], Any] | None = None,
) -> str:
    """Like join, but only for the items that pass check."""
    return join((item for item in items if check(item)), sep, func)


def valid_nested_list_format(s: str) -> bool:
    """Check that s encodes a (nested) list such as '[a,b,[c,d],e]'.

    Exactly one kind of bracket may be used; entries are names made of
    letters, digits and a few special characters. Empty lists and empty
    entries are refused.
    """
    used = [pair for pair in _BRACKET_PAIRS if any(ch in s for ch in pair)]
    if len(used) > 1:
        return False
    brackets = used[0] if used else "<>"
    open_char, close_char = brackets
    separators = brackets + ","

    valid = _NAME_CHARS | set(separators)
    if any(ch not in valid for ch in s):
        return False

    if len(s) < 2 or s[0] != open_char or s[-1] != close_char:
        return False

    start = 1
    last_match = open_char
    num_open = 1
    for pos in range(1, len(s)):
        ch = s[pos]
        if ch not in separators:
            continue
        at_start = pos == start
        if at_start and last_match == open_char and ch in (",", close_char):
            # a comma right after an open, or an empty list
            return False
        if at_start and last_match == "," and ch in (",", close_char):
            # two commas in a row, or a close right after a comma
            return False
        if ch == open_char and s[pos - 1] not in (",", open_char):
            # a sublist may only open at the start of a list or after a comma
            return False
        if ch == open_char:
            num_open += 1
        elif ch == close_char:
            num_open -= 1
        if num_open < 0:
            return False
        last_match = ch
        start = pos + 1

    return num_open == 0


def _find_first_of(s: str, chars: str, start: int) -> int:
    for pos in range(start, len(s)):
        if s[pos] in chars:
            return pos
    return -1


def _find_closing(s: str, open_pos: int, brackets: str) -> int:
    close_char = brackets[1]
    num_open = 0
    prev = open_pos
    pos = open_pos
    while True:
        prev = pos
        num_open += -1 if s[prev] == close_char else 1
        pos = _find_first_of(s, brackets, prev + 1)
        if num_open <= 0 or pos < 0:
            return prev


def parse_nested_list(s: str) -> dict[str, Any]:
    """Parse a nested list string into a dictionary.

    The result holds 'Num Entries', 'Depth' and 'String' (the input with
    spaces removed), and for each entry i a 'Type i' of either 'Value' or
    'List' together with 'Entry i', which is the entry text or the parsed
    sublist. Raises ValueError if the string is not a valid nested list.
    """
    s = strip(s, " ")
    if not valid_nested_list_format(s):
        raise ValueError(f"Error! Input std::string '{s}' is not a valid (nested) list.\n")

    brackets = s[0] + s[-1]
    open_char = brackets[0]
    separators = brackets + ","

    result: dict[str, Any] = {}
    num_entries = 0
    depth_max = 1
    start = 1
    pos = _find_first_of(s, separators, start)
    while pos >= 0:
        if s[pos] == open_char:
            close = _find_closing(s, pos, brackets)
            sublist = parse_nested_list(s[pos : close + 1])
            result[strint("Type", num_entries)] = "List"
            result[strint("Entry", num_entries)] = sublist
            depth_max = max(depth_max, 1 + sublist["Depth"])
            # a closed sublist is always followed by ',' or a close bracket
            start = close + 2
        else:
            result[strint("Type", num_entries)] = "Value"
            result[strint("Entry", num_entries)] = s[start:pos]
            start = pos + 1
        num_entries += 1
        pos = _find_first_of(s, separators, start)

    result["Num Entries"] = num_entries
    result["Depth"] = depth_max
    result["String"] = s
    return result