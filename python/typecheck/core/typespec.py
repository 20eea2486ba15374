"""Typespec splitting and single-token classification."""

import re
from typing import Any, Iterable, List, Optional, Tuple, Union

from .normalize import io_type, iscallable, is_empty, length, tagof, table_items, tointeger, typeof

# "table of ints" -> ("table", "int")
CONTAINER_PATTERN = re.compile(r"^(\S+) of (\S*?)s?$")

_OR = re.compile(r"\s+or\s+")
_BAR = re.compile(r"\s*\|\s*")


def typesplit(typespec: Union[str, Iterable[str]]) -> List[str]:
    """
    Split a typespec into a list of normalized type names.

    Duplicates are removed and a leading ``?`` on any name is replaced by a
    single ``nil`` element at the end.

    Example:
        typesplit("?bool|:nometa")      # ['bool', ':nometa', 'nil']
        typesplit("int or string|int")  # ['int', 'string']
    """
    if isinstance(typespec, str):
        tokens = _BAR.split(_OR.sub("|", typespec.strip()))
    else:
        tokens = list(typespec)

    result: List[str] = []
    add_nil = False
    for token in tokens:
        if token.startswith("?") and len(token) > 1:
            add_nil, token = True, token[1:]
        if token not in result:
            result.append(token)
    if add_nil:
        if "nil" in result:
            result.remove("nil")
        result.append("nil")
    return result


def split_container(token: str) -> Tuple[str, Optional[str]]:
    """Return ``(container, element)`` for composites, else ``(token, None)``."""
    match = CONTAINER_PATTERN.match(token)
    if match:
        return match.group(1), match.group(2)
    return token, None


def _is_list(expected: str, actual: Any) -> bool:
    n = length(actual)
    count = 0
    for _ in table_items(actual):
        count += 1
        if count > n:
            return False
    return count == n and (expected == "list" or count > 0)


def classify(expected: str, actual: Any) -> bool:
    """Check *actual* against a single type name *expected*."""
    if expected == "any" and actual is not None:
        return True
    if expected == "file" and io_type(actual) == "file":
        return True
    if expected in ("functable", "callable", "functor"):
        if typeof(actual) == "table" and iscallable(actual):
            return True

    kind = typeof(actual)
    if expected == kind:
        return True
    if expected == "bool" and kind == "boolean":
        return True
    if expected == "#table":
        if kind == "table" and not is_empty(actual):
            return True
    elif expected in ("func", "callable"):
        if kind == "function":
            return True
    elif expected in ("int", "integer"):
        if tointeger(actual) is not None:
            return True
    elif expected.startswith(":"):
        if expected == actual:
            return True

    tag = tagof(actual)
    if expected == tag:
        return True
    if expected in ("list", "#list"):
        if tag in ("table", "List") and kind == "table":
            return _is_list(expected, actual)
    elif expected == "object":
        if tag != "table" and kind == "table":
            return True
    return False


def accepts_nil(typespec: Union[str, Iterable[str]]) -> bool:
    return "nil" in typesplit(typespec)
