"""Human readable mismatch descriptions.

Every message follows the ``"<expected> expected, got <actual>"`` house
style, e.g. ``"string or number expected, got empty table"``.
"""

import re
from typing import Any, Callable, Iterable, List, Optional, Union

from .normalize import ValueList, is_empty, iscallable, tagof, tointeger, typeof
from .typespec import split_container, typesplit


def _sub(pattern: str, replace: str) -> Callable[[str], str]:
    regex = re.compile(pattern)

    def xform(s: str) -> str:
        return regex.sub(replace, s)

    return xform


# Sort keys only; a leading tab sorts container phrases before plain nouns.
ORCONCAT_XFORMS = [
    _sub("#table", "non-empty table"),
    _sub("#list", "non-empty list"),
    _sub("functor", "functable"),
    _sub("list of", r"\t\g<0>"),
    _sub("table of", r"\t\g<0>"),
]

EXTRAMSG_XFORMS = [
    _sub("any value or nil", "argument"),
    _sub("#table", "non-empty table"),
    _sub("#list", "non-empty list"),
    _sub("functor", "functable"),
    _sub(r"(\S+ of) bool([,\s])", r"\1 boolean\2"),
    _sub(r"(\S+ of) func([,\s])", r"\1 function\2"),
    _sub(r"(\S+ of) int([,\s])", r"\1 integer\2"),
    _sub(r"(\S+ of [^,\s]*?)s?([,\s])", r"\1s\2"),
    _sub(r"(s, [^,\s]*?)s?([,\s])", r"\1s\2"),
    _sub(r"(of .*?)s? or ([^,\s]*?)s? ", r"\1s or \2s "),
]

DISPLAY_NAMES = {
    "func": "function",
    "bool": "boolean",
    "int": "integer",
    "any": "any value",
    "file": "FILE handle",
}


def _sort_key(s: str) -> str:
    for xform in ORCONCAT_XFORMS:
        s = xform(s)
    return s


def orconcat(alternatives: Iterable[str]) -> str:
    """
    Join alternatives with ``', '`` and a final ``' or '``.

    Example:
        orconcat(["string", "number", "nil"])  # 'nil, number or string'
    """
    alternatives = list(alternatives)
    if len(alternatives) > 1:
        alternatives = sorted(alternatives, key=_sort_key)
        last = alternatives.pop()
        alternatives[-1] = f"{alternatives[-1]} or {last}"
    return ", ".join(alternatives)


def _expected_string(expected: List[str], key: Any) -> str:
    names = []
    for token in expected:
        if token in DISPLAY_NAMES:
            names.append(DISPLAY_NAMES[token])
        elif key is None:
            names.append(split_container(token)[0])
        else:
            names.append(token)
    expectedstr = orconcat(names) + " expected"
    for xform in EXTRAMSG_XFORMS:
        expectedstr = xform(expectedstr)
    return expectedstr


def extramsg_mismatch(
    expected: Union[str, Iterable[str]],
    actual: Any,
    index: Optional[int] = None,
    key: Any = None,
) -> str:
    """
    Format a type mismatch for the parenthesised part of an error.

    Args:
        expected: typespec string or list of acceptable type names
        actual: the offending value, or a ValueList when *index* is given
        index: 1-based position in *actual*; past its end means "no value"
        key: container key of an offending element

    Example:
        extramsg_mismatch("string|number", {})
        # 'number or string expected, got empty table'
    """
    expected = typesplit(expected)
    missing = False
    if index is not None:
        values = actual if isinstance(actual, ValueList) else ValueList(actual)
        actual = values.get(index)
        missing = index > values.n

    if missing:
        actualtype = "no value"
    else:
        actualtype = tagof(actual)
        if isinstance(actual, str) and actual.startswith(":"):
            actualtype = actual
        elif typeof(actual) == "table":
            if actualtype == "table" and iscallable(actual):
                actualtype = "functable"
            elif is_empty(actual):
                matchstr = "," + ",".join(expected) + ","
                if actualtype == "table" and matchstr == ",#list,":
                    actualtype = "empty list"
                elif actualtype == "table" or ",#" in matchstr:
                    actualtype = "empty " + actualtype

    expectedstr = _expected_string(expected, key)

    if expectedstr == "integer expected" and typeof(actual) == "number" and not missing:
        if tointeger(actual) is None:
            actualtype = f"{actualtype} has no integer representation"

    if key is not None:
        actualtype = f"{actualtype} at index {key}"

    return f"{expectedstr}, got {actualtype}"


def extramsg_toomany(bad: str, expected: int, actual: int) -> str:
    """
    Format a too-many-values message.

    Example:
        extramsg_toomany("argument", 1, 3)
        # 'no more than 1 argument expected, got 3'
    """
    plural = "" if expected == 1 else "s"
    return f"no more than {expected} {bad}{plural} expected, got {actual}"
