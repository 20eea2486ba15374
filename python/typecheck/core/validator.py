"""Validation of single values against typespecs."""

from typing import Any, Iterable, NamedTuple, Optional, Union

from .errors import ArgumentError, ResultError
from .messages import extramsg_mismatch
from .normalize import table_items, typeof
from .predicates import any_of, checktypes, opt, types
from .runtime import _runtime
from .typespec import classify, split_container, typesplit


class CheckResult(NamedTuple):
    """Outcome of :func:`check`; truthy only when the value matched."""
    ok: bool
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


def check(expected: Union[str, Iterable[str]], actual: Any) -> CheckResult:
    """
    Check the type of *actual* against the *expected* typespec.

    Example:
        check("string|number", {})
        # CheckResult(ok=False, message='number or string expected, got empty table')
        check("table of int", [1, 2, "x"]).message
        # 'integer expected, got string at index 3'
    """
    expected = typesplit(expected)

    for expect in expected:
        container, contents = split_container(expect)
        ok = classify(container, actual)

        # For 'table of things', check all elements are a thing too.
        if ok and contents and typeof(actual) == "table":
            for key, value in table_items(actual):
                if not classify(contents, value):
                    return CheckResult(False, extramsg_mismatch([contents], value, key=key))
        if ok:
            return CheckResult(True)

    return CheckResult(False, extramsg_mismatch(expected, actual))


def validate(value: Any, type_annotation: Union[str, Iterable[str]]) -> bool:
    """
    Validate a value against a typespec.

    Example:
        validate([1, 2, 3], "list of int")  # True
        validate([1, "a"], "list of int")   # False
    """
    return check(type_annotation, value).ok


@checktypes("argerror", types.string, types.integer, opt(types.string))
def argerror(name: str, i: int, extramsg: Optional[str] = None) -> None:
    """Raise a bad argument error for argument *i* of *name*."""
    raise ArgumentError(name, i, extramsg)


@checktypes("resulterror", types.string, types.integer, opt(types.string))
def resulterror(name: str, i: int, extramsg: Optional[str] = None) -> None:
    """Raise a bad result error for result *i* of *name*."""
    raise ResultError(name, i, extramsg)


@checktypes("argcheck", types.string, types.integer, any_of(types.string, types.table), types.accept)
def argcheck(name: str, i: int, expected: Union[str, Iterable[str]], actual: Any) -> None:
    """
    Check the type of an argument against expected types.

    Does nothing while run-time checking is disabled.

    Raises:
        ArgumentError: when *actual* does not match *expected*

    Example:
        def case(with_, branches):
            argcheck("functional.case", 2, "#table", branches)
    """
    if not _runtime.argcheck:
        return
    result = check(expected, actual)
    if not result:
        raise ArgumentError(name, i, result.message)
