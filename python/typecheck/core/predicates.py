"""Composable per-position argument predicates.

A predicate is called as ``predicate(argu, i)`` with a :class:`ValueList`
of all arguments and a 1-based index. It returns ``None`` to accept
``argu[i]``, or a :class:`Mismatch` describing the rejection: ``expected``
names the wanted type and ``got`` optionally describes the actual value.
A mismatch without ``expected`` is a complete message on its own.

Example:
    @checktypes("unpack", types.table, opt(types.integer), opt(types.integer))
    def unpack(t, i=None, j=None):
        ...
"""

import functools
from typing import Any, Callable, NamedTuple, Optional

from .errors import ArgumentError
from .messages import orconcat
from .normalize import ValueList, iscallable, positional, tagof, tointeger, typeof
from .runtime import _runtime


class Mismatch(NamedTuple):
    expected: Optional[str]
    got: Optional[str] = None


Predicate = Callable[[ValueList, int], Optional[Mismatch]]

KINDS = frozenset(["nil", "boolean", "number", "string", "function", "userdata", "table"])


def _fail(expected: str, argu: ValueList, i: int, got: Optional[str] = None) -> Mismatch:
    if i > argu.n:
        return Mismatch(expected, "got no value")
    if got is not None:
        return Mismatch(expected, "got " + got)
    return Mismatch(expected)


def check_with(expected: str, argu: ValueList, i: int, predicate: Callable[[Any], Any]) -> Optional[Mismatch]:
    """Build a predicate result from a plain ``predicate(value)`` test."""
    if not predicate(argu.get(i)):
        return _fail(expected, argu, i)
    return None


class _Types:
    """Predicates by name; kind names such as ``string`` test the primitive kind."""

    @staticmethod
    def accept(argu: ValueList, i: int) -> None:
        return None

    @staticmethod
    def arg(argu: ValueList, i: int) -> Optional[Mismatch]:
        """Reject a missing argument, accepting any value including None."""
        if i > argu.n:
            return Mismatch("argument", "got no value")
        return None

    @staticmethod
    def missing(argu: ValueList, i: int) -> Optional[Mismatch]:
        """Accept only a missing argument, not an explicit None."""
        if i > argu.n:
            return None
        return Mismatch("no value")

    @staticmethod
    def value(argu: ValueList, i: int) -> Optional[Mismatch]:
        if i > argu.n:
            return Mismatch("value", "got no value")
        if argu.get(i) is None:
            return Mismatch("value")
        return None

    @staticmethod
    def callable(argu: ValueList, i: int) -> Optional[Mismatch]:
        return check_with("callable", argu, i, iscallable)

    @staticmethod
    def integer(argu: ValueList, i: int) -> Optional[Mismatch]:
        value = argu.get(i)
        if typeof(value) != "number":
            return _fail("integer", argu, i)
        if tointeger(value) is None:
            return Mismatch(None, f"{tagof(value)} has no integer representation")
        return None

    def __getattr__(self, kind: str) -> Predicate:
        if kind not in KINDS:
            raise AttributeError(f"no type predicate named {kind!r}")

        def primitive(argu: ValueList, i: int) -> Optional[Mismatch]:
            return check_with(kind, argu, i, lambda x: typeof(x) == kind)

        primitive.__name__ = kind
        return primitive

    def __getitem__(self, kind: str) -> Predicate:
        return getattr(self, kind)


types = _Types()


def any_of(*predicates: Predicate) -> Predicate:
    """Accept a value when any of *predicates* accepts it."""

    def predicate(argu: ValueList, i: int) -> Optional[Mismatch]:
        alternatives = []
        got = None
        for candidate in predicates:
            result = candidate(argu, i)
            if result is None:
                return None
            expected, got = result
            if expected is None and got:
                # not a type mismatch, report it as is
                return result
            if expected is not None and expected != "nil":
                alternatives.append(expected)
        if not alternatives:
            return Mismatch(None, got)
        return Mismatch(orconcat(alternatives), got)

    return predicate


def opt(*predicates: Predicate) -> Predicate:
    """Like :func:`any_of`, additionally accepting ``None``."""
    return any_of(types.nil, *predicates)


def checktypes(name: str, *predicates: Predicate):
    """
    Decorator validating positional arguments with *predicates*.

    Returns the decorated function untouched when checking is disabled.
    """
    def decorator(inner):
        if not _runtime.argcheck:
            return inner
        if not callable(inner):
            raise TypeError("attempt to annotate non-callable value with 'checktypes'")
        bind = positional(inner)

        @functools.wraps(inner)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            argu = ValueList(bind(args, kwargs))
            for i, predicate in enumerate(predicates, 1):
                result = predicate(argu, i)
                if result is None:
                    continue
                expected, got = result
                if expected:
                    got = got or "got " + typeof(argu.get(i))
                    raise ArgumentError(name, i, f"{expected} expected, {got}")
                if got:
                    raise ArgumentError(name, i, got)
            return inner(*args, **kwargs)

        return wrapper

    return decorator
