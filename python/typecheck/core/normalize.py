"""Value normalization shared by the classifier, formatter and matcher.

Values are described with the classic gradual-typing vocabulary: every
Python value has a fundamental *kind* (``nil``, ``boolean``, ``number``,
``string``, ``function``, ``userdata`` or ``table``) and a more specific
*tag* used in diagnostics (``integer``, ``float``, ``file``, a class name,
...).
"""

import functools
import inspect
import io
import numbers
import warnings
from collections.abc import Mapping, Sequence, Set
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple


_STRINGS = (str, bytes, bytearray)


def typeof(x: Any) -> str:
    """Return the fundamental kind of *x*.

    ``bytes`` and ``bytearray`` are strings, not tables.
    """
    if x is None:
        return "nil"
    if isinstance(x, bool):
        return "boolean"
    if isinstance(x, numbers.Real):
        return "number"
    if isinstance(x, _STRINGS):
        return "string"
    if isinstance(x, io.IOBase):
        return "userdata"
    if inspect.isroutine(x) or isinstance(x, functools.partial):
        return "function"
    return "table"


def io_type(x: Any) -> Optional[str]:
    """Return ``'file'``, ``'closed file'`` or ``None``."""
    if isinstance(x, io.IOBase):
        return "closed file" if x.closed else "file"
    return None


def tointeger(x: Any) -> Optional[int]:
    """Convert an integral real number to ``int``, otherwise ``None``.

    Strings are never converted.
    """
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        return None
    if isinstance(x, numbers.Integral):
        return int(x)
    try:
        if float(x).is_integer():
            return int(x)
    except (OverflowError, ValueError):
        pass
    return None


def math_type(x: Any) -> Optional[str]:
    """Return ``'integer'``, ``'float'`` or ``None`` according to type.

    Integer-valued floats are still ``'float'``.
    """
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        return None
    return "integer" if isinstance(x, numbers.Integral) else "float"


def _class_tag(x: Any) -> Optional[str]:
    cls = x.__class__
    tag = getattr(cls, "_type", None)
    if isinstance(tag, str):
        return tag
    if typeof(x) == "table" and cls.__module__ != "builtins":
        return cls.__name__
    return None


def tagof(x: Any) -> str:
    """Return the most specific type name of *x* for diagnostics."""
    return _class_tag(x) or io_type(x) or math_type(x) or typeof(x)


def getmetamethod(x: Any, name: str):
    """Return the bound special method *name* of *x* if user-defined.

    Methods inherited from builtin types don't count.
    """
    for klass in type(x).__mro__:
        if klass.__module__ == "builtins":
            continue
        if name in vars(klass):
            method = getattr(x, name, None)
            return method if callable(method) else None
    return None


def iscallable(x: Any) -> bool:
    """True for functions and for tables carrying a call capability."""
    return typeof(x) == "function" or (typeof(x) == "table" and callable(x))


def table_items(x: Any) -> Iterator[Tuple[Any, Any]]:
    """Iterate ``(key, value)`` pairs of a table-like value.

    Sequences are keyed from 1, sets are keyed by their members.
    """
    if isinstance(x, Mapping):
        return iter(x.items())
    if isinstance(x, Set):
        return ((v, v) for v in x)
    if isinstance(x, Sequence) and not isinstance(x, _STRINGS):
        return enumerate(x, 1)
    return iter(getattr(x, "__dict__", {}).items())


def is_empty(x: Any) -> bool:
    return next(table_items(x), None) is None


def _has_key(x: Any, key: int) -> bool:
    if isinstance(x, (Mapping, Set)):
        return key in x
    return key in getattr(x, "__dict__", {})


def rawlen(x: Any) -> int:
    """Length of a string or table ignoring any ``__len__`` override.

    For mappings, sets and plain objects this counts the contiguous run of
    integer keys starting at 1.
    """
    if isinstance(x, Sequence):
        return len(x)
    n = 0
    while _has_key(x, n + 1):
        n += 1
    return n


def length(x: Any) -> int:
    """Length of *x*, honouring user-defined ``__len__`` then ``__str__``."""
    method = getmetamethod(x, "__len__")
    if method is not None:
        return method()
    if getmetamethod(x, "__str__") is not None:
        return len(str(x))
    return rawlen(x)


class ValueList(Sequence):
    """Positional values with an explicit count.

    Indexing with :meth:`get` is 1-based and yields ``None`` past the end,
    so explicit trailing ``None`` values stay distinguishable from missing
    ones through :attr:`n`.
    """

    __slots__ = ("_values", "n")

    def __init__(self, values: Iterable[Any] = ()):
        self._values = tuple(values)
        self.n = len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return self.n

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ValueList):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"ValueList({list(self._values)!r}, n={self.n})"

    def get(self, i: int) -> Any:
        if 1 <= i <= self.n:
            return self._values[i - 1]
        return None

    def rest(self) -> "ValueList":
        """Drop the first value (a method's ``self``)."""
        return ValueList(self._values[1:])

    def unpack(self) -> Tuple[Any, ...]:
        return self._values


def pack(*values: Any) -> ValueList:
    """Return a :class:`ValueList` of *values*, keeping explicit ``None``."""
    return ValueList(values)


def unpack(t: Any, i: Optional[int] = None, j: Optional[int] = None) -> Tuple[Any, ...]:
    """Return elements ``i`` to ``j`` (1-based, inclusive) of *t*.

    Positions outside the sequence produce ``None``; *j* defaults to
    :func:`length` of *t*, or ``n`` for a :class:`ValueList`.
    """
    first = tointeger(i)
    if first is None:
        first = 1
    last = tointeger(j)
    if last is None:
        last = t.n if isinstance(t, ValueList) else length(t)

    def element(k):
        if isinstance(t, ValueList):
            return t.get(k)
        if isinstance(t, Sequence) and not isinstance(t, _STRINGS):
            return t[k - 1] if 1 <= k <= len(t) else None
        if isinstance(t, Mapping):
            return t.get(k)
        return None

    return tuple(element(k) for k in range(first, last + 1))


_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional(func: Callable[..., Any]) -> Callable[[tuple, dict], Tuple[Any, ...]]:
    """
    Return a function mapping a call's ``(args, kwargs)`` to positional values.

    Keyword arguments land in their parameter's slot. Parameters skipped
    before a supplied one are filled with their defaults, so later values
    keep their declared positions.

    Example:
        def f(a, b=1, c="s"): ...
        positional(f)((1,), {"c": 5})  # (1, 1, 5)
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        warnings.warn(f"cannot inspect signature of {func!r}; keyword arguments are not checked")
        sig = None

    def bind(args: tuple, kwargs: dict) -> Tuple[Any, ...]:
        if not kwargs or sig is None:
            return args
        try:
            arguments = sig.bind(*args, **kwargs).arguments
        except TypeError:
            # the call itself is invalid, let the function report it
            return args

        values = []
        skipped = []
        for param in sig.parameters.values():
            if param.kind == inspect.Parameter.VAR_POSITIONAL:
                if param.name in arguments:
                    values.extend(skipped)
                    values.extend(arguments[param.name])
                break
            if param.kind not in _POSITIONAL_KINDS:
                break
            if param.name in arguments:
                values.extend(skipped)
                skipped = []
                values.append(arguments[param.name])
            else:
                skipped.append(None if param.default is param.empty else param.default)
        return tuple(values)

    return bind
