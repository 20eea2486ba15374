"""Matching of argument and result lists against permutation tables."""

import re
from typing import Any, List, Optional, Sequence

from .errors import ArgumentError, ResultError, TooManyArguments, TooManyResults
from .messages import extramsg_mismatch, extramsg_toomany
from .normalize import ValueList, table_items, typeof
from .permute import Permutation, permute, project
from .signature_parser import Declaration
from .typespec import accepts_nil, classify, split_container, typesplit
from .validator import check

_ARGUMENT_EXPECTED = re.compile(r"argument( expected,)")


class Matcher:
    """Checks value lists against the permutations of one declaration side.

    The permutation table is built once and never modified, so one matcher
    can serve concurrent calls.
    """

    def __init__(self, name: str, permutations: Sequence[Permutation], *, results: bool = False):
        self.name = name
        self.permutations = tuple(permutations)
        self.results = results
        self.bad = "result" if results else "argument"
        self._typespecs = [
            [typesplit(typespec) for typespec in permutation.types]
            for permutation in self.permutations
        ]
        # several results are packed as a tuple
        self.multiple = any(len(p) > 1 or p.dots for p in self.permutations)

    def __repr__(self) -> str:
        return f"Matcher({self.name!r}, {list(self.permutations)!r})"

    def mismatch(self, index: int, values: ValueList) -> Optional[int]:
        """Return the first 1-based position where permutation *index* fails."""
        permutation = self.permutations[index]
        typespecs = self._typespecs[index]
        n = len(typespecs)
        for i, typespec in enumerate(typespecs, 1):
            if i > values.n:
                nil_ok = self.results or (permutation.dots and i == n)
                if nil_ok and accepts_nil(typespec):
                    continue
                return i
            if not check(typespec, values.get(i)):
                return i
        if permutation.dots:
            for i in range(n + 1, values.n + 1):
                if not check(typespecs[-1], values.get(i)):
                    return i
        elif values.n > n:
            return n + 1
        return None

    def diagnose(self, values: ValueList) -> None:
        """Raise the best attributed error unless a permutation matches."""
        best, winner = 0, None
        for index, permutation in enumerate(self.permutations):
            mismatch = self.mismatch(index, values)
            if mismatch is None:
                return
            if mismatch > best:
                best, winner = mismatch, permutation

        i = best
        if winner.dots and i > len(winner):
            expected = typesplit(winner[-1])
        else:
            expected = project(i, self.permutations)

        # For 'container of things', blame the first element of a wrong type.
        if i <= values.n:
            actual = values.get(i)
            for token in expected:
                container, element = split_container(token)
                if element and typeof(actual) == "table" and classify(container, actual):
                    for key, value in table_items(actual):
                        if not classify(element, value):
                            self.fail(i, extramsg_mismatch([element], value, key=key))

        if winner.dots or len(winner) >= values.n:
            self.fail(i, extramsg_mismatch(expected, values, index=i))
        self.fail(len(winner) + 1, extramsg_toomany(self.bad, len(winner), values.n), arity=True)

    def fail(self, i: int, extramsg: str, arity: bool = False) -> None:
        if self.results:
            extramsg = _ARGUMENT_EXPECTED.sub(r"result\1", extramsg)
            raise (TooManyResults if arity else ResultError)(self.name, i, extramsg)
        raise (TooManyArguments if arity else ArgumentError)(self.name, i, extramsg)

    def pack(self, result: Any) -> ValueList:
        """Turn a return value into a value list."""
        if result is None:
            return ValueList()
        if isinstance(result, tuple) and self.multiple:
            return ValueList(result)
        return ValueList((result,))


class Signature:
    """Argument and result matchers for one parsed declaration."""

    def __init__(self, declaration: Declaration):
        self.declaration = declaration
        self.name = declaration.name
        self.arguments = Matcher(self.name, permute(declaration.arguments))
        self.results: Optional[Matcher] = None
        if declaration.results is not None:
            permutations: List[Permutation] = []
            for group in declaration.results:
                permutations.extend(permute(group))
            # Ensure the longest permutation is first in the list.
            permutations.sort(key=len, reverse=True)
            self.results = Matcher(self.name, permutations, results=True)

    def __repr__(self) -> str:
        return f"Signature({self.declaration!r})"

    def check_arguments(self, args: Sequence[Any]) -> None:
        values = ValueList(args)
        if self.declaration.is_method:
            values = values.rest()
        self.arguments.diagnose(values)

    def check_results(self, result: Any) -> None:
        if self.results is not None:
            self.results.diagnose(self.results.pack(result))
