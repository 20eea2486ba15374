"""Expansion of positional typespecs into concrete permutations."""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple

from .errors import DeclarationError
from .typespec import typesplit

_OPTIONAL = re.compile(r"^\[(.+)\]$")
_TRAILING_DOTS = re.compile(r"\]\s*\.\.\.$")
ELLIPSIS = "..."


@dataclass
class Permutation:
    """One concrete list of typespecs, one per value position.

    When ``dots`` is set the final typespec also applies to every value past
    the end of the list.
    """
    types: List[str] = field(default_factory=list)
    dots: bool = False

    def __len__(self) -> int:
        return len(self.types)

    def __getitem__(self, index):
        return self.types[index]

    def __repr__(self) -> str:
        types = ", ".join(self.types)
        return f"({types}{ELLIPSIS if self.dots else ''})"

    def copy(self) -> "Permutation":
        return Permutation(list(self.types), self.dots)

    def append(self, typespec: str) -> None:
        """Append *typespec*, stripping and recording a trailing ellipsis."""
        if typespec.endswith(ELLIPSIS):
            self.dots = True
            # a bare ellipsis accepts anything, including nothing
            typespec = typespec[:-len(ELLIPSIS)].rstrip() or "?any"
        self.types.append(typespec)


class ParsedTypes(NamedTuple):
    types: List[List[str]]
    dots: bool


def _check_position(position: str, final: bool) -> None:
    if not position or position == "[]":
        raise DeclarationError("empty type position")
    opening, closing = position.count("["), position.count("]")
    if opening != closing or opening > 1:
        raise DeclarationError(f"unbalanced brackets in type position '{position}'")
    if opening and not _OPTIONAL.match(position):
        raise DeclarationError(f"optional type must be wrapped in brackets: '{position}'")
    if not final and position.rstrip("]").endswith(ELLIPSIS):
        raise DeclarationError(f"only the final type may end with '{ELLIPSIS}': '{position}'")


def permute(positions: Iterable[str]) -> List[Permutation]:
    """
    Calculate permutations of type lists with and without [optionals].

    The first permutation always has every optional position present, so
    it is the longest.

    Example:
        permute(["string", "[int]"])  # [(string, int), (string)]
    """
    positions = [p.strip() for p in positions]
    if positions:
        positions[-1] = _TRAILING_DOTS.sub(ELLIPSIS + "]", positions[-1])
    for i, position in enumerate(positions):
        _check_position(position, final=i == len(positions) - 1)

    permutations = [Permutation()]
    for position in positions:
        optional = _OPTIONAL.match(position)
        if optional is None:
            # Append non-optional type-spec to each permutation.
            for permutation in permutations:
                permutation.append(position)
        else:
            # Duplicate all existing permutations, and add the optional
            # type-spec to the originals only.
            omitted = [permutation.copy() for permutation in permutations]
            for permutation in permutations:
                permutation.append(optional.group(1).strip())
            permutations.extend(omitted)
    return permutations


def project(i: int, permutations: Iterable[Permutation]) -> List[str]:
    """Union of the type names at 1-based position *i* of *permutations*."""
    result: List[str] = []
    for permutation in permutations:
        if i <= len(permutation):
            for name in typesplit(permutation[i - 1]):
                if name not in result:
                    result.append(name)
    return result


def parse_types(positions: Iterable[str]) -> ParsedTypes:
    """
    Compact a permutation list into the valid types at each position.

    Example:
        parse_types(["string", "[int]", "?any..."])
        # ParsedTypes(types=[['string'], ['int', 'any', 'nil'], ['any', 'nil']], dots=True)
    """
    permutations = permute(positions)
    longest = permutations[0]
    types = [project(i, permutations) for i in range(1, len(longest) + 1)]
    return ParsedTypes(types, longest.dots)
