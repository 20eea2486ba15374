"""Declaration parser for run-time argument and result checking."""

import re
from dataclasses import dataclass
from typing import List, Optional

from .errors import DeclarationError


@dataclass
class Declaration:
    """Parsed function declaration."""
    name: str
    arguments: List[str]
    results: Optional[List[List[str]]] = None

    @property
    def is_method(self) -> bool:
        """A ``:`` in the name means ``self`` is not declared."""
        return ":" in self.name

    def __repr__(self) -> str:
        args_str = ", ".join(self.arguments)
        if self.results is None:
            return f"{self.name}({args_str})"
        results_str = " or ".join(", ".join(group) for group in self.results)
        return f"{self.name}({args_str}) => {results_str}"


class DeclarationParser:
    """Parser for ``name(types, ...) => types, ...`` declarations."""

    NAME_PATTERN = re.compile(r"^\s*([A-Za-z_][\w.:]*)\s*\((.*)\)\s*$", re.DOTALL)
    GROUP_SEPARATOR = re.compile(r"\s+or\s+")

    def parse(self, declaration: str) -> Declaration:
        """
        Parse a declaration string.

        Formats:
            - "string.len(string) => int"
            - "table.insert(table, [int], ?any)"
            - "string:format(?any...)"
            - "io.open(string, ?string) => file or nil, string"
        """
        if not isinstance(declaration, str):
            raise DeclarationError(f"declaration must be a string, not {type(declaration).__name__}")

        head, arrow, results_str = declaration.partition("=>")
        match = self.NAME_PATTERN.match(head)
        if match is None:
            raise DeclarationError(f"Invalid declaration format: expected 'name(types)': {declaration!r}")
        name, arguments_str = match.group(1), match.group(2)

        results = None
        if arrow:
            results_str = results_str.strip()
            if not results_str:
                raise DeclarationError(f"Invalid declaration format: missing result types: {declaration!r}")
            results = [
                self._parse_positions(group)
                for group in self.GROUP_SEPARATOR.split(results_str)
            ]

        return Declaration(name=name, arguments=self._parse_positions(arguments_str), results=results)

    def _parse_positions(self, positions_str: str) -> List[str]:
        """Split comma-separated type positions, keeping bracketed groups whole."""
        positions = []
        current = ""
        depth = 0

        for char in positions_str:
            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
            elif char == "," and depth == 0:
                positions.append(current.strip())
                current = ""
                continue
            if char == "," and depth > 0:
                raise DeclarationError(f"comma inside optional type: {positions_str!r}")
            current += char

        if depth != 0:
            raise DeclarationError(f"unbalanced brackets: {positions_str!r}")
        if current.strip() or positions:
            positions.append(current.strip())
        return positions


# Singleton parser instance
_parser = DeclarationParser()


def parse_declaration(declaration: str) -> Declaration:
    """Parse a declaration string."""
    return _parser.parse(declaration)
