"""CLI entry point for trying out typespecs and declarations."""

import ast
import sys
import argparse
from typing import Any, List, Optional


def _literal(text: str) -> Any:
    """Parse a Python literal, falling back to the raw string."""
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        return text


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="typecheck",
        description="typecheck: gradual run-time type checking for Python functions"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Check a value against a typespec")
    check_parser.add_argument("typespec", help="Typespec, e.g. '?string|#list'")
    check_parser.add_argument("value", help="Python literal to check, e.g. '[1, 2]'")

    permute_parser = subparsers.add_parser("permute", help="Show the permutations of a declaration")
    permute_parser.add_argument("declaration", help="Declaration, e.g. 'f(string, [int]) => string'")

    subparsers.add_parser("version", help="Show version")

    args = parser.parse_args(argv)

    from typecheck import DeclarationError, Signature, __version__, check, parse_declaration

    if args.command == "version":
        print(f"typecheck version {__version__}")
        return 0

    if args.command == "check":
        result = check(args.typespec, _literal(args.value))
        if result:
            print("ok")
            return 0
        print(result.message)
        return 1

    try:
        signature = Signature(parse_declaration(args.declaration))
    except DeclarationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"{signature.name} arguments:")
    for permutation in signature.arguments.permutations:
        print(f"  {permutation}")
    if signature.results is not None:
        print(f"{signature.name} results:")
        for permutation in signature.results.permutations:
            print(f"  {permutation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
