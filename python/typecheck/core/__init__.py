"""Core runtime functionality."""

from .runtime import Runtime, _runtime, debug
from .errors import (
    TypeCheckError, ArgumentError, ResultError, ArityError,
    TooManyArguments, TooManyResults, DeclarationError,
)
from .normalize import ValueList, pack, unpack, typeof, tagof, tointeger
from .typespec import typesplit, classify
from .permute import Permutation, permute, parse_types
from .messages import extramsg_mismatch, extramsg_toomany
from .validator import CheckResult, check, validate, argcheck, argerror, resulterror
from .signature_parser import Declaration, DeclarationParser, parse_declaration
from .matcher import Matcher, Signature

__all__ = [
    "Runtime", "_runtime", "debug",
    "TypeCheckError", "ArgumentError", "ResultError", "ArityError",
    "TooManyArguments", "TooManyResults", "DeclarationError",
    "ValueList", "pack", "unpack", "typeof", "tagof", "tointeger",
    "typesplit", "classify",
    "Permutation", "permute", "parse_types",
    "extramsg_mismatch", "extramsg_toomany",
    "CheckResult", "check", "validate", "argcheck", "argerror", "resulterror",
    "Declaration", "DeclarationParser", "parse_declaration",
    "Matcher", "Signature",
]
