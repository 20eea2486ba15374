"""typecheck: gradual run-time type checking for Python functions."""

from typecheck.decorators import argscheck, checktypes
from typecheck.core import (
    # Runtime switches
    Runtime, debug,
    # Errors
    TypeCheckError, ArgumentError, ResultError, ArityError,
    TooManyArguments, TooManyResults, DeclarationError,
    # Value checks
    CheckResult, check, validate, argcheck, argerror, resulterror,
    # Typespecs
    typesplit, classify, permute, parse_types, Permutation,
    # Messages
    extramsg_mismatch, extramsg_toomany,
    # Declarations
    Declaration, parse_declaration, Signature,
    # Normalization
    ValueList, pack, unpack,
)
from typecheck.core.predicates import Mismatch, any_of, opt, types

__version__ = "0.4.0"

__all__ = [
    # Decorators
    "argscheck",
    "checktypes",
    # Runtime
    "Runtime",
    "debug",
    # Errors
    "TypeCheckError",
    "ArgumentError",
    "ResultError",
    "ArityError",
    "TooManyArguments",
    "TooManyResults",
    "DeclarationError",
    # Value checks
    "CheckResult",
    "check",
    "validate",
    "argcheck",
    "argerror",
    "resulterror",
    # Typespecs
    "typesplit",
    "classify",
    "permute",
    "parse_types",
    "Permutation",
    # Messages
    "extramsg_mismatch",
    "extramsg_toomany",
    # Declarations
    "Declaration",
    "parse_declaration",
    "Signature",
    # Predicates
    "Mismatch",
    "any_of",
    "opt",
    "types",
    # Normalization
    "ValueList",
    "pack",
    "unpack",
]
