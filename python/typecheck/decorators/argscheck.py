"""Argscheck decorator for run-time argument and result validation."""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar, cast

from ..core.predicates import checktypes, opt, types
from ..core.matcher import Signature
from ..core.normalize import positional as bind_positional
from ..core.runtime import _runtime
from ..core.signature_parser import parse_declaration

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def _wrap(signature: Signature, func: F) -> F:
    positional = bind_positional(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # Validate arguments
        signature.check_arguments(positional(args, kwargs))

        # Call function
        result = func(*args, **kwargs)

        # Validate results
        signature.check_results(result)

        return result

    # Preserve declaration info
    wrapper.__typecheck_declaration__ = signature.declaration
    wrapper.__typecheck_signature__ = signature

    return cast(F, wrapper)


def argscheck(decl: str, inner: Optional[F] = None) -> Any:
    """
    Wrap a function with argument and result type checking.

    Each argument must match the typespec at the corresponding position of
    *decl*. A trailing ellipsis checks all remaining arguments against the
    final type, brackets mark arguments that may be omitted entirely, and a
    colon in the name says that ``self`` is not declared. Results after
    ``=>`` are checked the same way, with ``or`` separating alternative
    result lists.

    When checking is disabled, *inner* is returned untouched.

    Args:
        decl: declaration like "string.format(string, ?any...) => string"
        inner: function to wrap; omit to get a decorator

    Raises:
        DeclarationError: when *decl* cannot be parsed

    Example:
        @argscheck("table.insert(list, [int], ?any)")
        def insert(t, pos, value=None):
            ...

        open_ = argscheck("io.open(string, ?string) => file or nil, string", open_)
    """
    if not _runtime.argcheck:
        logger.debug("argument checking disabled, not wrapping %s", decl)
        if inner is not None:
            return inner
        return lambda func: func

    # Precalculate permutations once to make multiple calls faster.
    signature = Signature(parse_declaration(decl))
    logger.debug(
        "%s: %d argument permutation(s), %d result permutation(s)",
        signature.name,
        len(signature.arguments.permutations),
        len(signature.results.permutations) if signature.results else 0,
    )

    def decorator(func: F) -> F:
        if not callable(func):
            raise TypeError("attempt to annotate non-callable value with 'argscheck'")
        return _wrap(signature, func)

    if inner is not None:
        return decorator(inner)
    return decorator


argscheck = checktypes("argscheck", types.string, opt(types.callable))(argscheck)
