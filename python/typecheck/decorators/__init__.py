"""Function decorators for run-time type checking."""

from .argscheck import argscheck
from ..core.predicates import checktypes

__all__ = ["argscheck", "checktypes"]
