"""Exceptions raised by argument and result checks."""

from typing import Optional


class TypeCheckError(TypeError):
    """Base class for run-time type check failures."""

    template = "bad value #{index} for '{name}'"

    def __init__(self, name: str, index: int, extramsg: Optional[str] = None):
        self.name = name
        self.index = index
        self.extramsg = extramsg
        message = self.template.format(index=index, name=name)
        if extramsg is not None:
            message = f"{message} ({extramsg})"
        super().__init__(message)


class ArgumentError(TypeCheckError):
    """An argument did not match any acceptable type."""

    template = "bad argument #{index} to '{name}'"


class ResultError(TypeCheckError):
    """A wrapped function returned a value of the wrong type."""

    template = "bad result #{index} from '{name}'"


class ArityError(TypeCheckError):
    """More values than a non-variadic declaration allows."""


class TooManyArguments(ArgumentError, ArityError):
    pass


class TooManyResults(ResultError, ArityError):
    pass


class DeclarationError(ValueError):
    """A declaration string could not be parsed."""
