"""Process-wide runtime switches."""

import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_ARGCHECK = "TYPECHECK_ARGCHECK"

_FALSY = {"0", "false", "no", "off"}


class Runtime:
    """Switches consulted whenever a function is wrapped.

    Changing a switch affects only functions wrapped afterwards; already
    wrapped functions keep the behaviour they were built with.

    Example:
        from typecheck import debug
        debug(False)   # production: argscheck returns functions untouched
    """

    def __init__(self, *, argcheck: bool = True):
        self.argcheck = argcheck

    def __call__(self, enabled: bool = True) -> "Runtime":
        self.argcheck = enabled is not False
        logger.debug("argument checking %s", "enabled" if self.argcheck else "disabled")
        return self

    def __repr__(self) -> str:
        return f"Runtime(argcheck={self.argcheck})"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Runtime":
        """Build a runtime from ``TYPECHECK_ARGCHECK``; unset means enabled."""
        environ = os.environ if environ is None else environ
        value = environ.get(ENV_ARGCHECK)
        if value is None:
            return cls()
        return cls(argcheck=value.strip().lower() not in _FALSY)


# Global runtime instance
_runtime = Runtime.from_env()


def debug(enabled: bool = True) -> Runtime:
    """Turn run-time checking on or off for functions wrapped from now on."""
    return _runtime(enabled)
