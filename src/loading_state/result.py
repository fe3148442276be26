"""Binary outcome of a finished call.

``Result`` is the shape a completed operation hands back before it is folded
into a ``LoadingState``: either ``Ok`` carrying the value or ``Err`` carrying
the exception.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging
from typing import Any

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A call that returned normally."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E: Exception]:
    """A call that failed, holding the error."""

    error: E


type Result[T, E: Exception] = Ok[T] | Err[E]


def capture[T](
    fn: Callable[..., T], /, *args: Any, **kwargs: Any
) -> Result[T, Exception]:
    """Call ``fn`` and record how it finished.

    Exceptions are returned as ``Err``. ``KeyboardInterrupt``, ``SystemExit``
    and other non-``Exception`` signals still propagate.
    """
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:
        log.debug(
            "%s raised %s; recorded as Err",
            getattr(fn, "__qualname__", repr(fn)),
            type(exc).__name__,
        )
        return Err(exc)
    return Ok(value)
