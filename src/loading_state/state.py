"""Snapshot of where an asynchronous operation stands.

A ``LoadingState`` is exactly one of four variants:

- ``Idle``: the operation has not been started.
- ``InProgress``: the operation started and has not resolved yet.
- ``Success``: the operation resolved with a value.
- ``Failure``: the operation resolved with an error.

Instances are immutable. Every combinator returns a new state and passes the
unresolved variants through without calling the transform. Transitions are
the caller's business; any variant may be built at any time.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from typing import Any, NoReturn, Self

from loading_state.errors import OutcomeTypeError
from loading_state.result import Err, Ok, Result


class LoadingState[TSuccess, TFailure: Exception]:
    """Base of the four loading variants. Not instantiable on its own."""

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        del args, kwargs
        if cls is LoadingState:
            raise TypeError(
                "LoadingState cannot be instantiated directly; use Idle(), "
                "InProgress(), Success(value), Failure(error) or "
                "LoadingState.from_result(outcome)"
            )
        return super().__new__(cls)

    # --- Construction from a finished outcome ---

    @classmethod
    def from_result(
        cls, outcome: Result[TSuccess, TFailure]
    ) -> LoadingState[TSuccess, TFailure]:
        """Build the resolved state matching ``outcome``.

        ``Ok(v)`` becomes ``Success(v)`` and ``Err(e)`` becomes ``Failure(e)``.
        A finished outcome never produces ``Idle`` or ``InProgress``.
        """
        match outcome:
            case Ok(value=value):
                return Success(value)
            case Err(error=error):
                return Failure(error)
            case _:
                raise OutcomeTypeError(
                    f"Expected Ok or Err, got {type(outcome).__name__}",
                    hint="Wrap plain calls with loading_state.capture() first.",
                )

    @staticmethod
    def finished(
        outcome: Result[TSuccess, TFailure],
    ) -> LoadingState[TSuccess, TFailure]:
        """Named factory for call-site readability; same as ``from_result``."""
        return LoadingState.from_result(outcome)

    # --- Queries ---

    @property
    def value(self) -> TSuccess | None:
        """Payload of a ``Success``; ``None`` for every other variant."""
        return None

    @property
    def error(self) -> TFailure | None:
        """Payload of a ``Failure``; ``None`` for every other variant."""
        return None

    @property
    def is_idle(self) -> bool:
        return isinstance(self, Idle)

    @property
    def is_in_progress(self) -> bool:
        return isinstance(self, InProgress)

    @property
    def is_successful(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failed(self) -> bool:
        return isinstance(self, Failure)

    @property
    def is_resolved(self) -> bool:
        """True once the operation has produced a value or an error."""
        return isinstance(self, Success | Failure)

    def value_or[TDefault](self, default: TDefault) -> TSuccess | TDefault:
        match self:
            case Success(value=value):
                return value
            case _:
                return default

    def to_result(self) -> Result[TSuccess, TFailure] | None:
        """Turn a resolved state back into its outcome; ``None`` if unresolved."""
        match self:
            case Idle() | InProgress():
                return None
            case Success(value=value):
                return Ok(value)
            case Failure(error=error):
                return Err(error)
            case _:
                _unknown_variant(self)

    # --- Combinators ---

    def map[TNew](
        self, transform: Callable[[TSuccess], TNew]
    ) -> LoadingState[TNew, TFailure]:
        """Transform the success payload; other variants pass through."""
        match self:
            case Idle():
                return Idle()
            case InProgress():
                return InProgress()
            case Success(value=value):
                return Success(transform(value))
            case Failure(error=error):
                return Failure(error)
            case _:
                _unknown_variant(self)

    def map_error[TNew: Exception](
        self, transform: Callable[[TFailure], TNew]
    ) -> LoadingState[TSuccess, TNew]:
        """Transform the failure payload; other variants pass through."""
        match self:
            case Idle():
                return Idle()
            case InProgress():
                return InProgress()
            case Success(value=value):
                return Success(value)
            case Failure(error=error):
                return Failure(transform(error))
            case _:
                _unknown_variant(self)

    def flat_map[TNew](
        self, transform: Callable[[TSuccess], LoadingState[TNew, TFailure]]
    ) -> LoadingState[TNew, TFailure]:
        """Replace a ``Success`` with whatever state ``transform`` returns.

        The returned state is used as is, so a dependent step can report
        ``Idle``, ``InProgress`` or ``Failure`` for the chain as a whole.
        """
        match self:
            case Idle():
                return Idle()
            case InProgress():
                return InProgress()
            case Success(value=value):
                return transform(value)
            case Failure(error=error):
                return Failure(error)
            case _:
                _unknown_variant(self)

    def flat_map_error[TNew: Exception](
        self, transform: Callable[[TFailure], LoadingState[TSuccess, TNew]]
    ) -> LoadingState[TSuccess, TNew]:
        """Replace a ``Failure`` with whatever state ``transform`` returns."""
        match self:
            case Idle():
                return Idle()
            case InProgress():
                return InProgress()
            case Success(value=value):
                return Success(value)
            case Failure(error=error):
                return transform(error)
            case _:
                _unknown_variant(self)


@dataclasses.dataclass(frozen=True, slots=True)
class Idle[TSuccess, TFailure: Exception](LoadingState[TSuccess, TFailure]):
    """The operation has not been started."""


@dataclasses.dataclass(frozen=True, slots=True)
class InProgress[TSuccess, TFailure: Exception](LoadingState[TSuccess, TFailure]):
    """The operation started and has not resolved yet."""


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess, TFailure: Exception](LoadingState[TSuccess, TFailure]):
    """The operation resolved with ``value``."""

    # field() keeps the inherited property from being taken as the default.
    value: TSuccess = dataclasses.field()


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TSuccess, TFailure: Exception](LoadingState[TSuccess, TFailure]):
    """The operation resolved with ``error``."""

    error: TFailure = dataclasses.field()


def _unknown_variant(state: object) -> NoReturn:
    raise TypeError(f"Unknown loading state variant: {type(state).__name__}")
