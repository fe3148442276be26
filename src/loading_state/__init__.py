"""loading-state: the lifecycle of an asynchronous result as a value.

Public API:
    - LoadingState: Idle | InProgress | Success | Failure, with map/flat_map
    - Ok / Err / Result: binary outcome of a finished call
    - capture(): run a callable and record its outcome
"""

from __future__ import annotations

import logging

from loading_state.errors import LoadingStateError, OutcomeTypeError
from loading_state.result import Err, Ok, Result, capture
from loading_state.state import Failure, Idle, InProgress, LoadingState, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("loading-state")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("loading_state").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "Failure",
    "Idle",
    "InProgress",
    "LoadingState",
    "LoadingStateError",
    "Ok",
    "OutcomeTypeError",
    "Result",
    "Success",
    "capture",
]
