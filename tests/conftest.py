"""Pytest configuration and fixtures.

Provides the canonical sample states, hypothesis profiles, and logging
capture for the library logger.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from hypothesis import settings
import pytest

from loading_state import Failure, Idle, InProgress, LoadingState, Success
from tests.helpers import SYSTEM_FAILURE, ServiceError

# =============================================================================
# Hypothesis Profiles
# =============================================================================

settings.register_profile(
    "default", max_examples=50, deadline=None, derandomize=True
)
settings.register_profile("ci", max_examples=200, deadline=None, derandomize=True)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Sample States
# =============================================================================


@dataclass(frozen=True)
class SampleStates:
    """One instance of each variant, typed as ``LoadingState[int, ServiceError]``."""

    idle: LoadingState[int, ServiceError]
    in_progress: LoadingState[int, ServiceError]
    success: LoadingState[int, ServiceError]
    failure: LoadingState[int, ServiceError]

    def all(self) -> tuple[LoadingState[int, ServiceError], ...]:
        return (self.idle, self.in_progress, self.success, self.failure)


@pytest.fixture
def samples() -> SampleStates:
    """Return ``Idle``, ``InProgress``, ``Success(42)`` and ``Failure``."""
    return SampleStates(
        idle=Idle(),
        in_progress=InProgress(),
        success=Success(42),
        failure=Failure(SYSTEM_FAILURE),
    )


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def library_logs(caplog):
    """Capture DEBUG records from the ``loading_state`` logger."""
    caplog.set_level(logging.DEBUG, logger="loading_state")
    return caplog
