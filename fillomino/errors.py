"""
Fillomino errors and limits.
"""

from __future__ import annotations

import os
from typing import Any

DEFAULT_ATTEMPT_LIMIT = 100000
ATTEMPT_LIMIT_ENV = "FILLOMINO_MAX_ATTEMPTS"
CHECK_INVARIANTS_ENV = "FILLOMINO_CHECK_INVARIANTS"

GENERATION_LIMIT_MESSAGE = "Board generation gave up after too many repair attempts."
SOLVE_FAILED_MESSAGE = "Sorry, I couldn't find a solution"


class FillominoError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidDescriptionError(FillominoError, ValueError):
    """A puzzle description string failed validation."""


class InvalidParamsError(FillominoError, ValueError):
    """Grid parameters failed validation."""


class SolveFailedError(FillominoError):
    """The deduction engine could not resolve every cell."""

    def __init__(self, message: str = SOLVE_FAILED_MESSAGE) -> None:
        super().__init__(message)


class InvariantViolationError(FillominoError, AssertionError):
    """An internal data structure lost consistency. Always a bug."""


class GenerationLimitExceededError(FillominoError, RuntimeError):
    """
    Raised when the region-growth generator crosses a caller-imposed bound
    on the number of restarted attempts.
    """

    def __init__(
        self,
        message: str = GENERATION_LIMIT_MESSAGE,
        *,
        attempts: int | None = None,
        limit: int | None = None,
        context: str | None = None,
    ) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.limit = limit
        self.context = context


def resolve_attempt_limit(owner: Any, attr_name: str) -> int:
    """
    Resolve the generator attempt limit.

    Priority:
    1) owner.<attr_name>
    2) env FILLOMINO_MAX_ATTEMPTS
    3) DEFAULT_ATTEMPT_LIMIT
    """
    raw = getattr(owner, attr_name, None)
    if raw is None:
        raw = os.getenv(ATTEMPT_LIMIT_ENV)
    if raw is None:
        return DEFAULT_ATTEMPT_LIMIT

    try:
        limit = int(raw)
        if limit > 0:
            return limit
    except (TypeError, ValueError):
        pass
    return DEFAULT_ATTEMPT_LIMIT


def invariant_checks_enabled() -> bool:
    return os.getenv(CHECK_INVARIANTS_ENV, "").strip().lower() in ("1", "true", "yes", "on")
