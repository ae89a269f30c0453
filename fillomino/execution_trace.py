"""
Execution Trace
===============
Logging hooks called from the generator, the solver and the minimizer.

Everything goes through the standard ``logging`` module; nothing is printed.
Per-pass solver output is noisy, so it only appears when ``DEBUG_MODE`` is on
and the logger is at DEBUG level.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEBUG_MODE = False


def log_generation_attempt(attempt: int, width: int, height: int,
                           largest_region: int, accepted: bool) -> None:
    if accepted:
        logger.info(
            "Generated %dx%d board on attempt %d (largest region %d)",
            width, height, attempt, largest_region,
        )
    else:
        logger.debug(
            "Attempt %d on %dx%d abandoned: region grew to %d",
            attempt, width, height, largest_region,
        )


def log_solver_pass(pass_number: int, deductions: int, empty_remaining: int) -> None:
    if not DEBUG_MODE:
        return
    logger.debug(
        "Solver pass %d: %d deductions, %d empty cells left",
        pass_number, deductions, empty_remaining,
    )


def log_deduction(rule: str, cell: int, value: int, source: Optional[int] = None) -> None:
    if not DEBUG_MODE:
        return
    if source is None:
        logger.debug("%s: cell %d := %d", rule, cell, value)
    else:
        logger.debug("%s: cell %d := %d (from cell %d)", rule, cell, value, source)


def log_clue_decision(cell: int, value: int, removed: bool) -> None:
    logger.debug(
        "Clue %d at cell %d %s",
        value, cell, "removed" if removed else "kept (needed by solver)",
    )
