# This project was developed with assistance from AI tools.
"""Urgency calculation for paid vehicles waiting to exit.

Pure functions of a payment record and an explicit time sample. Nothing
here reads the wall clock, touches I/O, or raises: malformed optional
fields degrade to documented defaults.
"""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from functools import cmp_to_key
from typing import Literal

from ..schemas.urgency import ExitWindow, PaymentRecord, UrgencyLevel, UrgencyResult

logger = logging.getLogger(__name__)

EXIT_WINDOW_MINUTES: dict[str, int] = {
    ExitWindow.NOW.value: 0,
    ExitWindow.MIN_5.value: 5,
    ExitWindow.MIN_10.value: 10,
    ExitWindow.MIN_15.value: 15,
    ExitWindow.MIN_20.value: 20,
    ExitWindow.MIN_30.value: 30,
    ExitWindow.MIN_45.value: 45,
    ExitWindow.MIN_60.value: 60,
}

NO_EXIT_TEXT = "No scheduled exit"

# Upper bounds (inclusive) on minutes remaining; first match wins
_LEVEL_THRESHOLDS: tuple[tuple[int, UrgencyLevel], ...] = (
    (0, UrgencyLevel.CRITICAL),
    (2, UrgencyLevel.URGENT),
    (5, UrgencyLevel.WARNING),
)

_MINUTE = timedelta(minutes=1)


def ensure_tz(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware (UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def window_minutes(code: str | None) -> int:
    """Minutes for an exit-window code. Unknown or missing codes mean zero."""
    if code is None:
        return 0
    return EXIT_WINDOW_MINUTES.get(code, 0)


def has_exit_commitment(record: PaymentRecord) -> bool:
    """True when the driver chose an exit window or an exit time was estimated."""
    return bool(record.exit_window) or record.estimated_exit_time is not None


def target_exit_time(record: PaymentRecord) -> datetime | None:
    """Instant the vehicle is expected to leave, or None without a commitment."""
    if not has_exit_commitment(record):
        return None

    paid_at = ensure_tz(record.paid_at)
    if record.exit_window == ExitWindow.NOW.value:
        return paid_at
    if record.estimated_exit_time is not None:
        return ensure_tz(record.estimated_exit_time)
    return paid_at + timedelta(minutes=window_minutes(record.exit_window))


def classify(minutes_until_exit: int) -> UrgencyLevel:
    for bound, level in _LEVEL_THRESHOLDS:
        if minutes_until_exit <= bound:
            return level
    return UrgencyLevel.NORMAL


def status_text(minutes_until_exit: int) -> str:
    if minutes_until_exit <= 0:
        return f"OVERDUE {abs(minutes_until_exit)} min!"
    if minutes_until_exit == 1:
        return "Exits in 1 min"
    return f"Exits in {minutes_until_exit} min"


def evaluate(record: PaymentRecord, now: datetime) -> UrgencyResult:
    """Compute the urgency of one pending exit at ``now``.

    Minutes remaining round up, so a target 30 seconds away still reads
    "1 min". Minutes queued round down and never go below zero.
    """
    now = ensure_tz(now)
    paid_at = ensure_tz(record.paid_at)
    minutes_queued = max(0, (now - paid_at) // _MINUTE)

    target = target_exit_time(record)
    if target is None:
        return UrgencyResult(
            minutes_until_exit=None,
            minutes_queued=minutes_queued,
            level=UrgencyLevel.NORMAL,
            status_text=NO_EXIT_TEXT,
            is_overdue=False,
        )

    # Ceiling division on exact timedeltas
    minutes_until_exit = -((now - target) // _MINUTE)

    return UrgencyResult(
        minutes_until_exit=minutes_until_exit,
        minutes_queued=minutes_queued,
        level=classify(minutes_until_exit),
        status_text=status_text(minutes_until_exit),
        is_overdue=minutes_until_exit <= 0,
    )


def urgency_score(record: PaymentRecord, now: datetime) -> int:
    """Severity rank of a record's urgency; 0 when there is no exit commitment."""
    if not has_exit_commitment(record):
        return 0
    return evaluate(record, now).level.severity


def compare_by_urgency(
    a: PaymentRecord,
    b: PaymentRecord,
    *,
    now: datetime,
) -> Literal[-1, 0, 1]:
    """Order two records most urgent first.

    Records with an exit commitment always come before records without
    one. Among committed records the higher severity comes first; equal
    severities compare equal so a stable sort keeps input order.
    """
    a_committed = has_exit_commitment(a)
    b_committed = has_exit_commitment(b)

    if not a_committed and not b_committed:
        return 0
    if not a_committed:
        return 1
    if not b_committed:
        return -1

    diff = evaluate(b, now).level.severity - evaluate(a, now).level.severity
    if diff > 0:
        return 1
    if diff < 0:
        return -1
    return 0


def sort_by_urgency(records: Iterable[PaymentRecord], *, now: datetime) -> list[PaymentRecord]:
    """Stable sort of records using ``compare_by_urgency``."""
    return sorted(records, key=cmp_to_key(lambda a, b: compare_by_urgency(a, b, now=now)))


def rank_by_urgency(
    records: Iterable[PaymentRecord],
    *,
    now: datetime,
) -> list[tuple[PaymentRecord, UrgencyResult]]:
    """Evaluate each record once and return pairs ordered most urgent first.

    Produces the same order as ``sort_by_urgency`` for the same ``now``.
    """
    evaluated = [(record, evaluate(record, now)) for record in records]

    def _key(pair: tuple[PaymentRecord, UrgencyResult]) -> tuple[int, int]:
        record, result = pair
        if not has_exit_commitment(record):
            return (1, 0)
        return (0, -result.level.severity)

    ranked = sorted(evaluated, key=_key)
    logger.debug(
        "Ranked %d pending exits (%d overdue)",
        len(ranked),
        sum(1 for _, result in ranked if result.is_overdue),
    )
    return ranked
