# This project was developed with assistance from AI tools.
"""Tests for the exit urgency evaluator and ranking comparator."""

from datetime import UTC, datetime, timedelta

import pytest

from parkqueue.schemas.urgency import PaymentRecord, UrgencyLevel
from parkqueue.services.urgency import (
    EXIT_WINDOW_MINUTES,
    compare_by_urgency,
    evaluate,
    has_exit_commitment,
    rank_by_urgency,
    sort_by_urgency,
    target_exit_time,
    urgency_score,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

T = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


def _record(exit_window=None, paid_at=None, estimated_exit_time=None, code="A-1"):
    return PaymentRecord(
        paid_at=paid_at or T,
        exit_window=exit_window,
        estimated_exit_time=estimated_exit_time,
        ticket_code=code,
    )


def _after(minutes=0, seconds=0):
    return T + timedelta(minutes=minutes, seconds=seconds)


# ---------------------------------------------------------------------------
# No exit commitment
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("offset", [-30, 0, 5, 600])
def test_no_commitment_is_normal_and_never_overdue(offset):
    result = evaluate(_record(), _after(offset))

    assert result.level == UrgencyLevel.NORMAL
    assert result.is_overdue is False
    assert result.minutes_until_exit is None
    assert result.status_text == "No scheduled exit"


def test_blank_exit_window_counts_as_no_commitment():
    record = _record(exit_window="  ")

    assert record.exit_window is None
    assert has_exit_commitment(record) is False
    assert target_exit_time(record) is None


# ---------------------------------------------------------------------------
# Immediate exit
# ---------------------------------------------------------------------------


def test_immediate_three_minutes_later_is_overdue():
    result = evaluate(_record("now"), _after(3))

    assert result.minutes_until_exit == -3
    assert result.level == UrgencyLevel.CRITICAL
    assert result.is_overdue is True
    assert result.status_text == "OVERDUE 3 min!"
    assert result.minutes_queued == 3


def test_immediate_ignores_estimated_exit_time():
    record = _record("now", estimated_exit_time=_after(30))

    assert target_exit_time(record) == T
    assert evaluate(record, _after(1)).minutes_until_exit == -1


# ---------------------------------------------------------------------------
# Threshold boundaries (10 minute window)
# ---------------------------------------------------------------------------


def test_exactly_two_minutes_left_is_urgent():
    result = evaluate(_record("10min"), _after(8))

    assert result.minutes_until_exit == 2
    assert result.level == UrgencyLevel.URGENT
    assert result.status_text == "Exits in 2 min"


def test_exactly_five_minutes_left_is_warning():
    result = evaluate(_record("10min"), _after(5))

    assert result.minutes_until_exit == 5
    assert result.level == UrgencyLevel.WARNING


def test_partial_minute_rounds_up():
    """5.5 minutes left reads as 6, which is still normal."""
    result = evaluate(_record("10min"), _after(4, 30))

    assert result.minutes_until_exit == 6
    assert result.level == UrgencyLevel.NORMAL
    assert result.minutes_queued == 4


def test_thirty_seconds_left_reads_one_minute():
    result = evaluate(_record("10min"), _after(9, 30))

    assert result.minutes_until_exit == 1
    assert result.status_text == "Exits in 1 min"
    assert result.is_overdue is False


def test_target_reached_is_overdue_by_zero():
    result = evaluate(_record("10min"), _after(10))

    assert result.minutes_until_exit == 0
    assert result.level == UrgencyLevel.CRITICAL
    assert result.is_overdue is True
    assert result.status_text == "OVERDUE 0 min!"


# ---------------------------------------------------------------------------
# Target selection
# ---------------------------------------------------------------------------


def test_estimated_exit_time_overrides_window():
    record = _record("10min", estimated_exit_time=_after(30))

    result = evaluate(record, _after(20))

    assert result.minutes_until_exit == 10
    assert result.level == UrgencyLevel.NORMAL


def test_estimated_exit_time_alone_is_a_commitment():
    record = _record(estimated_exit_time=_after(4))

    assert has_exit_commitment(record) is True
    assert evaluate(record, T).level == UrgencyLevel.WARNING


def test_unknown_window_behaves_like_immediate():
    now = _after(2)
    unknown = evaluate(_record("90min"), now)
    immediate = evaluate(_record("now"), now)

    assert unknown == immediate


@pytest.mark.parametrize("code,minutes", sorted(EXIT_WINDOW_MINUTES.items()))
def test_every_window_targets_payment_plus_duration(code, minutes):
    assert target_exit_time(_record(code)) == T + timedelta(minutes=minutes)


def test_naive_datetimes_are_treated_as_utc():
    naive_paid = datetime(2026, 3, 1, 12, 0, 0)
    record = _record("15min", paid_at=naive_paid)

    result = evaluate(record, datetime(2026, 3, 1, 12, 10, 0))

    assert result.minutes_until_exit == 5


def test_minutes_queued_never_negative_on_clock_skew():
    result = evaluate(_record("10min"), _after(-5))

    assert result.minutes_queued == 0
    assert result.minutes_until_exit == 15


def test_stale_records_report_large_overdue_without_raising():
    result = evaluate(_record("5min"), T + timedelta(days=3))

    assert result.is_overdue is True
    assert result.minutes_until_exit == -(3 * 24 * 60 - 5)


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def test_rank_orders_overdue_then_urgent_then_uncommitted():
    no_commitment = _record(code="none")
    urgent = _record("10min", paid_at=T - timedelta(minutes=8), code="urgent")
    overdue = _record("now", paid_at=T - timedelta(minutes=5), code="overdue")

    ranked = rank_by_urgency([no_commitment, urgent, overdue], now=T)

    assert [record.ticket_code for record, _ in ranked] == ["overdue", "urgent", "none"]
    assert ranked[0][1].level == UrgencyLevel.CRITICAL
    assert ranked[1][1].level == UrgencyLevel.URGENT


def test_committed_record_outranks_uncommitted_even_when_normal():
    relaxed = _record("60min", code="relaxed")
    uncommitted = _record(code="none")

    assert compare_by_urgency(relaxed, uncommitted, now=T) == -1
    assert compare_by_urgency(uncommitted, relaxed, now=T) == 1


def test_two_uncommitted_records_compare_equal():
    assert compare_by_urgency(_record(code="a"), _record(code="b"), now=T) == 0


def test_higher_severity_sorts_first():
    warning = _record("5min", code="warning")
    critical = _record("now", code="critical")

    assert compare_by_urgency(warning, critical, now=T) == 1
    assert compare_by_urgency(critical, warning, now=T) == -1


def test_equal_severity_keeps_input_order():
    first = _record("30min", code="first")
    second = _record("45min", code="second")
    third = _record("60min", code="third")

    assert compare_by_urgency(first, second, now=T) == 0
    ordered = sort_by_urgency([first, second, third], now=T)
    assert [r.ticket_code for r in ordered] == ["first", "second", "third"]


def test_sort_and_rank_agree():
    now = _after(7)
    records = [
        _record(code="none-1"),
        _record("15min", code="normal"),
        _record("10min", code="warning"),
        _record(code="none-2"),
        _record("5min", code="critical"),
        _record("now", code="critical-2"),
        _record(estimated_exit_time=_after(9), code="urgent"),
    ]

    sorted_codes = [r.ticket_code for r in sort_by_urgency(records, now=now)]
    ranked_codes = [r.ticket_code for r, _ in rank_by_urgency(records, now=now)]

    assert sorted_codes == ranked_codes
    assert sorted_codes == [
        "critical",
        "critical-2",
        "urgent",
        "warning",
        "normal",
        "none-1",
        "none-2",
    ]


def test_rank_empty_list():
    assert rank_by_urgency([], now=T) == []


def test_urgency_score():
    assert urgency_score(_record(), T) == 0
    assert urgency_score(_record("60min"), T) == 1
    assert urgency_score(_record("now"), _after(1)) == 4


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


def test_urgency_level_severity_order():
    levels = sorted(UrgencyLevel, key=lambda level: level.severity)
    assert levels == [
        UrgencyLevel.NORMAL,
        UrgencyLevel.WARNING,
        UrgencyLevel.URGENT,
        UrgencyLevel.CRITICAL,
    ]


def test_urgency_level_values():
    assert UrgencyLevel.CRITICAL.value == "critical"
    assert UrgencyLevel.URGENT.value == "urgent"
    assert UrgencyLevel.WARNING.value == "warning"
    assert UrgencyLevel.NORMAL.value == "normal"
