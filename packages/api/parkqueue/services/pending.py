# This project was developed with assistance from AI tools.
"""Pending-exit list: ranked records with their urgency and display labels."""

from collections.abc import Iterable
from datetime import datetime

from ..schemas.urgency import PaymentRecord, RankedPayment
from .display import describe_urgency
from .urgency import rank_by_urgency


def rank_pending_payments(
    records: Iterable[PaymentRecord],
    *,
    now: datetime,
) -> list[RankedPayment]:
    """Rank pending payments most urgent first for the exit queue view."""
    return [
        RankedPayment(record=record, urgency=result, display=describe_urgency(record, result))
        for record, result in rank_by_urgency(records, now=now)
    ]
