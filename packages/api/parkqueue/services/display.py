# This project was developed with assistance from AI tools.
"""Display labels for urgency results (badge, priority, alert banner)."""

from ..schemas.urgency import PaymentRecord, UrgencyDisplay, UrgencyLevel, UrgencyResult
from .exit_window import exit_window_label
from .urgency import has_exit_commitment

BADGE_LABELS: dict[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "CRITICAL",
    UrgencyLevel.URGENT: "URGENT",
    UrgencyLevel.WARNING: "SOON",
    UrgencyLevel.NORMAL: "NORMAL",
}

PRIORITY_LABELS: dict[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "MAXIMUM",
    UrgencyLevel.URGENT: "HIGH",
    UrgencyLevel.WARNING: "MEDIUM",
    UrgencyLevel.NORMAL: "NORMAL",
}

OVERDUE_ALERT = "Customer waiting longer than scheduled!"
URGENT_ALERT = "Validate with priority - customer leaving soon"


def describe_urgency(record: PaymentRecord, result: UrgencyResult) -> UrgencyDisplay | None:
    """Build display labels, or None for records without an exit commitment."""
    if not has_exit_commitment(record):
        return None

    alert = None
    if result.is_overdue:
        alert = OVERDUE_ALERT
    elif result.level == UrgencyLevel.URGENT:
        alert = URGENT_ALERT

    return UrgencyDisplay(
        badge=BADGE_LABELS[result.level],
        priority=PRIORITY_LABELS[result.level],
        exit_window_label=exit_window_label(record.exit_window),
        alert=alert,
    )
