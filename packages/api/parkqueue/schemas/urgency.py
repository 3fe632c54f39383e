# This project was developed with assistance from AI tools.
"""Exit-window and urgency schemas for the pending-exit queue."""

import enum
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class ExitWindow(str, enum.Enum):
    """Exit time a driver promises when paying, relative to the payment."""

    NOW = "now"
    MIN_5 = "5min"
    MIN_10 = "10min"
    MIN_15 = "15min"
    MIN_20 = "20min"
    MIN_30 = "30min"
    MIN_45 = "45min"
    MIN_60 = "60min"


class UrgencyLevel(str, enum.Enum):
    NORMAL = "normal"
    WARNING = "warning"
    URGENT = "urgent"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        """Rank used for ordering: normal=1 .. critical=4."""
        return _SEVERITY[self]


_SEVERITY: dict[UrgencyLevel, int] = {
    UrgencyLevel.NORMAL: 1,
    UrgencyLevel.WARNING: 2,
    UrgencyLevel.URGENT: 3,
    UrgencyLevel.CRITICAL: 4,
}


class PaymentRecord(BaseModel):
    """A paid ticket waiting for its vehicle to leave.

    ``exit_window`` is kept as a raw string: codes outside ``ExitWindow``
    are accepted and evaluate as a zero-minute window.
    """

    paid_at: datetime
    exit_window: str | None = None
    estimated_exit_time: datetime | None = None
    payment_id: str | None = None
    ticket_code: str | None = None

    @field_validator("exit_window", mode="before")
    @classmethod
    def _blank_window_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UrgencyResult(BaseModel):
    """Urgency of one pending exit at a given instant. Never persisted."""

    minutes_until_exit: int | None = Field(
        default=None,
        description="Minutes left before the promised exit; negative when overdue. "
        "None when the driver made no exit commitment.",
    )
    minutes_queued: int = Field(ge=0)
    level: UrgencyLevel
    status_text: str
    is_overdue: bool


class UrgencyDisplay(BaseModel):
    """Labels for rendering an urgency result."""

    badge: str
    priority: str
    exit_window_label: str
    alert: str | None = None


class RankedPayment(BaseModel):
    record: PaymentRecord
    urgency: UrgencyResult
    display: UrgencyDisplay | None = None


class RankPaymentsRequest(BaseModel):
    """Pending payments to rank, with an optional evaluation instant."""

    payments: list[PaymentRecord]
    now: datetime | None = None


class ExitWindowOption(BaseModel):
    code: ExitWindow
    label: str
    minutes: int


class ExitEstimateRequest(BaseModel):
    exit_window: str | None = None
    paid_at: datetime | None = None


class ExitEstimateResponse(BaseModel):
    exit_window: str | None
    label: str
    estimated_exit_time: datetime
