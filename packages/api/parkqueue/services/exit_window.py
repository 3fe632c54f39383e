# This project was developed with assistance from AI tools.
"""Exit-window options offered on the payment form and the estimate stored with a payment."""

from datetime import datetime, timedelta

from ..schemas.urgency import ExitWindow, ExitWindowOption
from .urgency import EXIT_WINDOW_MINUTES, ensure_tz, window_minutes

EXIT_WINDOW_LABELS: dict[str, str] = {
    ExitWindow.NOW.value: "Immediately",
    ExitWindow.MIN_5.value: "In 5 minutes",
    ExitWindow.MIN_10.value: "In 10 minutes",
    ExitWindow.MIN_15.value: "In 15 minutes",
    ExitWindow.MIN_20.value: "In 20 minutes",
    ExitWindow.MIN_30.value: "In 30 minutes",
    ExitWindow.MIN_45.value: "In 45 minutes",
    ExitWindow.MIN_60.value: "In 1 hour",
}


def exit_window_label(code: str | None) -> str:
    """Human label for a code. Unknown codes are shown as-is; no code means immediately."""
    if not code:
        return EXIT_WINDOW_LABELS[ExitWindow.NOW.value]
    return EXIT_WINDOW_LABELS.get(code, code)


def exit_window_options() -> list[ExitWindowOption]:
    """All exit windows in form order (shortest first)."""
    return [
        ExitWindowOption(
            code=window,
            label=EXIT_WINDOW_LABELS[window.value],
            minutes=EXIT_WINDOW_MINUTES[window.value],
        )
        for window in ExitWindow
    ]


def estimate_exit_time(code: str | None, paid_at: datetime) -> datetime:
    """Estimated exit stored alongside a new payment.

    Missing, ``now`` and unknown codes all estimate the payment instant.
    """
    return ensure_tz(paid_at) + timedelta(minutes=window_minutes(code))
