# This project was developed with assistance from AI tools.
"""Public API routes used by the payment form -- no authentication required."""

from datetime import UTC, datetime

from fastapi import APIRouter

from ..schemas.urgency import ExitEstimateRequest, ExitEstimateResponse, ExitWindowOption
from ..services.exit_window import estimate_exit_time, exit_window_label, exit_window_options

router = APIRouter()


@router.get("/exit-windows", response_model=list[ExitWindowOption])
async def list_exit_windows() -> list[ExitWindowOption]:
    """Exit windows a driver can pick when paying."""
    return exit_window_options()


@router.post("/exit-estimate", response_model=ExitEstimateResponse)
async def exit_estimate(req: ExitEstimateRequest) -> ExitEstimateResponse:
    """Estimated exit time for a chosen window, from the payment time or now."""
    paid_at = req.paid_at or datetime.now(UTC)
    return ExitEstimateResponse(
        exit_window=req.exit_window,
        label=exit_window_label(req.exit_window),
        estimated_exit_time=estimate_exit_time(req.exit_window, paid_at),
    )
