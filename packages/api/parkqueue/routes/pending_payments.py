# This project was developed with assistance from AI tools.
"""Staff endpoint ranking paid vehicles waiting to exit."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter

from ..schemas.urgency import RankedPayment, RankPaymentsRequest
from ..services.pending import rank_pending_payments

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/pending-payments/ranked", response_model=list[RankedPayment])
async def rank_pending(req: RankPaymentsRequest) -> list[RankedPayment]:
    """Return the supplied payments most urgent first.

    ``now`` pins the evaluation instant; the server clock is used when omitted.
    """
    now = req.now or datetime.now(UTC)
    ranked = rank_pending_payments(req.payments, now=now)
    logger.info(
        "Ranked %d pending payments at %s (%d overdue)",
        len(ranked),
        now.isoformat(),
        sum(1 for item in ranked if item.urgency.is_overdue),
    )
    return ranked
