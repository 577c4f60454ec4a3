"""Calculation route: the primary API entry point."""

import logging

from fastapi import APIRouter, HTTPException

from loancalc.api.schemas import CalculateRequest, CalculateResponse, ScheduleRowResponse
from loancalc.engine.amortization import compute
from loancalc.engine.products import UnknownProductError, get_product
from loancalc.models.loan import LoanFlags, LoanRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["calculator"])


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(req: CalculateRequest):
    """Compute the payment schedule for a card loan."""
    try:
        product = get_product(req.product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))

    loan = LoanRequest.for_product(
        product,
        amount=req.amount,
        months=req.months,
        start_date=req.start_date,
        monthly_rate=req.monthly_rate,
        flags=LoanFlags(
            grace_period_violation=req.grace_period_violation,
            cash_withdrawal=req.cash_withdrawal,
            fee_amortized=req.fee_amortized,
        ),
    )
    result = compute(loan)
    logger.info(
        "Calculated %s: %s over %d months at %s%%", product.id, loan.amount, loan.months, loan.monthly_rate
    )

    return CalculateResponse(
        product_id=product.id,
        monthly_rate=loan.monthly_rate,
        monthly_payment=result.monthly_payment,
        peak_payment=result.peak_payment,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        schedule=[
            ScheduleRowResponse(
                month=row.month,
                payment_date=row.payment_date,
                payment=row.payment,
                interest=row.interest,
                principal=row.principal,
                balance=row.balance,
                is_penalty_month=row.is_penalty_month,
            )
            for row in result.schedule
        ],
    )
