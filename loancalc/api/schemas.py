"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from loancalc.config import settings


# ---- Request schemas ----

class CalculateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, le=settings.max_amount, description="Purchase amount")
    months: int = Field(..., ge=1, le=settings.max_term_months, description="Term in months")
    product_id: str = Field(settings.default_product, description="Catalog product id")
    start_date: date = Field(default_factory=date.today, description="Purchase date")
    monthly_rate: Decimal | None = Field(
        None,
        allow_inf_nan=False,
        description="Monthly rate in percent; defaults to the product's nominal rate",
    )

    # Revolving products only; ignored otherwise
    grace_period_violation: bool = False
    cash_withdrawal: bool = False
    fee_amortized: bool = False


# ---- Response schemas ----

class ProductResponse(BaseModel):
    id: str
    title: str
    strategy: str
    base_rate: Decimal
    long_term_rate: Decimal | None = None
    long_term_threshold: int | None = None
    nominal_rate: Decimal | None = None
    cash_withdrawal_fee_pct: Decimal
    grace_preserved_on_withdrawal: bool
    supports_special_conditions: bool
    date_rule: str


class ScheduleRowResponse(BaseModel):
    month: int
    payment_date: date
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal
    is_penalty_month: bool = False


class CalculateResponse(BaseModel):
    product_id: str
    monthly_rate: Decimal
    monthly_payment: Decimal
    peak_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    schedule: list[ScheduleRowResponse]
