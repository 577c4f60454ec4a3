"""Product catalog routes."""

from fastapi import APIRouter, HTTPException, Query

from loancalc.api.schemas import ProductResponse
from loancalc.engine.products import UnknownProductError, get_product, list_products
from loancalc.models.product import ProductVariant

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def _product_to_response(product: ProductVariant, months: int | None = None) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        title=product.title,
        strategy=product.strategy.value,
        base_rate=product.base_rate,
        long_term_rate=product.long_term_rate,
        long_term_threshold=product.long_term_threshold,
        nominal_rate=product.nominal_rate(months) if months is not None else None,
        cash_withdrawal_fee_pct=product.cash_withdrawal_fee_pct,
        grace_preserved_on_withdrawal=product.grace_preserved_on_withdrawal,
        supports_special_conditions=product.supports_special_conditions,
        date_rule=product.date_rule.value,
    )


@router.get("", response_model=list[ProductResponse])
async def get_products():
    """List the loan products the calculator knows about."""
    return [_product_to_response(p) for p in list_products()]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product_detail(product_id: str, months: int | None = Query(None, ge=1)):
    """Single product, with the nominal rate for ``months`` when given."""
    try:
        product = get_product(product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _product_to_response(product, months)
