"""
Foreign exchange rates routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from decimal import Decimal
from globebudget.core.config import settings
from globebudget.core.errors import InvalidInputError
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.schemas.exchange_rate import ConversionResponse, RateQuote
from globebudget.api.dependencies import get_current_user
from globebudget.services.fx_service import from_home, get_daily_rate, normalize_amount

router = APIRouter(prefix="/fx-rates", tags=["fx-rates"])


@router.get("/latest", response_model=RateQuote)
async def get_latest_exchange_rate(
    currency: str = "EUR",
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get today's rate from a currency into the home currency.
    
    Falls back to the last cached rate when the provider is unreachable;
    the quote then carries a warning.
    """
    return get_daily_rate(currency, settings.HOME_CURRENCY, db)


@router.get("/convert", response_model=ConversionResponse)
async def convert(
    amount: Decimal,
    currency: str = "EUR",
    include_fee: bool = False,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Convert an amount into the home currency."""
    try:
        amount_home, quote = normalize_amount(amount, currency, db, include_fee=include_fee)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    return ConversionResponse(
        amount=amount,
        currency=currency.upper(),
        home_currency=settings.HOME_CURRENCY.upper(),
        amount_home=amount_home,
        rate=quote.rate,
        home_unit=from_home(Decimal(1), quote.rate),
        include_fee=include_fee,
        as_of=quote.as_of,
        warning=quote.warning
    )
