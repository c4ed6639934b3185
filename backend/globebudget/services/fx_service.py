"""
Foreign exchange service for currency normalization.

Foreign-currency entries are converted to the home currency before they reach
the allocation engine. Rates are refreshed at most once per calendar day;
when a refresh fails the last cached rate (or a configured fallback) is used
and a warning is attached to the quote instead of raising.
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple
from globebudget.core.config import settings
from globebudget.core.errors import InvalidInputError
from globebudget.models.exchange_rate import ExchangeRate
from globebudget.schemas.exchange_rate import RateQuote
import httpx
import logging

logger = logging.getLogger(__name__)


def to_home(amount: Decimal, rate: Decimal, include_fee: bool = False) -> Decimal:
    """
    Convert an amount into the home currency.
    
    Args:
        amount: Amount in the foreign currency
        rate: Exchange rate (1 foreign = rate home)
        include_fee: Apply the flat conversion surcharge (FX_TRANSACTION_FEE)
    """
    if amount < 0:
        raise InvalidInputError("amount must not be negative")
    converted = amount * rate
    if include_fee:
        converted *= 1 + Decimal(str(settings.FX_TRANSACTION_FEE))
    return converted


def from_home(amount: Decimal, rate: Decimal) -> Decimal:
    """Convert a home-currency amount back into the foreign currency."""
    if rate <= 0:
        raise InvalidInputError("rate must be positive")
    return amount / rate


def fetch_rate_from_api(base_currency: str, quote_currency: str, client: Optional[httpx.Client] = None) -> Decimal:
    """
    Fetch the latest rate from the Frankfurter API.
    
    Response format: {"amount": 1.0, "base": "EUR", "date": "...", "rates": {"USD": 1.08}}
    
    Raises:
        ValueError: on HTTP, network or payload errors
    """
    api_url = f"{settings.FX_API_URL}/latest"
    params = {"from": base_currency, "to": quote_currency}
    logger.info(f"Fetching latest exchange rate for {base_currency}/{quote_currency}")
    
    try:
        if client is not None:
            response = client.get(api_url, params=params, timeout=settings.FX_TIMEOUT)
        else:
            response = httpx.get(api_url, params=params, timeout=settings.FX_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP error with exchange rate API: {e.response.status_code}")
        raise ValueError(f"Exchange rate API HTTP error: {e.response.status_code}")
    except httpx.HTTPError as e:
        # Network, timeout, ...
        logger.error(f"HTTP error with exchange rate API: {e}")
        raise ValueError(f"Exchange rate API network error: {str(e)}")
    
    if settings.DEBUG:
        logger.debug(f"Exchange rate API response: {data}")
    
    rates = data.get("rates") if isinstance(data, dict) else None
    if not rates or quote_currency not in rates:
        raise ValueError(f"{quote_currency} rate not available in API response")
    
    rate = Decimal(str(rates[quote_currency]))
    if rate <= 0:
        raise ValueError(f"Invalid exchange rate: {rate}")
    
    logger.info(f"Fetched rate: 1 {base_currency} = {rate} {quote_currency}")
    return rate


def _fallback_rate(base_currency: str, quote_currency: str) -> Decimal:
    configured = settings.FX_FALLBACK_RATES.get(f"{base_currency}/{quote_currency}")
    if configured is not None:
        return Decimal(str(configured))
    inverse = settings.FX_FALLBACK_RATES.get(f"{quote_currency}/{base_currency}")
    if inverse:
        return Decimal(1) / Decimal(str(inverse))
    return Decimal(1)


def get_daily_rate(
    base_currency: str,
    quote_currency: str,
    db: Session,
    today: Optional[date] = None,
    client: Optional[httpx.Client] = None
) -> RateQuote:
    """
    Get today's rate for a currency pair, fetching it at most once per day.
    
    Never raises for fetch failures: the most recent cached rate, then the
    configured fallback, is returned with ``is_stale`` set and a warning.
    """
    base_currency = base_currency.upper()
    quote_currency = quote_currency.upper()
    today = today or date.today()
    
    if base_currency == quote_currency:
        return RateQuote(base_currency=base_currency, quote_currency=quote_currency, rate=Decimal(1), as_of=today)
    
    cached = db.query(ExchangeRate).filter(
        ExchangeRate.base_currency == base_currency,
        ExchangeRate.quote_currency == quote_currency,
        ExchangeRate.date == today
    ).first()
    if cached:
        return RateQuote(
            base_currency=base_currency,
            quote_currency=quote_currency,
            rate=cached.rate,
            as_of=cached.date
        )
    
    try:
        rate_value = fetch_rate_from_api(base_currency, quote_currency, client=client)
    except ValueError as e:
        return _stale_quote(base_currency, quote_currency, db, str(e))
    
    try:
        db.add(ExchangeRate(
            date=today,
            base_currency=base_currency,
            quote_currency=quote_currency,
            rate=rate_value
        ))
        db.commit()
    except IntegrityError:
        # Another request cached today's rate first
        db.rollback()
        logger.info(f"Rate for {base_currency}/{quote_currency} on {today} already cached")
    
    return RateQuote(base_currency=base_currency, quote_currency=quote_currency, rate=rate_value, as_of=today)


def _stale_quote(base_currency: str, quote_currency: str, db: Session, reason: str) -> RateQuote:
    latest = db.query(ExchangeRate).filter(
        ExchangeRate.base_currency == base_currency,
        ExchangeRate.quote_currency == quote_currency
    ).order_by(ExchangeRate.date.desc()).first()
    
    if latest:
        warning = f"Could not refresh {base_currency}/{quote_currency} rate ({reason}); using rate from {latest.date.isoformat()}"
        logger.warning(warning)
        return RateQuote(
            base_currency=base_currency,
            quote_currency=quote_currency,
            rate=latest.rate,
            as_of=latest.date,
            is_stale=True,
            warning=warning
        )
    
    warning = f"Could not fetch {base_currency}/{quote_currency} rate ({reason}); using fallback rate"
    logger.warning(warning)
    return RateQuote(
        base_currency=base_currency,
        quote_currency=quote_currency,
        rate=_fallback_rate(base_currency, quote_currency),
        as_of=None,
        is_stale=True,
        warning=warning
    )


def normalize_amount(
    amount: Decimal,
    currency: Optional[str],
    db: Session,
    include_fee: bool = False,
    today: Optional[date] = None,
    client: Optional[httpx.Client] = None
) -> Tuple[Decimal, RateQuote]:
    """
    Convert a foreign-currency amount to the home currency.
    
    Returns:
        (amount in home currency, quote used for the conversion)
    """
    home_currency = settings.HOME_CURRENCY.upper()
    quote = get_daily_rate(currency or home_currency, home_currency, db, today=today, client=client)
    if quote.base_currency == home_currency:
        # No conversion, no fee
        return amount, quote
    return to_home(amount, quote.rate, include_fee), quote


def conversion_note(amount: Decimal, currency: Optional[str], include_fee: bool = False) -> Optional[str]:
    """Note recording the foreign amount an entry was converted from, or None for home-currency entries."""
    if not currency or currency.upper() == settings.HOME_CURRENCY.upper():
        return None
    note = f"Original: {amount:.2f} {currency.upper()}"
    if include_fee:
        note += f" (incl. {settings.FX_TRANSACTION_FEE:.0%} fee)"
    return note
