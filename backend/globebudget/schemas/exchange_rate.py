"""
Pydantic schemas for exchange rates and conversions.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date
from decimal import Decimal


class RateQuote(BaseModel):
    """Rate for a currency pair (1 base = rate quote)."""
    base_currency: str
    quote_currency: str
    rate: Decimal
    as_of: Optional[date] = None  # None for the hardcoded fallback
    is_stale: bool = False
    warning: Optional[str] = None


class ConversionResponse(BaseModel):
    """Schema for a one-shot conversion into the home currency."""
    amount: Decimal
    currency: str
    home_currency: str
    amount_home: Decimal
    rate: Decimal
    home_unit: Decimal  # 1 unit of the home currency, in ``currency``
    include_fee: bool
    as_of: Optional[date] = None
    warning: Optional[str] = None
