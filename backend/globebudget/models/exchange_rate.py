"""
Exchange rate model caching one rate per currency pair per day.
"""
from sqlalchemy import Column, String, Date, Numeric, UniqueConstraint
from globebudget.db.base import BaseModel


class ExchangeRate(BaseModel):
    """Daily exchange rate (1 base = rate quote)."""
    __tablename__ = "exchange_rates"
    
    date = Column(Date, nullable=False, index=True)
    base_currency = Column(String(3), nullable=False)
    quote_currency = Column(String(3), nullable=False)
    rate = Column(Numeric(15, 6), nullable=False)
    
    # Unique constraint: one rate per pair per date
    __table_args__ = (
        UniqueConstraint('date', 'base_currency', 'quote_currency', name='uq_date_currency_pair'),
    )
