"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as date_type, datetime
from decimal import Decimal


class ExpenseBase(BaseModel):
    """Base expense schema."""
    description: str
    amount: Decimal = Field(gt=0)  # Home currency
    date: date_type
    category: Optional[str] = None
    notes: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation."""
    currency: Optional[str] = None  # Foreign currency of ``amount``; converted before recording
    include_fee: bool = False


class ExpenseUpdate(BaseModel):
    """Schema for expense update."""
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(default=None, gt=0)
    date: Optional[date_type] = None
    category: Optional[str] = None
    notes: Optional[str] = None


class ExpenseRecord(ExpenseBase):
    """Expense as handed to the allocation engine."""
    id: Optional[int] = None
    
    class Config:
        from_attributes = True


class ExpenseResponse(ExpenseRecord):
    """Schema for expense response."""
    id: int
    created_at: datetime
    updated_at: datetime


class ExpenseCreateResponse(ExpenseResponse):
    """Expense response carrying the conversion that produced ``amount``."""
    original_amount: Optional[Decimal] = None
    original_currency: Optional[str] = None
    rate: Optional[Decimal] = None
    fx_warning: Optional[str] = None
