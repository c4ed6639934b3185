"""
Pydantic schemas for WishlistItem entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
import enum


class WishlistPriority(str, enum.Enum):
    """Legacy priority; kept for display only."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class WishlistBase(BaseModel):
    """Base wishlist schema."""
    name: str
    location: str
    estimated_cost: Decimal = Field(default=Decimal(0), ge=0)
    priority: WishlistPriority = WishlistPriority.MEDIUM
    notes: Optional[str] = None


class WishlistCreate(WishlistBase):
    """Schema for wishlist item creation."""
    pass


class WishlistUpdate(BaseModel):
    """Schema for wishlist item update."""
    name: Optional[str] = None
    location: Optional[str] = None
    estimated_cost: Optional[Decimal] = Field(default=None, ge=0)
    priority: Optional[WishlistPriority] = None
    notes: Optional[str] = None


class WishlistRecord(WishlistBase):
    """Wishlist item as handed to the allocation engine."""
    id: Optional[int] = None
    
    class Config:
        from_attributes = True


class WishlistResponse(WishlistRecord):
    """Schema for wishlist item response."""
    id: int
    created_at: datetime
    updated_at: datetime
