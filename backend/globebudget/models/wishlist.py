"""
Wishlist model for aspirational spending.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from globebudget.db.base import BaseModel


class WishlistItem(BaseModel):
    """Advisory item; never counted as spent."""
    __tablename__ = "wishlist_items"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    estimated_cost = Column(Numeric(12, 2), nullable=False, default=0)
    priority = Column(String(10), nullable=False, default="medium")  # Legacy, not used for ranking
    notes = Column(Text, nullable=True)
    
    # Relationships
    user = relationship("User", back_populates="wishlist_items")
