"""
User model scoping every budget entity.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from globebudget.db.base import BaseModel


class User(BaseModel):
    """User owning one budget and any number of trips, expenses and plans."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    
    # Relationships
    budget = relationship("Budget", back_populates="user", uselist=False, cascade="all, delete-orphan")
    trips = relationship("Trip", back_populates="user", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="user", cascade="all, delete-orphan")
    wishlist_items = relationship("WishlistItem", back_populates="user", cascade="all, delete-orphan")
    weekly_plans = relationship("WeeklyPlan", back_populates="user", cascade="all, delete-orphan")
