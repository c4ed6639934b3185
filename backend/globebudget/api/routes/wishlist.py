"""
Wishlist routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.models.wishlist import WishlistItem
from globebudget.schemas.wishlist import WishlistCreate, WishlistResponse, WishlistUpdate
from globebudget.api.dependencies import get_current_user

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


def get_owned_item(item_id: int, user_id: int, db: Session) -> WishlistItem:
    item = db.query(WishlistItem).filter(
        WishlistItem.id == item_id,
        WishlistItem.user_id == user_id
    ).first()
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Wishlist item not found"
        )
    return item


@router.get("", response_model=List[WishlistResponse])
async def list_wishlist(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List wishlist items in creation order."""
    return db.query(WishlistItem).filter(
        WishlistItem.user_id == current_user.id
    ).order_by(WishlistItem.id).all()


@router.post("", response_model=WishlistResponse, status_code=status.HTTP_201_CREATED)
async def create_wishlist_item(
    item_data: WishlistCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a wishlist item. Wishlist items never count as spent."""
    item = WishlistItem(
        user_id=current_user.id,
        name=item_data.name,
        location=item_data.location,
        estimated_cost=item_data.estimated_cost,
        priority=item_data.priority.value,
        notes=item_data.notes
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=WishlistResponse)
async def update_wishlist_item(
    item_id: int,
    item_data: WishlistUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a wishlist item."""
    item = get_owned_item(item_id, current_user.id, db)
    for field, value in item_data.model_dump(exclude_unset=True).items():
        if value is None and field != "notes":
            continue
        if field == "priority":
            value = value.value
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wishlist_item(
    item_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a wishlist item."""
    item = get_owned_item(item_id, current_user.id, db)
    db.delete(item)
    db.commit()
