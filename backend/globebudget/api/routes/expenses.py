"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
from globebudget.core.errors import InvalidInputError
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.models.expense import Expense
from globebudget.schemas.expense import (
    ExpenseBase, ExpenseCreate, ExpenseCreateResponse, ExpenseResponse, ExpenseUpdate
)
from globebudget.api.dependencies import get_current_user
from globebudget.services import ledger_service
from globebudget.services.fx_service import conversion_note, normalize_amount

router = APIRouter(prefix="/expenses", tags=["expenses"])


def get_owned_expense(expense_id: int, user_id: int, db: Session) -> Expense:
    """Get an expense owned by the user."""
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.user_id == user_id
    ).first()
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    return expense


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    start: Optional[date] = None,
    end: Optional[date] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List expenses, newest first, optionally within [start, end]."""
    query = db.query(Expense).filter(Expense.user_id == current_user.id)
    if start:
        query = query.filter(Expense.date >= start)
    if end:
        query = query.filter(Expense.date <= end)
    return query.order_by(Expense.date.desc(), Expense.id.desc()).all()


@router.post("", response_model=ExpenseCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record an expense, converting it to the home currency when a currency is given."""
    original_currency = expense_data.currency.upper() if expense_data.currency else None
    home_amount, quote = normalize_amount(
        expense_data.amount,
        original_currency,
        db,
        include_fee=expense_data.include_fee
    )
    
    original_note = conversion_note(expense_data.amount, original_currency, expense_data.include_fee)
    converted = original_note is not None
    notes = expense_data.notes
    if converted:
        notes = f"{notes}\n{original_note}" if notes else original_note
    
    try:
        expense = ledger_service.record_expense(
            current_user.id,
            ExpenseBase(
                description=expense_data.description,
                amount=home_amount,
                date=expense_data.date,
                category=expense_data.category,
                notes=notes
            ),
            db
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    response = ExpenseCreateResponse.model_validate(expense)
    if converted:
        response.original_amount = expense_data.amount
        response.original_currency = original_currency
        response.rate = quote.rate
    response.fx_warning = quote.warning
    return response


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: int,
    expense_data: ExpenseUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit an expense."""
    expense = get_owned_expense(expense_id, current_user.id, db)
    return ledger_service.update_expense(current_user.id, expense, expense_data, db)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    expense = get_owned_expense(expense_id, current_user.id, db)
    ledger_service.delete_expense(current_user.id, expense, db)
