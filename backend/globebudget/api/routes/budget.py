"""
Budget management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from globebudget.core.errors import InvalidInputError
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.schemas.budget import BalanceUpdate, BalanceUpdateResponse, BudgetCreate, BudgetResponse
from globebudget.schemas.expense import ExpenseResponse
from globebudget.api.dependencies import get_current_user
from globebudget.services import ledger_service
from globebudget.services.fx_service import conversion_note, normalize_amount

router = APIRouter(prefix="/budget", tags=["budget"])


@router.get("", response_model=BudgetResponse)
async def get_budget(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the active budget."""
    budget = ledger_service.get_budget_row(current_user.id, db)
    if not budget:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Budget not found"
        )
    return budget


@router.put("", response_model=BudgetResponse)
async def create_or_update_budget(
    budget_data: BudgetCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set or edit the budget."""
    return ledger_service.save_budget(current_user.id, budget_data, db)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def reset_budget(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete the budget (full reset). Trips, expenses and plans are kept."""
    if not ledger_service.reset_budget(current_user.id, db):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Budget not found"
        )


@router.post("/balance", response_model=BalanceUpdateResponse)
async def update_balance(
    balance_data: BalanceUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set a new current balance (remaining mode only)."""
    new_balance, quote = normalize_amount(
        balance_data.new_balance,
        balance_data.currency,
        db,
        include_fee=balance_data.include_fee
    )
    
    try:
        budget, adjustment = ledger_service.update_balance(
            current_user.id,
            new_balance,
            db,
            original_note=conversion_note(balance_data.new_balance, balance_data.currency, balance_data.include_fee)
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    return BalanceUpdateResponse(
        budget=BudgetResponse.model_validate(budget),
        adjustment=ExpenseResponse.model_validate(adjustment) if adjustment else None,
        fx_warning=quote.warning
    )
