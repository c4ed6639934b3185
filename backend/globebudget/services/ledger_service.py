"""
Balance-affecting writes.

Every operation here runs as a single transaction on the session: either all
of its rows change or none do. In remaining mode the budget's ``limit`` is the
live balance, so recording an expense lowers it and deleting one restores it.
"""
from sqlalchemy.orm import Session
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple
from globebudget.core.config import settings
from globebudget.core.errors import InvalidInputError
from globebudget.models.budget import Budget, BudgetMode
from globebudget.models.expense import Expense
from globebudget.models.trip import Trip
from globebudget.schemas.budget import BudgetCreate
from globebudget.schemas.expense import ExpenseBase, ExpenseUpdate
import logging

logger = logging.getLogger(__name__)


def get_budget_row(user_id: int, db: Session, for_update: bool = False) -> Optional[Budget]:
    """Get the user's active budget, optionally locking the row."""
    query = db.query(Budget).filter(Budget.user_id == user_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def refresh_budget_aggregates(user_id: int, db: Session) -> Optional[Budget]:
    """
    Recompute the cached spent/planned figures from the ledger.
    
    Does not commit; callers include it in their own transaction.
    """
    db.flush()
    budget = get_budget_row(user_id, db)
    if not budget:
        return None
    
    trips = db.query(Trip).filter(Trip.user_id == user_id).all()
    expenses = db.query(Expense).filter(Expense.user_id == user_id).all()
    
    budget.spent = (
        sum((trip.prepaid_cost for trip in trips), Decimal(0))
        + sum((expense.amount for expense in expenses), Decimal(0))
    )
    budget.planned_spending = sum((trip.planned_cost for trip in trips), Decimal(0))
    return budget


def save_budget(user_id: int, budget_data: BudgetCreate, db: Session) -> Budget:
    """Create or replace the user's budget."""
    try:
        budget = get_budget_row(user_id, db, for_update=True)
        if budget:
            budget.mode = budget_data.mode
            budget.limit = budget_data.limit
            budget.period_start = budget_data.period_start
            budget.period_end = budget_data.period_end
        else:
            budget = Budget(
                user_id=user_id,
                mode=budget_data.mode,
                limit=budget_data.limit,
                period_start=budget_data.period_start,
                period_end=budget_data.period_end
            )
            db.add(budget)
        refresh_budget_aggregates(user_id, db)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to save budget for user {user_id}", exc_info=True)
        raise
    
    db.refresh(budget)
    return budget


def reset_budget(user_id: int, db: Session) -> bool:
    """Delete the user's budget. Returns False when there was none."""
    budget = get_budget_row(user_id, db)
    if not budget:
        return False
    db.delete(budget)
    db.commit()
    return True


def record_expense(user_id: int, expense_data: ExpenseBase, db: Session) -> Expense:
    """Record an expense; in remaining mode the balance drops by its amount."""
    if expense_data.amount <= 0:
        raise InvalidInputError("Expense amount must be positive")
    
    try:
        expense = Expense(
            user_id=user_id,
            description=expense_data.description,
            amount=expense_data.amount,
            date=expense_data.date,
            category=expense_data.category,
            notes=expense_data.notes
        )
        db.add(expense)
        
        budget = get_budget_row(user_id, db, for_update=True)
        if budget and budget.mode == BudgetMode.REMAINING:
            budget.limit = budget.limit - expense.amount
            logger.info(f"Balance for user {user_id} lowered by {expense.amount} to {budget.limit}")
        
        refresh_budget_aggregates(user_id, db)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to record expense for user {user_id}", exc_info=True)
        raise
    
    db.refresh(expense)
    return expense


def update_expense(user_id: int, expense: Expense, expense_data: ExpenseUpdate, db: Session) -> Expense:
    """Edit an expense; in remaining mode the balance moves by the amount change."""
    try:
        old_amount = expense.amount
        update_fields = expense_data.model_dump(exclude_unset=True)
        for field, value in update_fields.items():
            if value is None and field in ("description", "amount", "date"):
                continue
            setattr(expense, field, value)
        
        delta = Decimal(str(expense.amount)) - Decimal(str(old_amount))
        budget = get_budget_row(user_id, db, for_update=True)
        if delta and budget and budget.mode == BudgetMode.REMAINING:
            budget.limit = budget.limit - delta
        
        refresh_budget_aggregates(user_id, db)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to update expense {expense.id}", exc_info=True)
        raise
    
    db.refresh(expense)
    return expense


def delete_expense(user_id: int, expense: Expense, db: Session) -> None:
    """Delete an expense; in remaining mode its amount returns to the balance."""
    try:
        budget = get_budget_row(user_id, db, for_update=True)
        if budget and budget.mode == BudgetMode.REMAINING:
            budget.limit = budget.limit + expense.amount
            logger.info(f"Balance for user {user_id} restored by {expense.amount} to {budget.limit}")
        
        db.delete(expense)
        refresh_budget_aggregates(user_id, db)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to delete expense {expense.id}", exc_info=True)
        raise


def update_balance(
    user_id: int,
    new_balance: Decimal,
    db: Session,
    today: Optional[date] = None,
    original_note: Optional[str] = None
) -> Tuple[Budget, Optional[Expense]]:
    """
    Set a new absolute balance for a remaining-mode budget.
    
    A drop in balance is recorded as a "Balance Adjustment" expense before
    the balance is replaced; a rise only raises the balance. ``original_note``
    (the foreign amount the new balance was converted from) is appended to
    the adjustment's notes.
    
    Returns:
        (updated budget, adjustment expense or None)
    """
    if new_balance <= 0:
        raise InvalidInputError("Balance must be positive")
    
    budget = get_budget_row(user_id, db, for_update=True)
    if not budget:
        raise InvalidInputError("No active budget")
    if budget.mode != BudgetMode.REMAINING:
        raise InvalidInputError("Balance updates are only available in remaining mode")
    
    old_balance = Decimal(str(budget.limit))
    difference = old_balance - new_balance
    if difference == 0:
        return budget, None
    
    adjustment = None
    try:
        if difference > 0:
            notes = f"Balance updated from {old_balance:.2f} to {new_balance:.2f}"
            if original_note:
                notes = f"{notes}\n{original_note}"
            adjustment = Expense(
                user_id=user_id,
                description=settings.BALANCE_ADJUSTMENT_DESCRIPTION,
                amount=difference,
                date=today or date.today(),
                category=settings.BALANCE_ADJUSTMENT_CATEGORY,
                notes=notes
            )
            db.add(adjustment)
        budget.limit = new_balance
        refresh_budget_aggregates(user_id, db)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Failed to update balance for user {user_id}", exc_info=True)
        raise
    
    logger.info(f"Balance for user {user_id} set from {old_balance} to {new_balance}")
    db.refresh(budget)
    if adjustment is not None:
        db.refresh(adjustment)
    return budget, adjustment
