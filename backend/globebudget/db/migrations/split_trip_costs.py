"""
Migration script moving legacy trip costs onto prepaid/planned columns.

Older databases stored ``estimated_cost`` and ``actual_cost`` on trips and had
no budget mode. Run once after upgrading; running it again changes nothing.
"""
from sqlalchemy import inspect, text
from globebudget.db.session import SessionLocal


def migrate(db=None):
    """Add prepaid/planned columns and fill them from the legacy cost columns."""
    owns_session = db is None
    db = db or SessionLocal()
    try:
        inspector = inspect(db.get_bind())
        trip_columns = {column["name"] for column in inspector.get_columns("trips")}
        
        for column in ("prepaid_cost", "planned_cost"):
            if column not in trip_columns:
                db.execute(text(f"ALTER TABLE trips ADD COLUMN {column} NUMERIC(12, 2) NOT NULL DEFAULT 0"))
                print(f"Added {column} column to trips table")
        
        if "estimated_cost" in trip_columns:
            actual = "actual_cost" if "actual_cost" in trip_columns else "NULL"
            # actual cost was already spent; the rest of the estimate is still planned
            db.execute(text(f"""
                UPDATE trips
                SET
                    prepaid_cost = COALESCE({actual}, 0),
                    planned_cost = CASE
                        WHEN {actual} IS NOT NULL THEN
                            CASE WHEN estimated_cost - {actual} > 0 THEN estimated_cost - {actual} ELSE 0 END
                        ELSE estimated_cost
                    END
                WHERE prepaid_cost = 0 AND planned_cost = 0
            """))
            print("Moved legacy trip costs to prepaid_cost/planned_cost")
        else:
            print("No legacy cost columns on trips, skipping data move")
        
        budget_columns = {column["name"] for column in inspector.get_columns("budgets")}
        if "mode" not in budget_columns:
            db.execute(text("ALTER TABLE budgets ADD COLUMN mode VARCHAR(9) NOT NULL DEFAULT 'total'"))
            print("Added mode column to budgets table")
        db.execute(text("UPDATE budgets SET mode = 'total' WHERE mode IS NULL"))
        
        db.commit()
        print("Migration completed successfully!")
    except Exception as e:
        db.rollback()
        print(f"Migration failed: {e}")
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    migrate()
