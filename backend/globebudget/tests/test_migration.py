"""
Tests for the legacy trip-cost migration.
"""
from decimal import Decimal
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from globebudget.db.migrations.split_trip_costs import migrate


def legacy_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    with engine.begin() as conn:
        conn.execute(text("""
            CREATE TABLE trips (
                id INTEGER PRIMARY KEY,
                name VARCHAR(200),
                estimated_cost NUMERIC(12, 2),
                actual_cost NUMERIC(12, 2)
            )
        """))
        conn.execute(text("CREATE TABLE budgets (id INTEGER PRIMARY KEY, budget_limit NUMERIC(12, 2))"))
        conn.execute(text("""
            INSERT INTO trips (id, name, estimated_cost, actual_cost) VALUES
                (1, 'Not booked', 400, NULL),
                (2, 'Partly paid', 500, 200),
                (3, 'Over estimate', 300, 350)
        """))
        conn.execute(text("INSERT INTO budgets (id, budget_limit) VALUES (1, 1000)"))
    return sessionmaker(bind=engine)()


def trip_costs(db):
    rows = db.execute(text("SELECT id, prepaid_cost, planned_cost FROM trips ORDER BY id")).all()
    return {row[0]: (Decimal(str(row[1])), Decimal(str(row[2]))) for row in rows}


def test_legacy_costs_are_split():
    db = legacy_session()
    migrate(db)
    
    assert trip_costs(db) == {
        1: (Decimal(0), Decimal(400)),
        2: (Decimal(200), Decimal(300)),
        3: (Decimal(350), Decimal(0)),
    }
    assert db.execute(text("SELECT mode FROM budgets")).scalar() == "total"


def test_migration_is_idempotent():
    db = legacy_session()
    migrate(db)
    before = trip_costs(db)
    
    migrate(db)
    
    assert trip_costs(db) == before
