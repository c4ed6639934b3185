"""
Run the one-time legacy trip-cost migration.
"""
import traceback
from globebudget.db.migrations.split_trip_costs import migrate

if __name__ == "__main__":
    try:
        migrate()
    except Exception:
        traceback.print_exc()
        raise
