#!/usr/bin/env python3
"""
Create hourly reservation slots for the whole reservation term
"""
import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.utils.slots import seed_reservation_slots


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--capacity", type=int, default=settings.RESERVATION_SLOT_CAPACITY,
                        help="bookings allowed per slot")
    parser.add_argument("--reset", action="store_true",
                        help="delete existing slots first")
    args = parser.parse_args()

    init_db()
    db = SessionLocal()
    try:
        count = seed_reservation_slots(db, capacity=args.capacity, reset=args.reset)
        print(f"Inserted {count} reservation slots "
              f"({settings.RESERVATION_TERM_START} ~ {settings.RESERVATION_TERM_END}, capacity {args.capacity})")
        return 0
    except Exception as e:
        db.rollback()
        print(f"Failed to seed reservation slots: {e}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
