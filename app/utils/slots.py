"""
Reservation slot queries and seeding
"""
from typing import Iterator, Tuple
from sqlalchemy.orm import Session
from app.core.config import settings
from app.models import ReservationSlot
from app.utils.datetime_utils import parse_unix

SLOT_LENGTH = 3600  # one hour


def reservation_slots_in_range(db: Session, start_at: int, end_at: int):
    """Slots lying entirely inside [start_at, end_at]"""
    return db.query(ReservationSlot).filter(
        ReservationSlot.start_at >= start_at,
        ReservationSlot.end_at <= end_at
    )


def lock_reservation_slots(db: Session, start_at: int, end_at: int):
    """
    Slots inside the range, locked FOR UPDATE until the transaction ends.
    Concurrent reservations over the same slots serialize on this lock.
    """
    return reservation_slots_in_range(db, start_at, end_at).order_by(
        ReservationSlot.start_at
    ).with_for_update()


def slot_windows(start_at: int, end_at: int, length: int = SLOT_LENGTH) -> Iterator[Tuple[int, int]]:
    """
    Yield consecutive [start, end) windows covering [start_at, end_at).
    A trailing partial window is dropped.
    """
    cursor = start_at
    while cursor + length <= end_at:
        yield cursor, cursor + length
        cursor += length


def seed_reservation_slots(db: Session, capacity: int = None, reset: bool = False) -> int:
    """
    Create one slot per hour over the reservation term.
    Returns the number of slots inserted.
    """
    if capacity is None:
        capacity = settings.RESERVATION_SLOT_CAPACITY

    if reset:
        db.query(ReservationSlot).delete(synchronize_session=False)

    existing = {
        (row.start_at, row.end_at)
        for row in db.query(ReservationSlot.start_at, ReservationSlot.end_at).all()
    }

    term_start_at = parse_unix(settings.RESERVATION_TERM_START)
    term_end_at = parse_unix(settings.RESERVATION_TERM_END)

    inserted = 0
    for start_at, end_at in slot_windows(term_start_at, term_end_at):
        if (start_at, end_at) in existing:
            continue
        db.add(ReservationSlot(slot=capacity, start_at=start_at, end_at=end_at))
        inserted += 1

    db.commit()
    return inserted
