# smartbarber/availability.py

import logging
from datetime import date
from typing import List, Optional

from sqlmodel import Session

from smartbarber.core import generate_daily_slots
from smartbarber.ledger import BookingLedger
from smartbarber.schemas import TimeSlot

logger = logging.getLogger(__name__)


def resolve_availability(
    session: Session,
    day: date,
    barber_id: Optional[str] = None,
) -> List[TimeSlot]:
    """Slot grid for ``day`` with booked slots marked unavailable.

    Without ``barber_id`` a slot is unavailable as soon as any barber holds
    an active booking at that time.
    """
    slots = generate_daily_slots()
    by_label = {slot.time: slot for slot in slots}

    for booking in BookingLedger(session).find_active_on(day, barber_id):
        slot = by_label.get(booking.time)
        if slot is None:
            logger.debug("Booking %s has off-grid time %r", booking.id, booking.time)
            continue
        if not barber_id or booking.barber_id == barber_id:
            slot.available = False

    return slots
