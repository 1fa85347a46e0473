# smartbarber/ledger.py
"""
Booking ledger: the authoritative store of booking rows.

The no-double-booking guarantee lives in the database, not here. The
partial unique index ``uq_booking_active_slot`` on (barber_id, date, time)
ignores cancelled rows, so two racing inserts for the same slot cannot both
commit, whichever process or server instance they come from. The conflict
lookup done before each write only gives the common case a cheap, clean
failure; the loser of a real race is caught at commit time.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from smartbarber.errors import InfrastructureError, NotFoundError, SlotTakenError
from smartbarber.models import Booking
from smartbarber.schemas import BookingStatus

logger = logging.getLogger(__name__)

SLOT_INDEX_NAME = "uq_booking_active_slot"
SLOT_FIELDS = ("date", "time", "barber_id")
MUTABLE_FIELDS = ("date", "time", "barber_id", "service_id", "status")


def _is_slot_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    # PostgreSQL names the index, SQLite lists the columns
    return SLOT_INDEX_NAME in message or "booking.barber_id, booking.date, booking.time" in message


def _as_day(value: date) -> date:
    # datetime is a date subclass; the DATE column wants the plain day
    return value.date() if isinstance(value, datetime) else value


class BookingLedger:
    def __init__(self, session: Session):
        self.session = session

    # ---------- reads ----------

    def find_by_id(self, booking_id: str) -> Optional[Booking]:
        try:
            return self.session.get(Booking, booking_id)
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load booking") from exc

    def find_by_user(self, user_id: str) -> List[Booking]:
        stmt = (
            select(Booking)
            .where(Booking.user_id == user_id)
            .order_by(Booking.date.desc(), Booking.created_at.desc())
        )
        try:
            return list(self.session.exec(stmt).all())
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load bookings") from exc

    def find_active_on(self, day: date, barber_id: Optional[str] = None) -> List[Booking]:
        """Non-cancelled bookings on ``day``, optionally for one barber."""
        stmt = (
            select(Booking)
            .where(Booking.date == day)
            .where(Booking.status != BookingStatus.cancelled.value)
        )
        if barber_id:
            stmt = stmt.where(Booking.barber_id == barber_id)
        try:
            return list(self.session.exec(stmt).all())
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load bookings") from exc

    def find_conflict(
        self,
        barber_id: str,
        day: date,
        time: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[Booking]:
        stmt = (
            select(Booking)
            .where(Booking.barber_id == barber_id)
            .where(Booking.date == day)
            .where(Booking.time == time)
            .where(Booking.status != BookingStatus.cancelled.value)
        )
        if exclude_id is not None:
            stmt = stmt.where(Booking.id != exclude_id)
        try:
            return self.session.exec(stmt).first()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not check slot availability") from exc

    # ---------- writes ----------

    def insert(self, draft: Booking) -> Booking:
        """Check the slot and write the booking as one unit.

        Raises SlotTakenError with nothing written when the
        (barber, day, time) slot already holds an active booking.
        """
        draft.date = day = _as_day(draft.date)

        if self.find_conflict(draft.barber_id, day, draft.time) is not None:
            logger.warning(
                "Slot conflict for barber %s on %s at %s", draft.barber_id, day, draft.time
            )
            raise SlotTakenError()

        self.session.add(draft)
        self._commit()
        self.session.refresh(draft)
        return draft

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        return self.update(booking_id, {"status": status})

    def update(self, booking_id: str, patch: Dict[str, Any]) -> Booking:
        booking = self.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")

        unknown = set(patch) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"not updatable: {', '.join(sorted(unknown))}")

        values = dict(patch)
        if "date" in values:
            values["date"] = _as_day(values["date"])
        if isinstance(values.get("status"), BookingStatus):
            values["status"] = values["status"].value

        moves_slot = any(
            field in values and values[field] != getattr(booking, field) for field in SLOT_FIELDS
        )
        target_status = values.get("status", booking.status)
        if moves_slot and target_status != BookingStatus.cancelled.value:
            new_day = values.get("date", booking.date)
            clash = self.find_conflict(
                values.get("barber_id", booking.barber_id),
                new_day,
                values.get("time", booking.time),
                exclude_id=booking.id,
            )
            if clash is not None:
                logger.warning("Reschedule of booking %s collides with %s", booking.id, clash.id)
                raise SlotTakenError()

        for field, value in values.items():
            setattr(booking, field, value)
        booking.updated_at = datetime.now()

        self.session.add(booking)
        self._commit()
        self.session.refresh(booking)
        return booking

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if _is_slot_violation(exc):
                # lost a race with a concurrent write for the same slot
                logger.warning("Slot taken at commit: %s", exc.orig)
                raise SlotTakenError() from exc
            logger.exception("Integrity error writing booking")
            raise InfrastructureError("Could not save booking") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Storage error writing booking")
            raise InfrastructureError("Could not save booking") from exc
