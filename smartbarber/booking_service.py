# smartbarber/booking_service.py
"""
Booking lifecycle: create, reschedule, cancel and list a user's bookings.

States: upcoming -> cancelled (cancel), upcoming -> upcoming (reschedule).
Nothing leaves cancelled. ``completed`` is set outside this service.
"""

import logging
from typing import Any, List, Optional

from sqlmodel import Session

from smartbarber.catalog import CatalogRepository
from smartbarber.core import is_slot_label, normalize_day
from smartbarber.errors import ForbiddenError, NotFoundError, ValidationError
from smartbarber.ledger import BookingLedger
from smartbarber.models import Booking, User
from smartbarber.schemas import (
    BarberPublic,
    BookingPublic,
    BookingStatus,
    BookingUpdate,
    ServicePublic,
    UserSummary,
)

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, session: Session):
        self.session = session
        self.ledger = BookingLedger(session)
        self.catalog = CatalogRepository(session)

    def create_booking(
        self,
        user_id: str,
        date: Any,
        time: Optional[str],
        barber_id: Optional[str],
        service_id: Optional[str],
    ) -> BookingPublic:
        fields = {"date": date, "time": time, "barberId": barber_id, "serviceId": service_id}
        missing = [name for name, value in fields.items() if value in (None, "")]
        if missing:
            raise ValidationError(
                "Please provide all required booking details",
                errors=[{"field": name, "message": "Field required"} for name in missing],
            )

        day = self._read_day(date)
        self._check_slot_label(time)

        barber = self.catalog.get_barber(barber_id)
        if barber is None:
            raise NotFoundError("Barber not found")
        service = self.catalog.get_service(service_id)
        if service is None:
            raise NotFoundError("Service not found")

        booking = self.ledger.insert(
            Booking(
                date=day,
                time=time,
                status=BookingStatus.upcoming.value,
                user_id=user_id,
                barber_id=barber_id,
                service_id=service_id,
            )
        )
        logger.info(
            "Booking %s created by user %s: barber %s on %s at %s",
            booking.id, user_id, barber_id, day, time,
        )

        user = self.session.get(User, user_id)
        return self._present(booking, barber, service, user)

    def reschedule_booking(
        self,
        user_id: str,
        booking_id: str,
        patch: BookingUpdate,
    ) -> BookingPublic:
        booking = self._load_owned(user_id, booking_id)
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)

        if changes.get("status") == BookingStatus.cancelled:
            changes.pop("status")
            if changes:
                raise ValidationError("A cancelled booking cannot be changed in the same request")
            return self.cancel_booking(user_id, booking_id)

        if booking.status != BookingStatus.upcoming.value:
            raise ValidationError("Only upcoming bookings can be changed")

        status = changes.pop("status", None)
        if status is not None and status != BookingStatus.upcoming:
            raise ValidationError("Bookings cannot be marked completed by the customer")

        if "date" in changes:
            changes["date"] = self._read_day(changes["date"])
        if "time" in changes:
            self._check_slot_label(changes["time"])
        if "barber_id" in changes and self.catalog.get_barber(changes["barber_id"]) is None:
            raise NotFoundError("Barber not found")
        if "service_id" in changes and self.catalog.get_service(changes["service_id"]) is None:
            raise NotFoundError("Service not found")

        if changes:
            booking = self.ledger.update(booking.id, changes)
            logger.info("Booking %s rescheduled by user %s: %s", booking.id, user_id, sorted(changes))
        return self._present_one(booking)

    def cancel_booking(self, user_id: str, booking_id: str) -> BookingPublic:
        booking = self._load_owned(user_id, booking_id)

        if booking.status == BookingStatus.cancelled.value:
            return self._present_one(booking)
        if booking.status != BookingStatus.upcoming.value:
            raise ValidationError("Only upcoming bookings can be cancelled")

        booking = self.ledger.update_status(booking.id, BookingStatus.cancelled)
        logger.info("Booking %s cancelled by user %s", booking.id, user_id)
        return self._present_one(booking)

    def list_user_bookings(self, user_id: str) -> List[BookingPublic]:
        bookings = self.ledger.find_by_user(user_id)
        barbers = self.catalog.barbers_by_ids(b.barber_id for b in bookings)
        services = self.catalog.services_by_ids(b.service_id for b in bookings)
        return [
            self._present(b, barbers.get(b.barber_id), services.get(b.service_id))
            for b in bookings
        ]

    # ---------- helpers ----------

    def _load_owned(self, user_id: str, booking_id: str) -> Booking:
        booking = self.ledger.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        if booking.user_id != user_id:
            logger.warning("User %s tried to modify booking %s owned by another user", user_id, booking_id)
            raise ForbiddenError("Booking belongs to another user")
        return booking

    @staticmethod
    def _read_day(value: Any):
        try:
            return normalize_day(value)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                "Invalid date",
                errors=[{"field": "date", "message": str(exc)}],
            ) from exc

    @staticmethod
    def _check_slot_label(time: str) -> None:
        if not is_slot_label(time):
            raise ValidationError(
                f"Unknown time slot: {time}",
                errors=[{"field": "time", "message": "Not a bookable time slot"}],
            )

    def _present_one(self, booking: Booking) -> BookingPublic:
        return self._present(
            booking,
            self.catalog.get_barber(booking.barber_id),
            self.catalog.get_service(booking.service_id),
        )

    @staticmethod
    def _present(booking, barber=None, service=None, user=None) -> BookingPublic:
        out = BookingPublic.model_validate(booking)
        if barber is not None:
            out.barber = BarberPublic.model_validate(barber)
        if service is not None:
            out.service = ServicePublic.model_validate(service)
        if user is not None:
            out.user = UserSummary.model_validate(user)
        return out
