# tests/test_ledger.py

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
from sqlmodel import select

from smartbarber.errors import NotFoundError, SlotTakenError
from smartbarber.ledger import BookingLedger
from smartbarber.models import Booking
from smartbarber.schemas import BookingStatus


def _draft(user, barber, service, day, time="10:00 AM"):
    return Booking(date=day, time=time, user_id=user.id, barber_id=barber.id, service_id=service.id)


def _active_rows(session, barber, day, time):
    return session.exec(
        select(Booking)
        .where(Booking.barber_id == barber.id)
        .where(Booking.date == day)
        .where(Booking.time == time)
        .where(Booking.status != "cancelled")
    ).all()


class TestInsert:
    def test_insert_keeps_only_the_calendar_day(self, session, user, barber, service, day):
        booking = BookingLedger(session).insert(
            _draft(user, barber, service, datetime.combine(day, datetime.min.time()) + timedelta(hours=14))
        )
        assert booking.id
        assert booking.date == day
        assert booking.status == "upcoming"

    def test_second_insert_same_slot_is_rejected(self, session, user, other_user, barber, service, day):
        ledger = BookingLedger(session)
        ledger.insert(_draft(user, barber, service, day))

        with pytest.raises(SlotTakenError):
            ledger.insert(_draft(other_user, barber, service, day))

        assert len(_active_rows(session, barber, day, "10:00 AM")) == 1

    def test_same_time_other_barber_is_fine(self, session, user, barber, other_barber, service, day):
        ledger = BookingLedger(session)
        ledger.insert(_draft(user, barber, service, day))
        ledger.insert(_draft(user, other_barber, service, day))

    def test_unique_index_catches_race_past_the_lookup(self, session, user, other_user, barber, service, day):
        ledger = BookingLedger(session)
        ledger.insert(_draft(user, barber, service, day, "11:00 AM"))

        # Simulate a writer whose lookup ran before the first insert committed.
        with patch.object(BookingLedger, "find_conflict", return_value=None):
            with pytest.raises(SlotTakenError):
                ledger.insert(_draft(other_user, barber, service, day, "11:00 AM"))

        assert len(_active_rows(session, barber, day, "11:00 AM")) == 1

    def test_cancelled_rows_do_not_block(self, session, user, other_user, barber, service, day):
        ledger = BookingLedger(session)
        first = ledger.insert(_draft(user, barber, service, day))
        ledger.update_status(first.id, BookingStatus.cancelled)

        second = ledger.insert(_draft(other_user, barber, service, day))
        ledger.update_status(second.id, BookingStatus.cancelled)

        third = ledger.insert(_draft(user, barber, service, day))
        assert third.status == "upcoming"


class TestQueries:
    def test_find_conflict_ignores_cancelled_and_excluded(self, session, user, barber, service, day):
        ledger = BookingLedger(session)
        booking = ledger.insert(_draft(user, barber, service, day))

        assert ledger.find_conflict(barber.id, day, "10:00 AM").id == booking.id
        assert ledger.find_conflict(barber.id, day, "10:00 AM", exclude_id=booking.id) is None
        assert ledger.find_conflict(barber.id, day, "10:30 AM") is None
        assert ledger.find_conflict(barber.id, day + timedelta(days=1), "10:00 AM") is None

        ledger.update_status(booking.id, BookingStatus.cancelled)
        assert ledger.find_conflict(barber.id, day, "10:00 AM") is None

    def test_find_by_user_newest_date_first(self, session, user, other_user, barber, service, day):
        ledger = BookingLedger(session)
        ledger.insert(_draft(user, barber, service, day))
        ledger.insert(_draft(user, barber, service, day + timedelta(days=5)))
        ledger.insert(_draft(user, barber, service, day - timedelta(days=2)))
        ledger.insert(_draft(other_user, barber, service, day, "1:00 PM"))

        rows = ledger.find_by_user(user.id)
        assert [r.date for r in rows] == [
            day + timedelta(days=5),
            day,
            day - timedelta(days=2),
        ]

    def test_find_active_on_filters(self, session, user, barber, other_barber, service, day):
        ledger = BookingLedger(session)
        a = ledger.insert(_draft(user, barber, service, day, "9:00 AM"))
        b = ledger.insert(_draft(user, other_barber, service, day, "9:30 AM"))
        c = ledger.insert(_draft(user, barber, service, day, "2:00 PM"))
        ledger.insert(_draft(user, barber, service, day + timedelta(days=1), "9:00 AM"))
        ledger.update_status(c.id, BookingStatus.cancelled)

        assert {x.id for x in ledger.find_active_on(day)} == {a.id, b.id}
        assert {x.id for x in ledger.find_active_on(day, barber.id)} == {a.id}


class TestUpdate:
    def test_unknown_id(self, session):
        ledger = BookingLedger(session)
        with pytest.raises(NotFoundError):
            ledger.update("missing", {"time": "9:00 AM"})
        with pytest.raises(NotFoundError):
            ledger.update_status("missing", BookingStatus.cancelled)

    def test_partial_update_keeps_other_fields(self, session, user, barber, service, day):
        ledger = BookingLedger(session)
        booking = ledger.insert(_draft(user, barber, service, day))

        updated = ledger.update(booking.id, {"time": "3:00 PM"})
        assert updated.time == "3:00 PM"
        assert updated.barber_id == barber.id
        assert updated.date == day

    def test_move_onto_taken_slot_is_rejected(self, session, user, other_user, barber, service, day):
        ledger = BookingLedger(session)
        ledger.insert(_draft(other_user, barber, service, day, "3:00 PM"))
        mine = ledger.insert(_draft(user, barber, service, day, "9:00 AM"))

        with pytest.raises(SlotTakenError):
            ledger.update(mine.id, {"time": "3:00 PM"})

        assert ledger.find_by_id(mine.id).time == "9:00 AM"

    def test_rejects_unknown_fields(self, session, user, barber, service, day):
        ledger = BookingLedger(session)
        booking = ledger.insert(_draft(user, barber, service, day))
        with pytest.raises(ValueError):
            ledger.update(booking.id, {"user_id": "someone-else"})
