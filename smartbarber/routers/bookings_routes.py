# smartbarber/routers/bookings_routes.py

from datetime import date as Date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from smartbarber.auth import get_current_user
from smartbarber.availability import resolve_availability
from smartbarber.booking_service import BookingService
from smartbarber.db import get_session
from smartbarber.schemas import (
    BookingCreate,
    BookingPublic,
    BookingUpdate,
    MessageResponse,
    TimeSlot,
)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


@router.get("/slots/{date}", response_model=List[TimeSlot])
def get_time_slots(
    date: Date,
    barber_id: Optional[str] = Query(default=None, alias="barberId"),
    session: Session = Depends(get_session),
):
    return resolve_availability(session, date, barber_id)


@router.post("", response_model=BookingPublic, status_code=201)
def create_booking(
    booking: BookingCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    return BookingService(session).create_booking(
        current_user["id"],
        booking.date,
        booking.time,
        booking.barber_id,
        booking.service_id,
    )


@router.get("/user", response_model=List[BookingPublic])
def list_my_bookings(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    return BookingService(session).list_user_bookings(current_user["id"])


@router.put("/{booking_id}", response_model=BookingPublic)
def update_booking(
    booking_id: str,
    patch: BookingUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    return BookingService(session).reschedule_booking(current_user["id"], booking_id, patch)


@router.delete("/{booking_id}", response_model=MessageResponse)
def cancel_booking(
    booking_id: str,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    BookingService(session).cancel_booking(current_user["id"], booking_id)
    return {"message": "Booking cancelled successfully"}
