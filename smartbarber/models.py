# smartbarber/models.py

import uuid
from datetime import date as Date, datetime
from typing import List, Optional

from sqlalchemy import DateTime, Index, text
from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


def new_id() -> str:
    return uuid.uuid4().hex


class User(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str
    avatar: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime)


class Barber(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    avatar: Optional[str] = None
    specialties: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    bio: Optional[str] = None
    rating: float = 5.0


class Service(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    duration: str
    price: float
    description: str = ""


class Booking(SQLModel, table=True):
    __table_args__ = (
        # At most one non-cancelled booking per barber, day and slot.
        Index(
            "uq_booking_active_slot",
            "barber_id",
            "date",
            "time",
            unique=True,
            sqlite_where=text("status != 'cancelled'"),
            postgresql_where=text("status != 'cancelled'"),
        ),
    )

    id: str = Field(default_factory=new_id, primary_key=True)

    date: Date = Field(index=True)
    time: str
    status: str = "upcoming"

    user_id: str = Field(foreign_key="user.id", index=True)
    barber_id: str = Field(foreign_key="barber.id", index=True)
    service_id: str = Field(foreign_key="service.id")

    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime)
