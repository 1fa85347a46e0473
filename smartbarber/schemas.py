# smartbarber/schemas.py

from datetime import date as Date, datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case accepted on input
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BookingStatus(str, Enum):
    upcoming = "upcoming"
    completed = "completed"
    cancelled = "cancelled"


class TimeSlot(BaseModel):
    id: str
    time: str
    available: bool = True


class BarberPublic(CamelModel):
    id: str
    name: str
    avatar: Optional[str] = None
    specialties: List[str] = []
    bio: Optional[str] = None
    rating: float


class ServicePublic(CamelModel):
    id: str
    name: str
    duration: str
    price: float
    description: str = ""


class UserSummary(CamelModel):
    id: str
    name: str
    email: str


class UserPublic(UserSummary):
    avatar: Optional[str] = None
    phone: Optional[str] = None


class BookingCreate(CamelModel):
    date: Union[datetime, Date]
    time: str = Field(min_length=1)
    barber_id: str = Field(min_length=1)
    service_id: str = Field(min_length=1)


class BookingUpdate(CamelModel):
    date: Optional[Union[datetime, Date]] = None
    time: Optional[str] = None
    barber_id: Optional[str] = None
    service_id: Optional[str] = None
    status: Optional[BookingStatus] = None


class BookingPublic(CamelModel):
    id: str
    date: Date
    time: str
    status: BookingStatus
    user_id: str
    barber_id: str
    service_id: str
    created_at: datetime
    updated_at: datetime

    barber: Optional[BarberPublic] = None
    service: Optional[ServicePublic] = None
    user: Optional[UserSummary] = None


class MessageResponse(BaseModel):
    message: str


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=6, max_length=72)


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
