# smartbarber/routers/barbers_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from smartbarber.catalog import CatalogRepository
from smartbarber.db import get_session
from smartbarber.errors import NotFoundError
from smartbarber.schemas import BarberPublic

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.get("", response_model=List[BarberPublic])
def list_barbers(session: Session = Depends(get_session)):
    return CatalogRepository(session).list_barbers()


@router.get("/{barber_id}", response_model=BarberPublic)
def get_barber(barber_id: str, session: Session = Depends(get_session)):
    barber = CatalogRepository(session).get_barber(barber_id)
    if barber is None:
        raise NotFoundError("Barber not found")
    return barber
