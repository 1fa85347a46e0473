# smartbarber/routers/services_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from smartbarber.catalog import CatalogRepository
from smartbarber.db import get_session
from smartbarber.errors import NotFoundError
from smartbarber.schemas import ServicePublic

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.get("", response_model=List[ServicePublic])
def list_services(session: Session = Depends(get_session)):
    return CatalogRepository(session).list_services()


@router.get("/{service_id}", response_model=ServicePublic)
def get_service(service_id: str, session: Session = Depends(get_session)):
    service = CatalogRepository(session).get_service(service_id)
    if service is None:
        raise NotFoundError("Service not found")
    return service
