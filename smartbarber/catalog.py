# smartbarber/catalog.py

from typing import Dict, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from smartbarber.errors import InfrastructureError
from smartbarber.models import Barber, Service


class CatalogRepository:
    """Read-only access to barbers and services."""

    def __init__(self, session: Session):
        self.session = session

    def get_barber(self, barber_id: str) -> Optional[Barber]:
        try:
            return self.session.get(Barber, barber_id)
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load barber") from exc

    def get_service(self, service_id: str) -> Optional[Service]:
        try:
            return self.session.get(Service, service_id)
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load service") from exc

    def list_barbers(self) -> List[Barber]:
        try:
            return list(self.session.exec(select(Barber).order_by(Barber.name)).all())
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load barbers") from exc

    def list_services(self) -> List[Service]:
        try:
            return list(self.session.exec(select(Service).order_by(Service.price)).all())
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load services") from exc

    def barbers_by_ids(self, ids: Iterable[str]) -> Dict[str, Barber]:
        ids = list(set(ids))
        if not ids:
            return {}
        try:
            rows = self.session.exec(select(Barber).where(Barber.id.in_(ids))).all()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load barbers") from exc
        return {b.id: b for b in rows}

    def services_by_ids(self, ids: Iterable[str]) -> Dict[str, Service]:
        ids = list(set(ids))
        if not ids:
            return {}
        try:
            rows = self.session.exec(select(Service).where(Service.id.in_(ids))).all()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Could not load services") from exc
        return {s.id: s for s in rows}
