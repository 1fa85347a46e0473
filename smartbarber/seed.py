# smartbarber/seed.py
"""
Idempotent catalog seeding, run once per deployment:

    python -m smartbarber.seed
"""

import logging
from typing import Dict

from sqlalchemy import func
from sqlmodel import Session, select

from smartbarber.auth import hash_password
from smartbarber.data import DEMO_USER, SEED_BARBERS, SEED_SERVICES
from smartbarber.db import engine, init_db
from smartbarber.models import Barber, Service, User

logger = logging.getLogger(__name__)


def _count(session: Session, model) -> int:
    return session.exec(select(func.count()).select_from(model)).one()


def seed_catalog(session: Session) -> Dict[str, int]:
    """Insert the default barbers and services into empty tables."""
    inserted = {"barbers": 0, "services": 0}

    if _count(session, Barber) == 0:
        for row in SEED_BARBERS:
            session.add(Barber(**row))
        inserted["barbers"] = len(SEED_BARBERS)

    if _count(session, Service) == 0:
        for row in SEED_SERVICES:
            session.add(Service(**row))
        inserted["services"] = len(SEED_SERVICES)

    session.commit()
    if any(inserted.values()):
        logger.info("Catalog seeded: %(barbers)d barbers, %(services)d services", inserted)
    return inserted


def seed_demo_user(session: Session) -> bool:
    if _count(session, User) > 0:
        return False

    fields = dict(DEMO_USER)
    password = fields.pop("password")
    session.add(User(password_hash=hash_password(password), **fields))
    session.commit()
    logger.info("Demo user %s seeded", fields["email"])
    return True


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    init_db()
    with Session(engine) as session:
        seed_catalog(session)
        seed_demo_user(session)


if __name__ == "__main__":
    main()
