# smartbarber/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from smartbarber.config import settings
from smartbarber.db import init_db
from smartbarber.errors import register_error_handlers
from smartbarber.routers import auth_routes, barbers_routes, bookings_routes, services_routes

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # schema only; catalog seeding is a separate deployment step (smartbarber.seed)
    init_db()
    logger.info("SmartBarber API started")
    yield


app = FastAPI(title="SmartBarber API", lifespan=lifespan)

register_error_handlers(app)

app.include_router(auth_routes.router)
app.include_router(bookings_routes.router)
app.include_router(barbers_routes.router)
app.include_router(services_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
