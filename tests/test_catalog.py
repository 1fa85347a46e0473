# tests/test_catalog.py

from sqlmodel import select

from smartbarber.catalog import CatalogRepository
from smartbarber.models import Barber, Service, User
from smartbarber.seed import seed_catalog, seed_demo_user


def test_seed_is_idempotent(session):
    # the session fixture already seeded once
    assert seed_catalog(session) == {"barbers": 0, "services": 0}
    assert len(session.exec(select(Barber)).all()) == 3
    assert len(session.exec(select(Service)).all()) == 6


def test_demo_user_only_into_empty_table(session):
    assert seed_demo_user(session) is True
    assert seed_demo_user(session) is False
    assert session.exec(select(User)).one().email == "john.doe@example.com"


def test_lookups(session, barber, service):
    repo = CatalogRepository(session)
    assert repo.get_barber(barber.id).name == barber.name
    assert repo.get_barber("nope") is None
    assert repo.get_service(service.id).name == service.name
    assert repo.barbers_by_ids([]) == {}
    assert set(repo.services_by_ids([service.id, "nope"])) == {service.id}


def test_barber_routes(client, barber):
    resp = client.get("/barbers")
    assert resp.status_code == 200
    assert [b["name"] for b in resp.json()] == ["David Chen", "James Wilson", "Maria Rodriguez"]

    one = client.get(f"/barbers/{barber.id}").json()
    assert one["specialties"]
    assert client.get("/barbers/ghost").status_code == 404


def test_service_routes(client, service):
    resp = client.get("/services")
    assert resp.status_code == 200
    assert len(resp.json()) == 6

    assert client.get(f"/services/{service.id}").json()["name"] == service.name
    assert client.get("/services/ghost").json() == {"error": "Service not found", "code": "NotFoundError"}
