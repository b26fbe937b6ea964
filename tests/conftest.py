import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# ensure project root is on the import path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from space_ships_api.app.api.v1.endpoints.ships import get_ship_repository  # noqa: E402
from space_ships_api.app.main import app  # noqa: E402
from space_ships_api.app.repositories.ship_repository import InMemoryShipRepository  # noqa: E402
from space_ships_api.app.schemas.ship import Ship, ShipType  # noqa: E402
from space_ships_api.app.services.ship_service import calculate_rating  # noqa: E402


def epoch_ms(year, month=6, day=15):
    return int(datetime(year, month, day, tzinfo=timezone.utc).timestamp() * 1000)


def make_ship(
    name="Orion",
    planet="Mars",
    ship_type=ShipType.MERCHANT,
    year=3000,
    is_used=False,
    speed=0.5,
    crew_size=100,
    ship_id=None,
):
    prod_date = epoch_ms(year)
    return Ship(
        id=ship_id,
        name=name,
        planet=planet,
        ship_type=ship_type,
        prod_date=prod_date,
        is_used=is_used,
        speed=speed,
        crew_size=crew_size,
        rating=calculate_rating(prod_date, speed, is_used),
    )


@pytest.fixture
def fleet():
    return [
        make_ship("Orion", "Mars", ShipType.MERCHANT, 3000, False, 0.5, 100),
        make_ship("Daedalus", "Earth", ShipType.MILITARY, 2900, True, 0.9, 2500),
        make_ship("Hermes", "Jupiter", ShipType.TRANSPORT, 3015, False, 0.2, 10),
        make_ship("Orion II", "mars colony", ShipType.MERCHANT, 2810, True, 0.75, 9999),
        make_ship("Nostromo", "Earth", ShipType.TRANSPORT, 3019, False, 0.33, 7),
    ]


@pytest.fixture
def repository(fleet):
    return InMemoryShipRepository(fleet)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_ship_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
