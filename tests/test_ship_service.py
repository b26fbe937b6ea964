import asyncio

import pytest

from space_ships_api.app.core.exceptions import BadRequestError, ShipNotFoundError
from space_ships_api.app.schemas.ship import ShipOrder, ShipPayload
from space_ships_api.app.services.ship_filters import ShipFilter
from space_ships_api.app.services.ship_service import ShipService


class RecordingRepository:
    """Wraps a repository and records calls to save."""

    def __init__(self, inner):
        self.inner = inner
        self.saved = []

    def find_all(self):
        return self.inner.find_all()

    def find_by_id(self, ship_id):
        return self.inner.find_by_id(ship_id)

    def save(self, ship):
        self.saved.append(ship)
        return self.inner.save(ship)

    def delete(self, ship):
        self.inner.delete(ship)


@pytest.fixture
def recording(repository):
    return RecordingRepository(repository)


@pytest.fixture
def service(recording):
    return ShipService(recording)


def test_list_ships_filters_then_pages(service):
    ships = asyncio.run(service.list_ships(ShipFilter(is_used=False), ShipOrder.RATING, 0, 2))
    assert [ship.id for ship in ships] == [1, 3]


def test_get_ship_zero_is_bad_request(service):
    with pytest.raises(BadRequestError):
        asyncio.run(service.get_ship(0))


def test_get_missing_ship(service):
    with pytest.raises(ShipNotFoundError) as excinfo:
        asyncio.run(service.get_ship(42))
    assert excinfo.value.ship_id == 42


def test_noop_update_is_not_saved(service, recording):
    ship = asyncio.run(service.update_ship(2, ShipPayload(isUsed=False)))
    assert ship.is_used is True
    assert recording.saved == []


def test_failed_update_is_not_saved(service, recording):
    with pytest.raises(BadRequestError):
        asyncio.run(service.update_ship(1, ShipPayload(name="x" * 60)))
    assert recording.saved == []


def test_invalid_create_is_not_saved(service, recording):
    with pytest.raises(BadRequestError):
        asyncio.run(service.create_ship(ShipPayload(name="Lonely")))
    assert recording.saved == []


def test_delete_missing_ship(service):
    with pytest.raises(ShipNotFoundError):
        asyncio.run(service.delete_ship(99))
