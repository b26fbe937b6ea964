"""
Business logic for ships.

Module level functions are pure: ``calculate_rating`` derives the
rating, ``build_new_ship`` validates a create payload and
``apply_ship_update`` validates and applies a partial update.
``ShipService`` wires them to an injected ``ShipRepository``.

Create and update deliberately validate differently.  On update,
``speed`` is applied as given and ``prodDate`` is only checked for
being non-negative; when any field changes and ``isUsed`` is not in
the payload, the ship is marked as new.
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from space_ships_api.app.core.exceptions import BadRequestError, ShipNotFoundError
from space_ships_api.app.repositories.ship_repository import ShipRepository
from space_ships_api.app.schemas.ship import Ship, ShipOrder, ShipPayload
from space_ships_api.app.services.ship_filters import ShipFilter, filter_ships, sort_and_paginate


logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 50
MIN_SPEED, MAX_SPEED = 0.01, 0.99
MIN_CREW_SIZE, MAX_CREW_SIZE = 1, 9999
MIN_PROD_YEAR, MAX_PROD_YEAR = 2800, 3019
CURRENT_YEAR = 3019

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def production_year(prod_date: int) -> int:
    """Calendar year (UTC) of an epoch-milliseconds timestamp."""
    try:
        return (_EPOCH + timedelta(milliseconds=prod_date)).year
    except OverflowError as exc:
        raise BadRequestError(f"prodDate {prod_date} is out of range") from exc


def round_half_up(value: float, digits: int = 2) -> float:
    """Round halves up (0.125 -> 0.13) rather than to even like ``round``."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def calculate_rating(prod_date: Optional[int], speed: Optional[float], is_used: Optional[bool]) -> Optional[float]:
    """Return the ship rating, or ``None`` while it cannot be computed yet.

    rating = 80 * speed * k / (3019 - year + 1), with k = 0.5 for used
    ships and 1 otherwise, rounded half up to two decimals.
    """
    if prod_date is None or speed is None:
        return None
    k = 0.5 if is_used else 1.0
    age = CURRENT_YEAR - production_year(prod_date) + 1
    if age == 0:
        raise BadRequestError(f"Rating is undefined for production year {CURRENT_YEAR + 1}")
    rating = (80 * speed * k) / age
    if not math.isfinite(rating * 100):
        raise BadRequestError(f"Rating is out of range for speed {speed}")
    return round_half_up(rating)


def _check_text(field: str, value: str) -> None:
    if value == "" or len(value) > MAX_TEXT_LENGTH:
        raise BadRequestError(f"{field} must be 1-{MAX_TEXT_LENGTH} characters long")


def _check_crew_size(value: int) -> None:
    if value < MIN_CREW_SIZE or value > MAX_CREW_SIZE:
        raise BadRequestError(f"crewSize must be within [{MIN_CREW_SIZE}, {MAX_CREW_SIZE}]")


def _check_prod_date_sign(value: int) -> None:
    if value < 0:
        raise BadRequestError("prodDate must not be negative")


def build_new_ship(payload: ShipPayload) -> Ship:
    """Validate a create payload and return an unsaved ``Ship``.

    Raises ``BadRequestError`` when a required field is missing or a
    value is out of bounds.  ``isUsed`` defaults to ``False``.
    """
    missing = [
        alias
        for alias, value in (
            ("name", payload.name),
            ("planet", payload.planet),
            ("shipType", payload.ship_type),
            ("prodDate", payload.prod_date),
            ("speed", payload.speed),
            ("crewSize", payload.crew_size),
        )
        if value is None
    ]
    if missing:
        raise BadRequestError(f"Missing required fields: {', '.join(missing)}")

    _check_text("name", payload.name)
    _check_text("planet", payload.planet)
    if payload.speed < MIN_SPEED or payload.speed > MAX_SPEED:
        raise BadRequestError(f"speed must be within [{MIN_SPEED}, {MAX_SPEED}]")
    _check_crew_size(payload.crew_size)
    _check_prod_date_sign(payload.prod_date)
    year = production_year(payload.prod_date)
    if year < MIN_PROD_YEAR or year > MAX_PROD_YEAR:
        raise BadRequestError(f"prodDate year must be within [{MIN_PROD_YEAR}, {MAX_PROD_YEAR}]")

    is_used = bool(payload.is_used)
    return Ship(
        name=payload.name,
        planet=payload.planet,
        ship_type=payload.ship_type,
        prod_date=payload.prod_date,
        is_used=is_used,
        speed=payload.speed,
        crew_size=payload.crew_size,
        rating=calculate_rating(payload.prod_date, payload.speed, is_used),
    )


def apply_ship_update(ship: Ship, payload: ShipPayload) -> Optional[Ship]:
    """Return a copy of ``ship`` with the payload applied.

    Returns ``None`` when the payload names none of name, planet,
    shipType, crewSize, speed or prodDate; an ``isUsed`` value alone
    changes nothing.  The original ``ship`` is never modified, so a
    ``BadRequestError`` leaves no partial update behind.
    """
    if all(
        value is None
        for value in (
            payload.name,
            payload.planet,
            payload.ship_type,
            payload.crew_size,
            payload.speed,
            payload.prod_date,
        )
    ):
        return None

    changes = {}
    if payload.name is not None:
        _check_text("name", payload.name)
        changes["name"] = payload.name
    if payload.planet is not None:
        _check_text("planet", payload.planet)
        changes["planet"] = payload.planet
    if payload.ship_type is not None:
        changes["ship_type"] = payload.ship_type
    if payload.prod_date is not None:
        _check_prod_date_sign(payload.prod_date)
        changes["prod_date"] = payload.prod_date
    # An absent isUsed marks the ship as new.
    changes["is_used"] = bool(payload.is_used)
    if payload.speed is not None:
        changes["speed"] = payload.speed
    if payload.crew_size is not None:
        _check_crew_size(payload.crew_size)
        changes["crew_size"] = payload.crew_size

    updated = ship.model_copy(update=changes)
    updated.rating = calculate_rating(updated.prod_date, updated.speed, updated.is_used)
    return updated


class ShipService:
    """Сервис для управления кораблями.

    Works against any ``ShipRepository``; the API injects the SQLite
    repository, tests inject the in-memory one.
    """

    def __init__(self, repository: ShipRepository) -> None:
        self.repository = repository

    async def list_ships(
        self,
        criteria: Optional[ShipFilter] = None,
        order: Optional[ShipOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Ship]:
        """Return one page of ships matching ``criteria``."""
        ships = filter_ships(self.repository.find_all(), criteria)
        return sort_and_paginate(ships, order, page_number, page_size)

    async def count_ships(self, criteria: Optional[ShipFilter] = None) -> int:
        return len(filter_ships(self.repository.find_all(), criteria))

    async def get_ship(self, ship_id: int) -> Ship:
        """Retrieve a ship by identifier.

        Identifier ``0`` is rejected with ``BadRequestError``; an
        unknown identifier raises ``ShipNotFoundError``.
        """
        if ship_id == 0:
            raise BadRequestError("Ship id must not be 0")
        ship = self.repository.find_by_id(ship_id)
        if ship is None:
            logger.info("Ship %s not found", ship_id)
            raise ShipNotFoundError(ship_id)
        return ship

    async def create_ship(self, payload: ShipPayload) -> Ship:
        ship = self.repository.save(build_new_ship(payload))
        logger.info("Ship %s '%s' created", ship.id, ship.name)
        return ship

    async def update_ship(self, ship_id: int, payload: ShipPayload) -> Ship:
        """Apply a partial update and persist it.

        When the payload changes nothing the stored ship is returned
        as is and nothing is written.
        """
        ship = await self.get_ship(ship_id)
        updated = apply_ship_update(ship, payload)
        if updated is None:
            logger.debug("Nothing to update for ship %s", ship_id)
            return ship
        ship = self.repository.save(updated)
        logger.info("Ship %s updated", ship_id)
        return ship

    async def delete_ship(self, ship_id: int) -> None:
        ship = await self.get_ship(ship_id)
        self.repository.delete(ship)
        logger.info("Ship %s deleted", ship_id)
