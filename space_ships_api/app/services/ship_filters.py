"""
Filtering, ordering and pagination of ship collections.

``filter_ships`` applies every supplied criterion of a ``ShipFilter``
(logical AND); criteria left as ``None`` impose no constraint.
``sort_and_paginate`` turns the filtered list into the page returned
to the caller.  Both functions are pure and never raise for
out-of-range values; they return an empty list instead.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from space_ships_api.app.core.config import settings
from space_ships_api.app.schemas.ship import Ship, ShipOrder, ShipType


@dataclass
class ShipFilter:
    """Optional criteria for listing and counting ships.

    ``after`` and ``before`` are epoch milliseconds compared strictly
    against ``prod_date``.  Range bounds are inclusive and independent.
    """

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[int] = None
    before: Optional[int] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None


def _predicates(criteria: ShipFilter) -> List[Callable[[Ship], bool]]:
    checks: List[Callable[[Ship], bool]] = []
    if criteria.name is not None:
        name = criteria.name.lower()
        checks.append(lambda ship: name in ship.name.lower())
    if criteria.planet is not None:
        planet = criteria.planet.lower()
        checks.append(lambda ship: planet in ship.planet.lower())
    if criteria.ship_type is not None:
        checks.append(lambda ship: ship.ship_type == criteria.ship_type)
    if criteria.after is not None:
        checks.append(lambda ship: ship.prod_date > criteria.after)
    if criteria.before is not None:
        checks.append(lambda ship: ship.prod_date < criteria.before)
    if criteria.is_used is not None:
        checks.append(lambda ship: ship.is_used == criteria.is_used)
    if criteria.min_speed is not None:
        checks.append(lambda ship: ship.speed >= criteria.min_speed)
    if criteria.max_speed is not None:
        checks.append(lambda ship: ship.speed <= criteria.max_speed)
    if criteria.min_crew_size is not None:
        checks.append(lambda ship: ship.crew_size >= criteria.min_crew_size)
    if criteria.max_crew_size is not None:
        checks.append(lambda ship: ship.crew_size <= criteria.max_crew_size)
    if criteria.min_rating is not None:
        checks.append(lambda ship: ship.rating >= criteria.min_rating)
    if criteria.max_rating is not None:
        checks.append(lambda ship: ship.rating <= criteria.max_rating)
    return checks


def filter_ships(ships: List[Ship], criteria: Optional[ShipFilter] = None) -> List[Ship]:
    """Return the ships matching every supplied criterion, in input order."""
    if criteria is None:
        return list(ships)
    checks = _predicates(criteria)
    return [ship for ship in ships if all(check(ship) for check in checks)]


def sort_ships(ships: List[Ship], order: Optional[ShipOrder]) -> List[Ship]:
    """Stable ascending sort on the key named by ``order`` (id by default)."""
    key = (order or ShipOrder.ID).field_name
    return sorted(ships, key=lambda ship: getattr(ship, key))


def sort_and_paginate(
    ships: List[Ship],
    order: Optional[ShipOrder] = None,
    page_number: Optional[int] = None,
    page_size: Optional[int] = None,
    default_size: Optional[int] = None,
) -> List[Ship]:
    """Select the page of ``ships`` described by the three optional parameters.

    Without an order the input order is kept:

    - nothing given: first ``default_size`` ships;
    - only ``page_size``: first ``page_size`` ships;
    - only ``page_number``: ``default_size`` ships from
      ``page_number * default_size``.

    With an order the list is sorted first:

    - no page size: first ``default_size`` ships, ``page_number`` is
      ignored;
    - ``page_size`` without ``page_number``: the ships at positions
      ``[page_size, 2 * page_size)``, i.e. the second page;
    - both: ``page_size`` ships from ``page_number * page_size``.

    ``page_number`` together with ``page_size`` but no order is sorted
    by id and paged the standard way.
    """
    size = settings.default_page_size if default_size is None else default_size

    if order is None and page_number is None and page_size is None:
        return list(ships[:size])
    if order is None and page_number is None:
        return list(ships[:page_size])
    if order is None and page_size is None:
        start = page_number * size
        return list(ships[start:start + size])

    ordered = sort_ships(ships, order)
    if page_size is None:
        return ordered[:size]
    if page_number is None:
        # Second page, not the first.
        return ordered[page_size:2 * page_size]
    start = page_number * page_size
    return ordered[start:start + page_size]
