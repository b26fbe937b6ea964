"""
Ship endpoints for API v1.

CRUD over ships plus a count endpoint.  Query parameters and body
fields use the camelCase names clients send (``shipType``,
``minCrewSize``, ``pageNumber`` ...).  Domain errors raised by
``ShipService`` are translated into 400 and 404 responses here.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from space_ships_api.app.core.exceptions import BadRequestError, ShipNotFoundError
from space_ships_api.app.repositories.ship_repository import (
    SQLITE_MAX_INT,
    SQLITE_MIN_INT,
    ShipRepository,
    SQLiteShipRepository,
)
from space_ships_api.app.schemas.ship import Ship, ShipOrder, ShipPayload, ShipType
from space_ships_api.app.services.ship_filters import ShipFilter
from space_ships_api.app.services.ship_service import ShipService


router = APIRouter()

# Identifiers are SQLite 64-bit integers.
ShipId = Annotated[int, Path(ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT)]


def get_ship_repository() -> ShipRepository:
    """Repository used by the endpoints; overridden in tests."""
    return SQLiteShipRepository()


def get_ship_service(repository: ShipRepository = Depends(get_ship_repository)) -> ShipService:
    return ShipService(repository)


def ship_filter(
    name: Optional[str] = Query(None),
    planet: Optional[str] = Query(None),
    ship_type: Optional[ShipType] = Query(None, alias="shipType"),
    after: Optional[int] = Query(None, description="Epoch milliseconds, exclusive"),
    before: Optional[int] = Query(None, description="Epoch milliseconds, exclusive"),
    is_used: Optional[bool] = Query(None, alias="isUsed"),
    min_speed: Optional[float] = Query(None, alias="minSpeed"),
    max_speed: Optional[float] = Query(None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(None, alias="minCrewSize"),
    max_crew_size: Optional[int] = Query(None, alias="maxCrewSize"),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> ShipFilter:
    """Collect the filter query parameters shared by list and count."""
    return ShipFilter(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after,
        before=before,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


@router.get("", response_model=List[Ship])
async def list_ships(
    criteria: ShipFilter = Depends(ship_filter),
    order: Optional[ShipOrder] = Query(None),
    page_number: Optional[int] = Query(None, alias="pageNumber", ge=0),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=0),
    service: ShipService = Depends(get_ship_service),
) -> List[Ship]:
    """List ships matching the filters, ordered and paged.

    - **order** — `ID`, `SPEED`, `DATE` or `RATING` (ascending).
    - **pageNumber**, **pageSize** — zero-based page and its size.
      Without them three ships are returned.
    """
    return await service.list_ships(criteria, order, page_number, page_size)


@router.get("/count", response_model=int)
async def count_ships(
    criteria: ShipFilter = Depends(ship_filter),
    service: ShipService = Depends(get_ship_service),
) -> int:
    """Count ships matching the filters (no ordering or paging)."""
    return await service.count_ships(criteria)


@router.post("", response_model=Ship)
async def create_ship(
    payload: ShipPayload,
    service: ShipService = Depends(get_ship_service),
) -> Ship:
    """Create a ship.

    Every field except ``isUsed`` is required.  ``id`` and ``rating``
    are assigned by the server.
    """
    try:
        return await service.create_ship(payload)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/{ship_id}", response_model=Ship)
async def get_ship(ship_id: ShipId, service: ShipService = Depends(get_ship_service)) -> Ship:
    try:
        return await service.get_ship(ship_id)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/{ship_id}", response_model=Ship)
async def update_ship(
    ship_id: ShipId,
    payload: ShipPayload,
    service: ShipService = Depends(get_ship_service),
) -> Ship:
    """Partially update a ship.

    Only supplied fields change and the rating is recomputed.  A body
    without any ship field leaves the ship untouched.
    """
    try:
        return await service.update_ship(ship_id, payload)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{ship_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_ship(ship_id: ShipId, service: ShipService = Depends(get_ship_service)) -> Response:
    try:
        await service.delete_ship(ship_id)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)
