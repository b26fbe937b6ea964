"""
Ship repositories.

``ShipRepository`` is the contract the services rely on: load all,
look up by identifier, save (insert or update) and delete.
``SQLiteShipRepository`` persists ships in the ``ship`` table created
by ``core.db.init_db``; ``InMemoryShipRepository`` keeps them in a
dict in insertion order and is used as a test double.
"""

import logging
import sqlite3
from typing import Dict, List, Optional, Protocol

from space_ships_api.app.core.db import get_cursor
from space_ships_api.app.schemas.ship import Ship, ShipType


logger = logging.getLogger(__name__)


class ShipRepository(Protocol):
    def find_all(self) -> List[Ship]:
        ...

    def find_by_id(self, ship_id: int) -> Optional[Ship]:
        ...

    def save(self, ship: Ship) -> Ship:
        """Insert ``ship`` when it has no id, otherwise update it."""
        ...

    def delete(self, ship: Ship) -> None:
        ...


_COLUMNS = "id, name, planet, ship_type, prod_date, is_used, speed, crew_size, rating"
SQLITE_MIN_INT, SQLITE_MAX_INT = -(2 ** 63), 2 ** 63 - 1


def _row_to_ship(row: sqlite3.Row) -> Ship:
    return Ship(
        id=row["id"],
        name=row["name"],
        planet=row["planet"],
        ship_type=ShipType(row["ship_type"]),
        prod_date=row["prod_date"],
        is_used=bool(row["is_used"]),
        speed=row["speed"],
        crew_size=row["crew_size"],
        rating=row["rating"],
    )


class SQLiteShipRepository:
    """Repository backed by the SQLite database.

    Each call opens its own connection through ``get_cursor`` and
    commits before returning.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def find_all(self) -> List[Ship]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM ship ORDER BY id").fetchall()
        return [_row_to_ship(row) for row in rows]

    def find_by_id(self, ship_id: int) -> Optional[Ship]:
        if not SQLITE_MIN_INT <= ship_id <= SQLITE_MAX_INT:
            return None
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM ship WHERE id = ?", (ship_id,)
            ).fetchone()
        return _row_to_ship(row) if row else None

    def save(self, ship: Ship) -> Ship:
        values = (
            ship.name,
            ship.planet,
            ship.ship_type.value,
            ship.prod_date,
            int(ship.is_used),
            ship.speed,
            ship.crew_size,
            ship.rating,
        )
        with get_cursor(self.db_path) as cursor:
            if ship.id is None:
                cursor.execute(
                    """
                    INSERT INTO ship (name, planet, ship_type, prod_date, is_used, speed, crew_size, rating)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    values,
                )
                ship = ship.model_copy(update={"id": cursor.lastrowid})
                logger.debug("Inserted ship %s", ship.id)
            else:
                cursor.execute(
                    """
                    UPDATE ship
                    SET name = ?, planet = ?, ship_type = ?, prod_date = ?, is_used = ?,
                        speed = ?, crew_size = ?, rating = ?
                    WHERE id = ?
                    """,
                    values + (ship.id,),
                )
                logger.debug("Updated ship %s", ship.id)
        return ship

    def delete(self, ship: Ship) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM ship WHERE id = ?", (ship.id,))


class InMemoryShipRepository:
    """Dict-backed repository that keeps insertion order.

    Stored ships are copies, so callers mutating the returned models
    never change repository state without calling ``save``.
    """

    def __init__(self, ships: Optional[List[Ship]] = None) -> None:
        self._ships: Dict[int, Ship] = {}
        self._next_id = 1
        for ship in ships or []:
            self.save(ship)

    def find_all(self) -> List[Ship]:
        return [ship.model_copy() for ship in self._ships.values()]

    def find_by_id(self, ship_id: int) -> Optional[Ship]:
        ship = self._ships.get(ship_id)
        return ship.model_copy() if ship else None

    def save(self, ship: Ship) -> Ship:
        if ship.id is None:
            ship = ship.model_copy(update={"id": self._next_id})
        self._next_id = max(self._next_id, ship.id + 1)
        self._ships[ship.id] = ship.model_copy()
        return ship

    def delete(self, ship: Ship) -> None:
        self._ships.pop(ship.id, None)
