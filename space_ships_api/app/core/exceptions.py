"""
Domain errors raised by the ship services.

Only two kinds exist.  ``BadRequestError`` means the caller sent data
that violates a constraint; ``ShipNotFoundError`` means the referenced
ship does not exist.  The API layer maps them to 400 and 404.
"""


class ShipError(Exception):
    """Base class for ship domain errors."""


class BadRequestError(ShipError, ValueError):
    """Client supplied data violates a constraint."""


class ShipNotFoundError(ShipError, LookupError):
    """No ship with the requested identifier."""

    def __init__(self, ship_id: int) -> None:
        super().__init__(f"Ship {ship_id} not found")
        self.ship_id = ship_id
