"""
Pydantic models and enumerations for ship data.

``ShipPayload`` is the request body for both create and partial
update: every field is optional so that missing values reach the
service layer, which decides whether their absence is an error.
``Ship`` is the stored entity returned by the API.  Identifier and
rating are never read from a request body.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by the ``order`` query parameter."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        """Attribute of ``Ship`` this key sorts on."""
        return _ORDER_FIELDS[self]


_ORDER_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.SPEED: "speed",
    ShipOrder.DATE: "prod_date",
    ShipOrder.RATING: "rating",
}


class ShipPayload(BaseModel):
    """Request body for creating or updating a ship.

    ``prodDate`` is a point in time expressed in epoch milliseconds.
    Only the camelCase keys are read; unknown keys (including ``id``,
    ``rating`` and snake_case spellings) are ignored.
    """

    name: Optional[str] = Field(None, examples=["Orion III"])
    planet: Optional[str] = Field(None, examples=["Mars"])
    ship_type: Optional[ShipType] = Field(None, alias="shipType", examples=["MERCHANT"])
    prod_date: Optional[int] = Field(None, alias="prodDate", examples=[32998274577000])
    is_used: Optional[bool] = Field(None, alias="isUsed", examples=[False])
    speed: Optional[float] = Field(None, examples=[0.82])
    crew_size: Optional[int] = Field(None, alias="crewSize", examples=[617])


class Ship(BaseModel):
    """A stored ship.

    ``id`` is ``None`` only between validation and the first save.
    """

    id: Optional[int] = None
    name: str
    planet: str
    ship_type: ShipType = Field(..., alias="shipType")
    prod_date: int = Field(..., alias="prodDate")
    is_used: bool = Field(False, alias="isUsed")
    speed: float
    crew_size: int = Field(..., alias="crewSize")
    rating: float

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
