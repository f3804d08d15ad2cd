from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from enum import Enum


class PropertyType(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    CONDO = "condo"


class SpaceType(str, Enum):
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    LIVING_ROOM = "living room"


class SpaceView(BaseModel):
    """Flat view of a space, without its owning property"""
    id: int
    property_id: int
    type: SpaceType
    size: float
    description: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PropertyView(BaseModel):
    id: int
    address: str
    type: PropertyType
    price: float
    description: Optional[str] = None
    spaces: List[SpaceView] = []

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CreateSpaceRequest(BaseModel):
    # Types stay free-form here; membership is checked by the validation layer
    type: Optional[str] = None
    size: Optional[float] = None
    description: Optional[str] = None


class CreatePropertyRequest(BaseModel):
    address: Optional[str] = None
    type: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    spaces: Optional[List[CreateSpaceRequest]] = None


class PropertyCreated(BaseModel):
    id: int = Field(..., description="Identifier of the newly created property")
