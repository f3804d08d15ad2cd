from typing import Optional, Type, TypeVar
from decimal import Decimal
from enum import Enum
import math
from app.models.property import CreatePropertyRequest, PropertyType, SpaceType

E = TypeVar("E", bound=Enum)

# NUMERIC(12, 2) price column
PRICE_SCALE = 2
PRICE_MAX = Decimal("9999999999.99")


class PropertyValidationError(ValueError):
    """Write-path constraint violation; carries the first offending-field message"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _allowed(enum_cls: Type[E]) -> str:
    return ", ".join(member.value for member in enum_cls)


def _parse_enum(enum_cls: Type[E], value: Optional[str], message: str) -> E:
    if not value:
        raise PropertyValidationError(message)
    try:
        return enum_cls(value)
    except ValueError:
        raise PropertyValidationError(message) from None


def parse_property_type(value: Optional[str]) -> PropertyType:
    return _parse_enum(
        PropertyType, value, f"type must be one of: {_allowed(PropertyType)}"
    )


def parse_space_type(value: Optional[str]) -> SpaceType:
    return _parse_enum(
        SpaceType, value, f"space.type must be one of: {_allowed(SpaceType)}"
    )


def normalize_text(value: Optional[str]) -> Optional[str]:
    """Trim free text; blank values become None"""
    if value is None or not value.strip():
        return None
    return value.strip()


def _is_positive(value: Optional[float]) -> bool:
    # NaN and infinities arrive from JSON bodies as floats
    return value is not None and math.isfinite(value) and value > 0


def validate_property_request(request: CreatePropertyRequest) -> None:
    """
    Check a create request, stopping at the first violation.

    Order: address, type, price, then every space in input order
    (type before size within each space).
    """
    if not request.address or not request.address.strip():
        raise PropertyValidationError("address is required")

    parse_property_type(request.type)

    if not _is_positive(request.price):
        raise PropertyValidationError("price must be positive")
    price = Decimal(str(request.price))
    if price.as_tuple().exponent < -PRICE_SCALE:
        raise PropertyValidationError(f"price must have at most {PRICE_SCALE} decimal places")
    if price > PRICE_MAX:
        raise PropertyValidationError(f"price must be at most {PRICE_MAX}")

    for space in request.spaces or []:
        parse_space_type(space.type)
        if not _is_positive(space.size):
            raise PropertyValidationError("space.size must be positive")
