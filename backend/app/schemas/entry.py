"""Entry schemas.

Request and response bodies use camelCase keys (``customerName``,
``bookingDate``); attributes stay snake_case on the Python side. ``total`` is
never read from a request body, it is derived from the items.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]

# Bounds keep the largest possible total (MAX_ITEMS * max price * MAX_QUANTITY)
# inside the entries.total column.
MAX_QUANTITY = 100_000
MAX_ITEMS = 200

_datetime_adapter = TypeAdapter(datetime)


def _date_part(value):
    # Browsers send full ISO timestamps (2024-03-09T10:30:00.000Z); keep the day
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return _datetime_adapter.validate_python(value).date()
        except ValidationError as exc:
            raise ValueError("Invalid booking date") from exc
    return value


BookingDate = Annotated[date, BeforeValidator(_date_part)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EntryItemBase(CamelModel):
    name: NonEmptyStr
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    quantity: int = Field(ge=0, le=MAX_QUANTITY)


class EntryItemCreate(EntryItemBase):
    pass


class EntryItemRead(EntryItemBase):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class EntryCreate(CamelModel):
    customer_name: NonEmptyStr
    booking_date: BookingDate
    items: List[EntryItemCreate] = Field(max_length=MAX_ITEMS)


class EntryUpdate(EntryCreate):
    """Full replacement of an entry's customer, date and items."""


class EntryRead(CamelModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    owner_id: int
    customer_name: str
    booking_date: date
    items: List[EntryItemRead]
    total: Decimal
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
