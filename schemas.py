"""Wire schemas: camelCase JSON in, camelCase JSON out.

Drafts validate request bodies before anything reaches the record store.
Read models serialize store records (``from_attributes``).
"""

from datetime import date

from flask import request
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from utils import to_calendar_date

# JSON numbers only (no bools, no numeric strings), within a 32-bit INTEGER column
Quantity = Annotated[int, Field(ge=0, le=2**31 - 1, strict=True)]


class _Wire(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _Draft(_Wire):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    def to_draft(self) -> dict:
        return self.model_dump()


class UserCredentials(_Wire):
    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1)


class CropDraft(_Draft):
    name: str = Field(min_length=1)
    quantity: Quantity
    planted_date: date
    expected_harvest_date: date
    status: str = Field(min_length=1)

    @field_validator("planted_date", "expected_harvest_date", mode="before")
    @classmethod
    def calendar_dates(cls, value):
        return to_calendar_date(value)


class InventoryDraft(_Draft):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    quantity: Quantity
    unit: str = Field(min_length=1)


class TaskDraft(_Draft):
    title: str = Field(min_length=1)
    description: str
    due_date: date
    priority: str = Field(min_length=1)
    completed: bool = False

    @field_validator("due_date", mode="before")
    @classmethod
    def calendar_date(cls, value):
        return to_calendar_date(value)


class _Read(_Wire):
    model_config = ConfigDict(from_attributes=True)


class UserRead(_Read):
    id: int
    username: str


class CropRead(_Read):
    id: int
    user_id: int
    name: str
    quantity: int
    planted_date: date
    expected_harvest_date: date
    status: str


class InventoryRead(_Read):
    id: int
    user_id: int
    name: str
    category: str
    quantity: int
    unit: str


class TaskRead(_Read):
    id: int
    user_id: int
    title: str
    description: str
    due_date: date
    priority: str
    completed: bool


def dump(schema, record) -> dict:
    """Record -> JSON-ready dict with camelCase keys and ISO dates."""
    return schema.model_validate(record).model_dump(mode="json", by_alias=True)


def dump_all(schema, records) -> list:
    return [dump(schema, r) for r in records]


def parse_body(schema):
    """Validate the JSON request body; a missing or non-JSON body fails like an empty one."""
    payload = request.get_json(silent=True)
    return schema.model_validate(payload if payload is not None else {})
