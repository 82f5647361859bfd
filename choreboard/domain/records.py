"""
JSON records for every entity.

Field names travel as camelCase on the wire (``earnedAt``, ``typeOfChore``) and
map one to one onto the snake_case model columns. Input records reference
related entities by id only; views nest the full related record.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


def normalize_instant(value: datetime) -> datetime:
    """UTC, millisecond precision. Naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def format_instant(value: datetime) -> str:
    """Render as ``1970-01-01T00:00:00.000Z``."""
    value = normalize_instant(value)
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


Instant = Annotated[
    datetime,
    AfterValidator(normalize_instant),
    PlainSerializer(format_instant, return_type=str, when_used="json"),
]

ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

# identity columns are 64-bit, plain integer columns 32-bit
EntityId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: Optional[EntityId] = None


class EntityRef(BaseModel):
    """Association by identity: ``{"id": 3}``; other keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    id: EntityId


class FlatRecord(Record):
    name: str
    address: Optional[str] = None


class BadgeRecord(Record):
    earned_at: Optional[Instant] = None


class TypeOfChoreRecord(Record):
    name: str
    description: Optional[str] = None
    repeatable: bool
    interval: Optional[Int32] = None
    points: Optional[Int32] = None


class TypeOfBadgeRecord(Record):
    name: str
    description: Optional[str] = None
    badge: Optional[EntityRef] = None


class TypeOfBadgeView(TypeOfBadgeRecord):
    badge: Optional[BadgeRecord] = None


class ChoreRecord(Record):
    date: Optional[Instant] = None
    type_of_chore: Optional[EntityRef] = None
    flat: Optional[EntityRef] = None


class ChoreView(ChoreRecord):
    type_of_chore: Optional[TypeOfChoreRecord] = None
    flat: Optional[FlatRecord] = None
