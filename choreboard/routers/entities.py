"""Entities exposed over REST."""

from __future__ import annotations

from choreboard.db.models import Badge, Chore, Flat, TypeOfBadge, TypeOfChore
from choreboard.domain.records import (
    BadgeRecord,
    ChoreRecord,
    ChoreView,
    FlatRecord,
    TypeOfBadgeRecord,
    TypeOfBadgeView,
    TypeOfChoreRecord,
)

from .crud import EntityResource

FLATS = EntityResource(name="flat", path="flats", model=Flat, record=FlatRecord)
BADGES = EntityResource(name="badge", path="badges", model=Badge, record=BadgeRecord)
TYPES_OF_BADGE = EntityResource(
    name="typeOfBadge",
    path="type-of-badges",
    model=TypeOfBadge,
    record=TypeOfBadgeRecord,
    view=TypeOfBadgeView,
    relations=("badge",),
)
TYPES_OF_CHORE = EntityResource(
    name="typeOfChore",
    path="type-of-chores",
    model=TypeOfChore,
    record=TypeOfChoreRecord,
)
CHORES = EntityResource(
    name="chore",
    path="chores",
    model=Chore,
    record=ChoreRecord,
    view=ChoreView,
    relations=("type_of_chore", "flat"),
)

ENTITY_RESOURCES = (FLATS, BADGES, TYPES_OF_BADGE, TYPES_OF_CHORE, CHORES)
