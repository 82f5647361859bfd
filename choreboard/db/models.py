"""SQLAlchemy models for flats, badges and chores."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from .session import Base


class IdentityMixin:
    """Integer identity assigned by the store plus identity-based equality.

    Two instances are equal only when both carry an id and the ids match. An
    unsaved instance (``id is None``) equals nothing but itself.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)

    __repr_fields__ = ()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        # id changes on first flush, so only the type takes part
        return hash(type(self).__name__)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in ("id",) + self.__repr_fields__)
        return f"{type(self).__name__}({fields})"


class Flat(IdentityMixin, Base):
    __tablename__ = "flat"
    __repr_fields__ = ("name", "address")

    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=True)


class Badge(IdentityMixin, Base):
    __tablename__ = "badge"
    __repr_fields__ = ("earned_at",)

    earned_at = Column(DateTime(timezone=True), nullable=True)


class TypeOfBadge(IdentityMixin, Base):
    __tablename__ = "type_of_badge"
    __repr_fields__ = ("name", "description")

    name = Column(String(255), nullable=False)
    description = Column(String(255), nullable=True)
    badge_id = Column(Integer, ForeignKey("badge.id"), nullable=True)

    badge = relationship("Badge", lazy="joined")


class TypeOfChore(IdentityMixin, Base):
    __tablename__ = "type_of_chore"
    __repr_fields__ = ("name", "description", "repeatable", "interval", "points")

    name = Column(String(255), nullable=False)
    description = Column(String(255), nullable=True)
    repeatable = Column(Boolean, nullable=False)
    interval = Column(Integer, nullable=True)
    points = Column(Integer, nullable=True)


class Chore(IdentityMixin, Base):
    __tablename__ = "chore"
    __repr_fields__ = ("date",)

    date = Column(DateTime(timezone=True), nullable=True)
    type_of_chore_id = Column(Integer, ForeignKey("type_of_chore.id"), nullable=True)
    flat_id = Column(Integer, ForeignKey("flat.id"), nullable=True)

    type_of_chore = relationship("TypeOfChore", lazy="joined")
    flat = relationship("Flat", lazy="joined")
