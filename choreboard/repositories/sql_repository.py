"""Generic data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Callable, ContextManager, Generic, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from choreboard.core.logger import get_logger
from choreboard.db.session import get_session

from .errors import ConstraintViolationError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")
SessionFactory = Callable[[], ContextManager[Session]]


class SQLRepository(Generic[ModelT]):
    """find/save/delete for one model type with an integer ``id`` primary key."""

    def __init__(self, model: Type[ModelT], session_factory: SessionFactory = get_session) -> None:
        self.model = model
        self._session_factory = session_factory

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def find_all(self, sort: Optional[Sequence[Tuple[str, bool]]] = None) -> list[ModelT]:
        """All rows; ``sort`` is a list of ``(attribute, descending)`` pairs."""
        stmt = select(self.model)
        for attribute, descending in sort or ():
            column = getattr(self.model, attribute)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        with self._session_factory() as session:
            return list(session.execute(stmt).unique().scalars().all())

    def find_one(self, entity_id: int) -> Optional[ModelT]:
        with self._session_factory() as session:
            return session.get(self.model, entity_id)

    def count(self) -> int:
        with self._session_factory() as session:
            return session.execute(select(func.count()).select_from(self.model)).scalar_one()

    def save(self, entity: ModelT) -> ModelT:
        """Insert when ``entity.id`` is None, otherwise overwrite the row with that id."""
        with self._session_factory() as session:
            if entity.id is None:
                session.add(entity)
            else:
                entity = session.merge(entity)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                logger.warning("Rejected save of %s: %s", self.model_name, exc.orig)
                raise ConstraintViolationError(self.model_name, str(exc.orig)) from exc
            return self._reload(session, entity.id)

    def delete(self, entity_id: int) -> None:
        """Remove the row if present; a missing id is a no-op."""
        with self._session_factory() as session:
            try:
                session.execute(delete(self.model).where(self.model.id == entity_id))
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                logger.warning("Rejected delete of %s %s: %s", self.model_name, entity_id, exc.orig)
                raise ConstraintViolationError(self.model_name, str(exc.orig)) from exc

    def _reload(self, session: Session, entity_id: int) -> ModelT:
        # populate_existing refreshes the instance together with its joined relations
        stmt = select(self.model).where(self.model.id == entity_id).execution_options(populate_existing=True)
        return session.execute(stmt).unique().scalar_one()
