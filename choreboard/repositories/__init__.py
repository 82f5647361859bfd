"""
Persistence adapters.

A single generic SQLRepository serves every entity; routers receive one
instance per model and never touch the SQLAlchemy session directly.
"""

from .errors import ConstraintViolationError, RepositoryError
from .sql_repository import SQLRepository

__all__ = ["ConstraintViolationError", "RepositoryError", "SQLRepository"]
