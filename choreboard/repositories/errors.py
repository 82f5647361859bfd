"""Exceptions raised by the persistence layer."""


class RepositoryError(Exception):
    """Base exception for repository operations."""


class ConstraintViolationError(RepositoryError):
    """Raised when the store rejects a write (not-null, foreign key, unique)."""

    def __init__(self, model_name: str, detail: str) -> None:
        super().__init__(f"{model_name}: {detail}")
        self.model_name = model_name
        self.detail = detail
