"""Create (or rebuild) the choreboard schema.

    python -m choreboard.db.create_tables [--reset]
"""
from __future__ import annotations

import argparse

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers every table on Base.metadata


def create_all(engine: Engine | None = None) -> None:
    Base.metadata.create_all(bind=engine or get_engine())


def drop_all(engine: Engine | None = None) -> None:
    Base.metadata.drop_all(bind=engine or get_engine())


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the choreboard tables")
    ap.add_argument("--reset", action="store_true", help="Drop existing tables first (destroys data)")
    args = ap.parse_args(argv)
    if args.reset:
        drop_all()
    create_all()


if __name__ == "__main__":
    try:
        main()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
