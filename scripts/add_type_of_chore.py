#!/usr/bin/env python3
"""
Register a TypeOfChore directly in the database.

Usage:
  python scripts/add_type_of_chore.py --name "Wash dishes" [--description ...] [--repeatable] [--interval 7] [--points 10]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the choreboard package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from choreboard.db.create_tables import create_all
from choreboard.db.models import TypeOfChore
from choreboard.repositories import SQLRepository


def main(argv: list[str] | None = None) -> TypeOfChore:
    ap = argparse.ArgumentParser(description="Register a type of chore")
    ap.add_argument("--name", required=True, help="Type name (e.g. Wash dishes)")
    ap.add_argument("--description", help="Optional description")
    ap.add_argument("--repeatable", action="store_true", help="Chore repeats")
    ap.add_argument("--interval", type=int, help="Days between repetitions")
    ap.add_argument("--points", type=int, help="Points awarded on completion")
    args = ap.parse_args(argv)

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Invalid name")

    create_all()
    repo = SQLRepository(TypeOfChore)
    entity = repo.save(
        TypeOfChore(
            name=name,
            description=(args.description or "").strip() or None,
            repeatable=args.repeatable,
            interval=args.interval,
            points=args.points,
        )
    )
    print("OK: type of chore registered")
    print(f"  ID: {entity.id}")
    print(f"  Name: {entity.name}")
    if entity.repeatable:
        print(f"  Interval: {entity.interval or '-'}")
    if entity.points is not None:
        print(f"  Points: {entity.points}")
    return entity


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
