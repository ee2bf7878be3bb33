#!/usr/bin/env python3
"""
Delete an archived contest by id, or list archived contests.
Usage: python scripts/delete_game.py <game_id>
       python scripts/delete_game.py --list
From repo root with PYTHONPATH=. or after pip install -e .
"""
import sys
import os

# Allow running from repo root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fortgolf.api.database import SessionLocal, init_db
from fortgolf.api.models import GameRecord


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python scripts/delete_game.py <game_id> | --list", file=sys.stderr)
        sys.exit(1)
    arg = sys.argv[1].strip()
    if not arg:
        print("Error: provide a game id.", file=sys.stderr)
        sys.exit(1)

    init_db()
    db = SessionLocal()
    try:
        if arg == "--list":
            for row in db.query(GameRecord).order_by(GameRecord.created_at.desc()):
                print(f"{row.id}  {row.mode:<11} {row.status:<8} {row.num_players}p  {row.total_holes} holes")
            return
        row = db.query(GameRecord).filter(GameRecord.id == arg).first()
        if not row:
            print(f"No archived game found with id: {arg!r}")
            return
        db.delete(row)
        db.commit()
        print(f"Deleted archived game {arg} ({row.mode}, {row.status}).")
    except Exception as e:
        db.rollback()
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
