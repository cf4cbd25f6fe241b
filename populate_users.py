"""
Bulk-populate the users table from a JSON file.

Run this from the service root:

    (.venv) DATABASE_URL=sqlite:///./users.db python populate_users.py users.json

The file must hold a JSON array of {"name": ..., "email": ...} objects.
With the default in-memory database the rows vanish when the script exits,
so point DATABASE_URL at a real database first.
"""

import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.init_db import init_db, seed_initial_data
from app.db.session import SessionLocal
from app.schemas.user import UserCreate

logger = logging.getLogger("populate_users")

_users_adapter = TypeAdapter(list[UserCreate])


def load_users(path: Path) -> list[UserCreate]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON array, got {type(payload).__name__}")
    return _users_adapter.validate_python(payload)


def main(argv: list[str] | None = None) -> int:
    setup_logging(settings.log_level, settings.log_file)
    argv = sys.argv[1:] if argv is None else argv

    if len(argv) != 1:
        logger.error("Usage: python populate_users.py <users.json>")
        return 2

    source = Path(argv[0])
    if not source.exists():
        logger.error("User file does not exist: %s", source)
        return 1

    try:
        users = load_users(source)
    except (ValueError, ValidationError) as exc:
        logger.error("Invalid user file %s: %s", source, exc)
        return 1

    init_db()
    db = SessionLocal()
    try:
        stored = seed_initial_data(db, users)
    finally:
        db.close()

    logger.info("Read %d users from %s", len(users), source)
    logger.info("Inserted %d users", len(stored))
    return 0


if __name__ == "__main__":
    sys.exit(main())
