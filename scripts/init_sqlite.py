#!/usr/bin/env python3
"""Initialize the sqlite document store file from db/schema.sql."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import config
from db import init_db, SCHEMA_PATH


if __name__ == "__main__":
    db_path = sys.argv[1] if len(sys.argv) > 1 else config.DB_PATH
    schema_path = sys.argv[2] if len(sys.argv) > 2 else str(SCHEMA_PATH)
    try:
        asyncio.run(init_db(db_path, schema_path))
    except (OSError, ValueError) as e:
        print(f"[INIT] ✗ Error: Failed to initialize database: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"[INIT] ✓ Database initialized at {db_path}")
