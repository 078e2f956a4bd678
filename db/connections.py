from pathlib import Path
from typing import Dict, Optional
import aiosqlite


SCHEMA_PATH = Path(__file__).parent / "schema.sql"


async def connect(db_path: str, pragmas: Optional[Dict[str, str]] = None) -> aiosqlite.Connection:
    """Open an aiosqlite connection and apply sensible pragmas.

    - Sets `row_factory` to `aiosqlite.Row` for named access.
    - Uses DELETE journal mode (WAL misbehaves on some mounted volumes).
    - Applies any additional PRAGMA settings supplied in `pragmas`.

    Returns an open connection; caller is responsible for closing it.
    """
    conn = await aiosqlite.connect(db_path, timeout=30.0)
    conn.row_factory = aiosqlite.Row

    await conn.execute("PRAGMA journal_mode=DELETE")
    if pragmas:
        for k, v in pragmas.items():
            await conn.execute(f"PRAGMA {k} = {v}")

    await conn.commit()
    return conn


def _split_statements(sql: str) -> list[str]:
    """Strip SQL comments and split a script into individual statements."""
    statements = []
    current = []
    for line in sql.split('\n'):
        if '--' in line:
            line = line[:line.index('--')]
        line = line.strip()
        if line:
            current.append(line)
            if line.endswith(';'):
                stmt = ' '.join(current).rstrip(';').strip()
                if stmt:
                    statements.append(stmt)
                current = []
    return statements


async def apply_schema(conn: aiosqlite.Connection, schema_path: Optional[str] = None) -> None:
    """Execute the schema against an open connection.

    The bundled schema only uses `IF NOT EXISTS`, so this is safe to run on
    every startup.
    """
    schema_file = Path(schema_path) if schema_path else SCHEMA_PATH
    if not schema_file.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_file}")

    for statement in _split_statements(schema_file.read_text()):
        await conn.execute(statement)
    await conn.commit()


async def init_db(db_path: str, schema_path: Optional[str] = None) -> None:
    """Create (or upgrade) the document store file at `db_path`.

    Missing parent directories are created. Without `schema_path` the bundled
    `db/schema.sql` is used.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = await connect(db_path)
    try:
        await apply_schema(conn, schema_path)
    finally:
        await conn.close()
