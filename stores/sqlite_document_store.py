import json
import secrets
import string
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Optional
import aiosqlite
import logging

from db import connect, apply_schema
from errors import StoreUnavailable
from utils.time import now_utc, to_iso, parse_iso
from .document_store import Document, DocumentStore

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits
_ID_LENGTH = 20
_DATETIME_TAG = "$datetime"


def generate_document_id() -> str:
    """20 random alphanumerics, the same shape as Firestore auto-ids."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def _encode_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return {_DATETIME_TAG: to_iso(value)}
    raise TypeError(f"Unsupported document value type: {type(value).__name__}")


def _decode_object(obj: dict) -> Any:
    if len(obj) == 1 and _DATETIME_TAG in obj:
        return parse_iso(obj[_DATETIME_TAG])
    return obj


def dumps_fields(fields: dict[str, Any]) -> str:
    """Serialize a field map to JSON, tagging datetimes so they round-trip."""
    return json.dumps(fields, default=_encode_value)


def loads_fields(data: str) -> dict[str, Any]:
    return json.loads(data, object_hook=_decode_object)


@contextmanager
def _translate_errors(operation: str, collection: str):
    try:
        yield
    except (aiosqlite.Error, ValueError) as exc:
        logger.error(f"[STORE] {operation} on {collection} failed: {exc}")
        raise StoreUnavailable(f"Document store {operation} failed") from exc


class SqliteDocumentStore(DocumentStore):
    """Document store kept in a single SQLite table (see db/schema.sql)."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.db: Optional[aiosqlite.Connection] = None
        logger.info(f"[STORE] SqliteDocumentStore initialized with db_path: {db_path}")

    async def init(self) -> None:
        """Open the connection and make sure the documents table exists."""
        if self.db is not None:
            return
        with _translate_errors("init", "*"):
            self.db = await connect(self.db_path)
            await apply_schema(self.db)
        logger.info(f"[STORE] Database connection established to {self.db_path}")

    async def close(self) -> None:
        if self.db is not None:
            await self.db.close()
            self.db = None

    def _conn(self) -> aiosqlite.Connection:
        if self.db is None:
            raise StoreUnavailable("Document store not initialized; call init() first")
        return self.db

    # -------------------------------------------------
    # Collection operations
    # -------------------------------------------------

    async def add(self, collection: str, fields: dict[str, Any]) -> str:
        conn = self._conn()
        document_id = generate_document_id()
        now = to_iso(now_utc())
        with _translate_errors("add", collection):
            await conn.execute(
                """
                INSERT INTO documents (collection, doc_id, data, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (collection, document_id, dumps_fields(fields), now, now),
            )
            await conn.commit()
        logger.debug(f"[STORE] Added {collection}/{document_id}")
        return document_id

    async def get_all(self, collection: str) -> list[Document]:
        conn = self._conn()
        with _translate_errors("get_all", collection):
            async with conn.execute(
                "SELECT doc_id, data FROM documents WHERE collection = ? ORDER BY rowid",
                (collection,),
            ) as cursor:
                rows = await cursor.fetchall()
        return [Document(id=row["doc_id"], fields=loads_fields(row["data"])) for row in rows]

    async def get_by_id(self, collection: str, document_id: str) -> Optional[Document]:
        conn = self._conn()
        with _translate_errors("get_by_id", collection):
            async with conn.execute(
                "SELECT doc_id, data FROM documents WHERE collection = ? AND doc_id = ?",
                (collection, document_id),
            ) as cursor:
                row = await cursor.fetchone()
        if row is None:
            return None
        return Document(id=row["doc_id"], fields=loads_fields(row["data"]))

    async def set(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        conn = self._conn()
        now = to_iso(now_utc())
        with _translate_errors("set", collection):
            await conn.execute(
                """
                INSERT INTO documents (collection, doc_id, data, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT (collection, doc_id)
                DO UPDATE SET data = excluded.data, updated_at = excluded.updated_at
                """,
                (collection, document_id, dumps_fields(fields), now, now),
            )
            await conn.commit()
        logger.debug(f"[STORE] Set {collection}/{document_id}")

    async def delete(self, collection: str, document_id: str) -> None:
        conn = self._conn()
        with _translate_errors("delete", collection):
            await conn.execute(
                "DELETE FROM documents WHERE collection = ? AND doc_id = ?",
                (collection, document_id),
            )
            await conn.commit()
        logger.debug(f"[STORE] Deleted {collection}/{document_id}")
