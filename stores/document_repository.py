"""Generic document repository shared by every entity service."""
from typing import Any, Optional
import logging

from .document_store import Document, DocumentStore

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Translates CRUD calls for a named collection into store operations.

    The repository returns raw documents and does no merging, retrying or
    not-found handling: an absent document comes back as ``None`` and store
    failures propagate to the caller unchanged.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def create(self, collection: str, fields: dict[str, Any]) -> str:
        """Write a new document and return its generated id."""
        document_id = await self._store.add(collection, fields)
        logger.info(f"Created document {collection}/{document_id}")
        return document_id

    async def get_all(self, collection: str) -> list[Document]:
        return await self._store.get_all(collection)

    async def get_by_id(self, collection: str, document_id: str) -> Optional[Document]:
        return await self._store.get_by_id(collection, document_id)

    async def update(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        """Replace the document with exactly `fields`."""
        await self._store.set(collection, document_id, fields)
        logger.info(f"Updated document {collection}/{document_id}")

    async def delete(self, collection: str, document_id: str) -> None:
        await self._store.delete(collection, document_id)
        logger.info(f"Deleted document {collection}/{document_id}")
