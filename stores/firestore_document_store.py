from contextlib import contextmanager
from typing import Any, Optional
import logging

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore

from errors import StoreUnavailable
from .document_store import Document, DocumentStore

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str, collection: str):
    try:
        yield
    except GoogleAPIError as exc:
        logger.error(f"[STORE] Firestore {operation} on {collection} failed: {exc}")
        raise StoreUnavailable(f"Document store {operation} failed") from exc


class FirestoreDocumentStore(DocumentStore):
    """Document store backed by Google Cloud Firestore's async client.

    Credentials come from the environment (GOOGLE_APPLICATION_CREDENTIALS or
    the metadata server). A pre-built client may be passed in instead; it is
    left open on close() since the caller owns it.
    """

    def __init__(self, project: Optional[str] = None, *, client: Optional[firestore.AsyncClient] = None):
        self.project = project
        self.client = client
        self._owns_client = False
        logger.info(f"[STORE] FirestoreDocumentStore initialized for project: {project or '<default>'}")

    async def init(self) -> None:
        if self.client is None:
            self.client = firestore.AsyncClient(project=self.project)
            self._owns_client = True

    async def close(self) -> None:
        """Drop the client, shutting its gRPC channel if this store created it."""
        client, self.client = self.client, None
        if client is None or not self._owns_client:
            return
        self._owns_client = False
        # AsyncClient has no close(); the channel lives on its lazily built GAPIC client.
        api = client._firestore_api_internal
        if api is not None:
            await api.transport.close()
        logger.info("[STORE] Firestore client closed")

    def _collection(self, collection: str):
        if self.client is None:
            raise StoreUnavailable("Document store not initialized; call init() first")
        return self.client.collection(collection)

    # -------------------------------------------------
    # Collection operations
    # -------------------------------------------------

    async def add(self, collection: str, fields: dict[str, Any]) -> str:
        with _translate_errors("add", collection):
            _, ref = await self._collection(collection).add(fields)
        return ref.id

    async def get_all(self, collection: str) -> list[Document]:
        documents = []
        with _translate_errors("get_all", collection):
            async for snapshot in self._collection(collection).stream():
                documents.append(Document(id=snapshot.id, fields=snapshot.to_dict() or {}))
        return documents

    async def get_by_id(self, collection: str, document_id: str) -> Optional[Document]:
        with _translate_errors("get_by_id", collection):
            snapshot = await self._collection(collection).document(document_id).get()
        if not snapshot.exists:
            return None
        return Document(id=snapshot.id, fields=snapshot.to_dict() or {})

    async def set(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        with _translate_errors("set", collection):
            await self._collection(collection).document(document_id).set(fields)

    async def delete(self, collection: str, document_id: str) -> None:
        with _translate_errors("delete", collection):
            await self._collection(collection).document(document_id).delete()
