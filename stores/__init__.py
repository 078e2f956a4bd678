# Abstractions
from .document_store import Document, DocumentStore
from .document_repository import DocumentRepository

# Concrete implementations
from .sqlite_document_store import SqliteDocumentStore
from .firestore_document_store import FirestoreDocumentStore

from fastapi import Request
import config

__all__ = [
    "Document",
    "DocumentStore",
    "DocumentRepository",
    "SqliteDocumentStore",
    "FirestoreDocumentStore",
    "create_document_store",
    "get_document_store",
    "get_document_repository",
]


def create_document_store(backend: str | None = None) -> DocumentStore:
    """Build (but do not init) the store selected by `backend` or config.

    The process entry point owns the returned store: it must await `init()`
    before serving and `close()` on shutdown.
    """
    backend = (backend or config.STORE_BACKEND).lower()
    if backend == "sqlite":
        return SqliteDocumentStore(config.DB_PATH)
    if backend == "firestore":
        return FirestoreDocumentStore(config.FIRESTORE_PROJECT)
    raise ValueError(f"Unknown document store backend: {backend}")


def get_document_store(request: Request) -> DocumentStore:
    """FastAPI dependency: the store the running app was started with."""
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        raise RuntimeError("Document store not configured on the application")
    return store


def get_document_repository(request: Request) -> DocumentRepository:
    return DocumentRepository(get_document_store(request))
