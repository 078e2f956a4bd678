from dataclasses import dataclass, field
from typing import Any, Optional
from abc import ABC, abstractmethod


@dataclass(frozen=True)
class Document:
    """A raw document: the store-generated id plus its untyped field map."""
    id: str
    fields: dict[str, Any] = field(default_factory=dict)


# =========================
# DocumentStore Interface
# =========================

class DocumentStore(ABC):
    """
    Narrow client interface over a schema-less document store.

    Invariants:
    - Documents are addressed by (collection, id)
    - Ids are generated by the store on `add`
    - `set` replaces the whole document (creating it if absent)
    - Transport failures raise StoreError subclasses; nothing is retried
    """

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------

    async def init(self) -> None:
        """Open connections. Call this after construction."""

    async def close(self) -> None:
        """Release connections."""

    # -------------------------------------------------
    # Collection operations
    # -------------------------------------------------

    @abstractmethod
    async def add(self, collection: str, fields: dict[str, Any]) -> str:
        """Write a new document with an auto-generated id and return the id."""

    @abstractmethod
    async def get_all(self, collection: str) -> list[Document]:
        """Return every document in `collection`, in store-defined order."""

    @abstractmethod
    async def get_by_id(self, collection: str, document_id: str) -> Optional[Document]:
        """Return the document, or None if it does not exist."""

    @abstractmethod
    async def set(self, collection: str, document_id: str, fields: dict[str, Any]) -> None:
        """Replace the document's fields entirely."""

    @abstractmethod
    async def delete(self, collection: str, document_id: str) -> None:
        """Delete the document. Deleting a missing document is not an error."""
