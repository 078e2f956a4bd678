"""Generic CRUD service mapping typed entities to and from documents."""
import copy
import logging
from typing import Any, Generic, Mapping, TypeVar

from errors import NotFound
from stores import Document, DocumentRepository

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Mapping[str, Any])


class EntityService(Generic[EntityT]):
    """Templated service, instantiated once per entity type.

    Subclasses set:

    * ``collection`` -- document store collection name
    * ``fields`` -- the entity's fields, excluding ``id``
    * ``not_found`` -- the :class:`~errors.NotFound` subclass to raise

    Rules
    -----
    * ``get_by_id`` is the single not-found check; ``update`` and ``delete``
      go through it, so every operation on a missing id raises ``not_found``.
    * ``update`` is read-modify-write. Only keys present in ``changes``
      overwrite the stored entity; the merged entity is persisted in full and
      returned.
    * Every returned entity is a deep copy.
    * Input is trusted to be validated already. Nothing is coerced; unknown
      keys are dropped.
    * Concurrent updates of one id are last-write-wins: there is no version
      check between the read and the write.
    """

    collection: str
    fields: tuple[str, ...]
    not_found: type[NotFound] = NotFound

    def __init__(self, repository: DocumentRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def list_all(self) -> list[EntityT]:
        documents = await self._repo.get_all(self.collection)
        return [copy.deepcopy(self._to_entity(doc)) for doc in documents]

    async def create(self, data: Mapping[str, Any]) -> EntityT:
        """Persist a new entity and return it with its store-assigned id."""
        fields = self._pick_fields(data)
        for name, value in self.creation_defaults().items():
            fields.setdefault(name, value)
        entity_id = await self._repo.create(self.collection, fields)
        return copy.deepcopy(self._to_entity(Document(id=entity_id, fields=fields)))

    async def get_by_id(self, entity_id: str) -> EntityT:
        """Return the entity.

        Raises:
            NotFound: (the subclass in ``not_found``) if no document exists.
        """
        document = await self._repo.get_by_id(self.collection, entity_id)
        if document is None:
            raise self.not_found(entity_id)
        return copy.deepcopy(self._to_entity(document))

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> EntityT:
        """Merge the provided fields into the stored entity and save it."""
        entity = dict(await self.get_by_id(entity_id))
        entity.update(self._pick_fields(changes))
        await self._repo.update(self.collection, entity_id, self._to_fields(entity))
        return copy.deepcopy(entity)

    async def delete(self, entity_id: str) -> None:
        await self.get_by_id(entity_id)
        await self._repo.delete(self.collection, entity_id)

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def creation_defaults(self) -> dict[str, Any]:
        """Values filled in by ``create`` for fields the caller left out."""
        return {}

    def _pick_fields(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {name: data[name] for name in self.fields if name in data}

    def _to_entity(self, document: Document) -> EntityT:
        entity = {"id": document.id}
        entity.update(self._pick_fields(document.fields))
        return entity  # type: ignore[return-value]

    def _to_fields(self, entity: Mapping[str, Any]) -> dict[str, Any]:
        return {name: value for name, value in entity.items() if name != "id"}
