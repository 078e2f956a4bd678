"""Business logic for matches."""
from typing import Any

from errors import MatchNotFound
from models.domain_models import MATCH_FIELDS, Match
from utils.time import now_utc
from .entity_service import EntityService


class MatchService(EntityService[Match]):
    """CRUD over the ``matches`` collection.

    ``gameId`` and ``playerId`` are stored as given; the referenced game and
    player are not looked up.
    """

    collection = "matches"
    fields = MATCH_FIELDS
    not_found = MatchNotFound

    def creation_defaults(self) -> dict[str, Any]:
        return {"timestamp": now_utc()}
