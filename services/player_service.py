"""Business logic for players."""
from typing import Any

from errors import PlayerNotFound
from models.domain_models import PLAYER_FIELDS, Player
from .entity_service import EntityService


class PlayerService(EntityService[Player]):
    collection = "players"
    fields = PLAYER_FIELDS
    not_found = PlayerNotFound

    def creation_defaults(self) -> dict[str, Any]:
        return {"achievements": "", "totalGamesPlayed": 0}
