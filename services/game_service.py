"""Business logic for games."""
from errors import GameNotFound
from models.domain_models import GAME_FIELDS, Game
from .entity_service import EntityService


class GameService(EntityService[Game]):
    """CRUD over the ``games`` collection.

    ``name``, ``description`` and ``modes`` are all required on create and
    individually optional on update.
    """

    collection = "games"
    fields = GAME_FIELDS
    not_found = GameNotFound
