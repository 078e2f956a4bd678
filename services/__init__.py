"""Services package: entity business logic sitting between routes and stores.

Each service takes a `stores.DocumentRepository` at construction. The
`get_*_service` functions are FastAPI dependencies building them on top of
the application's document store.
"""

from fastapi import Depends

from stores import DocumentRepository, get_document_repository
from .entity_service import EntityService
from .game_service import GameService
from .match_service import MatchService
from .player_service import PlayerService
from .account_service import AccountService


def get_game_service(repository: DocumentRepository = Depends(get_document_repository)) -> GameService:
	return GameService(repository)


def get_match_service(repository: DocumentRepository = Depends(get_document_repository)) -> MatchService:
	return MatchService(repository)


def get_player_service(repository: DocumentRepository = Depends(get_document_repository)) -> PlayerService:
	return PlayerService(repository)


def get_account_service(repository: DocumentRepository = Depends(get_document_repository)) -> AccountService:
	return AccountService(repository)


__all__ = [
	"EntityService",
	"GameService",
	"MatchService",
	"PlayerService",
	"AccountService",
	"get_game_service",
	"get_match_service",
	"get_player_service",
	"get_account_service",
]
