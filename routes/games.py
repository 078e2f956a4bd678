from fastapi import APIRouter, Depends
import logging

from models import GameCreate, GameUpdate, GameIdParams, ROLE_ADMIN, ROLE_MANAGER
from services import GameService, get_game_service
from utils.responses import success_response
from utils.security import require_roles
from utils.validation import ValidationGate, ValidatedRequest

logger = logging.getLogger(__name__)

router = APIRouter()

EDITORS = (ROLE_ADMIN, ROLE_MANAGER)


@router.get("")
async def get_all_games(service: GameService = Depends(get_game_service)):
	games = await service.list_all()
	return success_response(games, "Games retrieved successfully")


@router.get("/{id}")
async def get_game_by_id(
	req: ValidatedRequest = Depends(ValidationGate(params=GameIdParams)),
	service: GameService = Depends(get_game_service),
):
	game = await service.get_by_id(req.params.id)
	return success_response(game, "Game retrieved successfully")


@router.post("", status_code=201, dependencies=[Depends(require_roles(*EDITORS))])
async def create_game(
	req: ValidatedRequest = Depends(ValidationGate(body=GameCreate)),
	service: GameService = Depends(get_game_service),
):
	game = await service.create(req.body.model_dump())
	return success_response(game, "Game created successfully", status_code=201)


@router.put("/{id}", dependencies=[Depends(require_roles(*EDITORS))])
async def update_game(
	req: ValidatedRequest = Depends(ValidationGate(body=GameUpdate, params=GameIdParams)),
	service: GameService = Depends(get_game_service),
):
	game = await service.update(req.params.id, req.body.model_dump(exclude_unset=True))
	return success_response(game, "Game updated successfully")


@router.delete("/{id}", dependencies=[Depends(require_roles(ROLE_ADMIN))])
async def delete_game(
	req: ValidatedRequest = Depends(ValidationGate(params=GameIdParams)),
	service: GameService = Depends(get_game_service),
):
	await service.delete(req.params.id)
	return success_response(None, "Game successfully deleted")
