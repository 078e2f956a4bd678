from fastapi import APIRouter, Depends
import logging

from models import PlayerCreate, PlayerUpdate, PlayerIdParams, ROLE_ADMIN, ROLE_MANAGER
from services import PlayerService, get_player_service
from utils.responses import success_response
from utils.security import require_roles
from utils.validation import ValidationGate, ValidatedRequest

logger = logging.getLogger(__name__)

# Player records are only visible to staff accounts.
router = APIRouter(dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_MANAGER))])


@router.get("")
async def get_all_players(service: PlayerService = Depends(get_player_service)):
	players = await service.list_all()
	return success_response(players, "Players retrieved successfully")


@router.get("/{id}")
async def get_player_by_id(
	req: ValidatedRequest = Depends(ValidationGate(params=PlayerIdParams)),
	service: PlayerService = Depends(get_player_service),
):
	player = await service.get_by_id(req.params.id)
	return success_response(player, "Player retrieved successfully")


@router.post("", status_code=201)
async def create_player(
	req: ValidatedRequest = Depends(ValidationGate(body=PlayerCreate)),
	service: PlayerService = Depends(get_player_service),
):
	player = await service.create(req.body.model_dump())
	return success_response(player, "Player created successfully", status_code=201)


@router.put("/{id}")
async def update_player(
	req: ValidatedRequest = Depends(ValidationGate(body=PlayerUpdate, params=PlayerIdParams)),
	service: PlayerService = Depends(get_player_service),
):
	player = await service.update(req.params.id, req.body.model_dump(exclude_unset=True))
	return success_response(player, "Player updated successfully")


@router.delete("/{id}", dependencies=[Depends(require_roles(ROLE_ADMIN))])
async def delete_player(
	req: ValidatedRequest = Depends(ValidationGate(params=PlayerIdParams)),
	service: PlayerService = Depends(get_player_service),
):
	await service.delete(req.params.id)
	return success_response(None, "Player successfully deleted")
