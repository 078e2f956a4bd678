from fastapi import APIRouter, Depends
import logging

from models import MatchCreate, MatchUpdate, MatchIdParams, ROLE_ADMIN, ROLE_MANAGER
from services import MatchService, get_match_service
from utils.responses import success_response
from utils.security import require_roles
from utils.validation import ValidationGate, ValidatedRequest

logger = logging.getLogger(__name__)

# Every match route needs a signed-in caller; any role may read and record matches.
router = APIRouter(dependencies=[Depends(require_roles())])


@router.get("")
async def get_all_matches(service: MatchService = Depends(get_match_service)):
	matches = await service.list_all()
	return success_response(matches, "Matches retrieved successfully")


@router.get("/{id}")
async def get_match_by_id(
	req: ValidatedRequest = Depends(ValidationGate(params=MatchIdParams)),
	service: MatchService = Depends(get_match_service),
):
	match = await service.get_by_id(req.params.id)
	return success_response(match, "Match retrieved successfully")


@router.post("", status_code=201)
async def create_match(
	req: ValidatedRequest = Depends(ValidationGate(body=MatchCreate)),
	service: MatchService = Depends(get_match_service),
):
	match = await service.create(req.body.model_dump())
	return success_response(match, "Match created successfully", status_code=201)


@router.put("/{id}")
async def update_match(
	req: ValidatedRequest = Depends(ValidationGate(body=MatchUpdate, params=MatchIdParams)),
	service: MatchService = Depends(get_match_service),
):
	match = await service.update(req.params.id, req.body.model_dump(exclude_unset=True))
	return success_response(match, "Match updated successfully")


@router.delete("/{id}", dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_MANAGER))])
async def delete_match(
	req: ValidatedRequest = Depends(ValidationGate(params=MatchIdParams)),
	service: MatchService = Depends(get_match_service),
):
	await service.delete(req.params.id)
	return success_response(None, "Match successfully deleted")
