from fastapi import APIRouter, Depends
import logging

from models import TokenRequest
from services import AccountService, get_account_service
from utils.responses import success_response
from utils.security import require_roles
from utils.tokens import Identity
from utils.validation import ValidationGate, ValidatedRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token")
async def request_token(
	req: ValidatedRequest = Depends(ValidationGate(body=TokenRequest)),
	accounts: AccountService = Depends(get_account_service),
):
	"""Exchange account credentials for a bearer token."""
	token = await accounts.issue_token(req.body.username, req.body.password)
	logger.info(f"Issued token for {req.body.username}")
	return success_response(token, "Token issued successfully")


@router.get("/me")
async def get_current_account(
	identity: Identity = Depends(require_roles()),
	accounts: AccountService = Depends(get_account_service),
):
	"""The signed-in account. 404 if it was removed after the token was issued."""
	account = await accounts.get(identity.subject)
	return success_response(
		{"username": account["username"], "role": account["role"]},
		"Account retrieved successfully",
	)
