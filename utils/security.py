"""Authentication and authorization gates for FastAPI routes.

Both are dependencies meant to be listed in a route's `dependencies=[...]`
so they run before the validation gate and the route body:

	@router.delete("/{id}", dependencies=[Depends(require_roles(ROLE_ADMIN))])
"""
from typing import Optional
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from errors import Forbidden, Unauthorized
from models.domain_models import ROLES
from .tokens import Identity, decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def authenticate(
	request: Request,
	credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
	"""Verify the bearer token and attach the caller to `request.state.identity`.

	Raises:
		Unauthorized: If the header is missing or the token does not verify.
	"""
	if credentials is None:
		raise Unauthorized("Not authenticated")
	identity = decode_access_token(credentials.credentials)
	if identity is None:
		logger.info(f"Rejected invalid bearer token on {request.method} {request.url.path}")
		raise Unauthorized("Invalid or expired token")
	request.state.identity = identity
	return identity


def require_roles(*roles: str):
	"""Build a dependency allowing only callers whose role is in `roles`.

	With no roles given, any authenticated caller is allowed.
	"""
	allowed = frozenset(roles or ROLES)

	async def authorize(identity: Identity = Depends(authenticate)) -> Identity:
		if identity.role not in allowed:
			logger.info(f"Forbidden: {identity.subject} ({identity.role}) needs one of {sorted(allowed)}")
			raise Forbidden("Forbidden: insufficient role")
		return identity

	return authorize
