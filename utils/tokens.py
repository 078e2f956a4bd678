"""Bearer token helpers (signed JWTs).

Tokens carry the account username as `sub` and its role as `role`. They are
self-contained, so verifying one never touches the document store.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from jose import JWTError, jwt

import config
from models.domain_models import ROLES
from utils.time import now_utc


@dataclass(frozen=True)
class Identity:
	"""The authenticated caller attached to a request."""
	subject: str
	role: str


def create_access_token(subject: str, role: str, *, expires_minutes: Optional[int] = None) -> str:
	minutes = config.ACCESS_TOKEN_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
	expire = now_utc() + timedelta(minutes=minutes)
	payload = {"sub": subject, "role": role, "exp": expire}
	return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[Identity]:
	"""Return the token's identity, or None if it is invalid, expired or malformed."""
	try:
		payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
	except JWTError:
		return None
	subject = payload.get("sub")
	role = payload.get("role")
	if not isinstance(subject, str) or not subject or role not in ROLES:
		return None
	return Identity(subject=subject, role=role)
