"""Data models used by the application.

Split into:
- `api_models`: Pydantic models used for request validation
- `domain_models`: typed dicts used by services and stored as documents

Import submodules to make them available as `models.api_models`.
"""

from . import api_models, domain_models

from .api_models import (
	RequestSchema,
	GameIdParams,
	MatchIdParams,
	PlayerIdParams,
	GameCreate,
	GameUpdate,
	MatchCreate,
	MatchUpdate,
	PlayerCreate,
	PlayerUpdate,
	TokenRequest,
)

from .domain_models import (
	Game,
	GameChanges,
	Match,
	MatchChanges,
	Player,
	PlayerChanges,
	Account,
	ROLE_ADMIN,
	ROLE_MANAGER,
	ROLE_PLAYER,
	ROLES,
)

__all__ = [
	# submodules
	"api_models",
	"domain_models",
	# api models
	"RequestSchema",
	"GameIdParams",
	"MatchIdParams",
	"PlayerIdParams",
	"GameCreate",
	"GameUpdate",
	"MatchCreate",
	"MatchUpdate",
	"PlayerCreate",
	"PlayerUpdate",
	"TokenRequest",
	# domain models
	"Game",
	"GameChanges",
	"Match",
	"MatchChanges",
	"Player",
	"PlayerChanges",
	"Account",
	"ROLE_ADMIN",
	"ROLE_MANAGER",
	"ROLE_PLAYER",
	"ROLES",
]
