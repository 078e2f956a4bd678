"""Pydantic request models for the FastAPI endpoints.

Keep transport concerns (validation, messages) here and keep business/domain
types in `models.domain_models`.

Each schema may declare `error_messages`, keyed by ``(field, category)``,
to replace pydantic's generic wording. Categories are assigned by
`utils.validation.error_category`: ``required``, ``empty``, ``min``, ``type``
and ``unknown``.

Update schemas leave every field defaulting to ``None`` without declaring it
optional: omitting a field is allowed, sending an explicit ``null`` is a type
error. Services read them with ``model_dump(exclude_unset=True)``.
"""
from __future__ import annotations

from typing import Annotated, ClassVar
from datetime import datetime

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from utils.time import as_utc, now_utc
from utils.validation import check_document_id


NonEmptyStr = Annotated[str, Field(min_length=1)]
# strict: JSON booleans are not numbers
NonNegativeInt = Annotated[int, Field(ge=0, strict=True)]
DocumentId = Annotated[str, Field(min_length=1), AfterValidator(check_document_id)]
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class RequestSchema(BaseModel):
	model_config = ConfigDict(extra="forbid")

	error_messages: ClassVar[dict[tuple[str, str], str]] = {}


# --- Path parameters ---

class GameIdParams(RequestSchema):
	id: DocumentId

	error_messages = {
		("id", "required"): "Game ID is required",
		("id", "empty"): "Game ID cannot be empty",
		("id", "type"): "Game ID is not a valid document ID",
	}


class MatchIdParams(RequestSchema):
	id: DocumentId

	error_messages = {
		("id", "required"): "Match ID is required",
		("id", "empty"): "Match ID cannot be empty",
		("id", "type"): "Match ID is not a valid document ID",
	}


class PlayerIdParams(RequestSchema):
	id: DocumentId

	error_messages = {
		("id", "required"): "Player ID is required",
		("id", "empty"): "Player ID cannot be empty",
		("id", "type"): "Player ID is not a valid document ID",
	}


# --- Games ---

_GAME_MESSAGES = {
	("name", "required"): "Game name is required",
	("name", "empty"): "Game name cannot be empty",
	("name", "type"): "Game name must be a string",
	("description", "required"): "Game description is required",
	("description", "empty"): "Game description cannot be empty",
	("description", "type"): "Game description must be a string",
	("modes", "required"): "Game modes are required",
	("modes", "empty"): "Game modes cannot be empty",
	("modes", "type"): "Game modes must be a string",
}


class GameCreate(RequestSchema):
	name: NonEmptyStr
	description: NonEmptyStr
	modes: NonEmptyStr

	error_messages = _GAME_MESSAGES


class GameUpdate(RequestSchema):
	name: NonEmptyStr = None
	description: NonEmptyStr = None
	modes: NonEmptyStr = None

	error_messages = _GAME_MESSAGES


# --- Matches ---

_MATCH_MESSAGES = {
	("gameId", "required"): "Game ID is required",
	("gameId", "empty"): "Game ID cannot be empty",
	("gameId", "type"): "Game ID must be a string",
	("playerId", "required"): "Player ID is required",
	("playerId", "empty"): "Player ID cannot be empty",
	("playerId", "type"): "Player ID must be a string",
	("score", "required"): "Score is required",
	("score", "type"): "Score must be a number",
	("score", "min"): "Score must be 0 or more",
	("timestamp", "type"): "Timestamp must be a valid date",
}


class MatchCreate(RequestSchema):
	gameId: NonEmptyStr
	playerId: NonEmptyStr
	score: NonNegativeInt
	timestamp: UtcDatetime = Field(default_factory=now_utc)

	error_messages = _MATCH_MESSAGES


class MatchUpdate(RequestSchema):
	gameId: NonEmptyStr = None
	playerId: NonEmptyStr = None
	score: NonNegativeInt = None
	timestamp: UtcDatetime = None

	error_messages = _MATCH_MESSAGES


# --- Players ---

_PLAYER_MESSAGES = {
	("username", "required"): "Username is required",
	("username", "empty"): "Username cannot be empty",
	("username", "type"): "Username must be a string",
	("achievements", "type"): "Achievements must be a string",
	("totalGamesPlayed", "type"): "Total games played must be a number",
	("totalGamesPlayed", "min"): "Total games played must be 0 or more",
}


class PlayerCreate(RequestSchema):
	username: NonEmptyStr
	achievements: str = ""
	totalGamesPlayed: NonNegativeInt = 0

	error_messages = _PLAYER_MESSAGES


class PlayerUpdate(RequestSchema):
	username: NonEmptyStr = None
	achievements: str = None
	totalGamesPlayed: NonNegativeInt = None

	error_messages = _PLAYER_MESSAGES


# --- Auth ---

class TokenRequest(RequestSchema):
	username: NonEmptyStr
	password: NonEmptyStr

	error_messages = {
		("username", "required"): "Username is required",
		("username", "empty"): "Username cannot be empty",
		("password", "required"): "Password is required",
		("password", "empty"): "Password cannot be empty",
	}


__all__ = [
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
]
