"""Domain-level typed models used by services and stores.

Prefer `TypedDict` for lightweight structural typing that maps directly to
the field maps kept in the document store. Keys use the wire names
(camelCase) so a record can be written and returned without renaming.

Each entity has a matching `*Changes` TypedDict with `total=False` for
partial updates: a key that is absent means "leave unchanged", a key that is
present (even with an empty value) means "set to this".
"""
from __future__ import annotations

from typing import TypedDict
from datetime import datetime


class Game(TypedDict):
	id: str
	name: str
	description: str
	modes: str


class GameChanges(TypedDict, total=False):
	name: str
	description: str
	modes: str


class Match(TypedDict):
	id: str
	gameId: str
	playerId: str
	score: int
	timestamp: datetime


class MatchChanges(TypedDict, total=False):
	gameId: str
	playerId: str
	score: int
	timestamp: datetime


class Player(TypedDict):
	id: str
	username: str
	achievements: str
	totalGamesPlayed: int


class PlayerChanges(TypedDict, total=False):
	username: str
	achievements: str
	totalGamesPlayed: int


class Account(TypedDict):
	id: str
	username: str
	passwordHash: str
	role: str


GAME_FIELDS = ("name", "description", "modes")
MATCH_FIELDS = ("gameId", "playerId", "score", "timestamp")
PLAYER_FIELDS = ("username", "achievements", "totalGamesPlayed")
ACCOUNT_FIELDS = ("username", "passwordHash", "role")

ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLE_PLAYER = "player"
ROLES = (ROLE_ADMIN, ROLE_MANAGER, ROLE_PLAYER)


__all__ = [
	"Game",
	"GameChanges",
	"Match",
	"MatchChanges",
	"Player",
	"PlayerChanges",
	"Account",
	"GAME_FIELDS",
	"MATCH_FIELDS",
	"PLAYER_FIELDS",
	"ACCOUNT_FIELDS",
	"ROLE_ADMIN",
	"ROLE_MANAGER",
	"ROLE_PLAYER",
	"ROLES",
]
