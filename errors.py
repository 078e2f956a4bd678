"""
Shared exception definitions for the request pipeline.

Every exception carries an `ErrorKind` so the central handler can map it to a
status code without knowing the concrete class.

Hierarchy:
- ServiceError (base for everything the API reports deliberately)
  - RequestValidationFailed
  - Unauthorized
  - Forbidden
  - NotFound
    - GameNotFound, MatchNotFound, PlayerNotFound, AccountNotFound
  - AccountAlreadyExists
  - StoreError (transport/availability problems in the document store)
    - StoreUnavailable
"""
from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORE = "store"


# =========================
# Base exception
# =========================

class ServiceError(Exception):
    """Base exception for all errors surfaced to API callers."""
    kind: ErrorKind = ErrorKind.STORE
    retryable: bool = False

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


# =========================
# Request gates
# =========================

class RequestValidationFailed(ServiceError):
    """Raised by the validation gate. `errors` lists every problem found."""
    kind = ErrorKind.VALIDATION

    def __init__(self, errors: list[dict]):
        messages = ", ".join(e["message"] for e in errors)
        super().__init__(f"Validation error: {messages}")
        self.errors = errors


class Unauthorized(ServiceError):
    kind = ErrorKind.UNAUTHORIZED


class Forbidden(ServiceError):
    kind = ErrorKind.FORBIDDEN


# =========================
# Entity lookups
# =========================

class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND
    entity = "Document"

    def __init__(self, entity_id: str):
        super().__init__(f"{self.entity} with ID {entity_id} not found")
        self.entity_id = entity_id


class GameNotFound(NotFound):
    entity = "Game"


class MatchNotFound(NotFound):
    entity = "Match"


class PlayerNotFound(NotFound):
    entity = "Player"


class AccountNotFound(NotFound):
    entity = "Account"


class AccountAlreadyExists(ServiceError):
    kind = ErrorKind.CONFLICT


# =========================
# Document store
# =========================

class StoreError(ServiceError):
    """Base exception for document store failures. Never retried here."""
    kind = ErrorKind.STORE


class StoreUnavailable(StoreError):
    """The store could not be reached or rejected the operation."""
