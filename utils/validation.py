"""Validation helpers and the request validation gate.

`ValidationGate` is a FastAPI dependency bound to pydantic schemas for the
path parameters and/or JSON body of a route. It runs after the auth
dependencies and before the route function, and it reports every problem it
finds in one `RequestValidationFailed`.
"""
from dataclasses import dataclass
from typing import Optional
import regex as re
import logging

from fastapi import Request
from pydantic import BaseModel, ValidationError

from errors import RequestValidationFailed

logger = logging.getLogger(__name__)


# Firestore-compatible document ids: no slashes, not "." or "..", not __reserved__.
MAX_DOCUMENT_ID_BYTES = 1500
RESERVED_ID_RE = re.compile(r"^__.*__$")

# Account usernames: Unicode letters/numbers plus a few separators.
VALID_USERNAME_RE = re.compile(r"^[\p{L}\p{N}_.\-]{2,64}$", flags=re.UNICODE)


def is_valid_document_id(s: str) -> bool:
	if not s or s in (".", ".."):
		return False
	if "/" in s or RESERVED_ID_RE.match(s):
		return False
	return len(s.encode("utf-8")) <= MAX_DOCUMENT_ID_BYTES


def check_document_id(s: str) -> str:
	"""Pydantic validator wrapper around `is_valid_document_id`."""
	if not is_valid_document_id(s):
		raise ValueError("not a valid document ID")
	return s


def is_valid_username(s: str) -> bool:
	return bool(s) and bool(VALID_USERNAME_RE.match(s))


_CATEGORIES = {
	"missing": "required",
	"string_too_short": "empty",
	"greater_than_equal": "min",
	"extra_forbidden": "unknown",
}


def error_category(error_type: str) -> str:
	"""Collapse pydantic error types into the categories schemas key messages by."""
	return _CATEGORIES.get(error_type, "type")


def format_errors(schema: type[BaseModel], exc: ValidationError, location: str) -> list[dict]:
	"""Turn a pydantic ValidationError into field-level error entries."""
	messages = getattr(schema, "error_messages", {})
	errors = []
	for err in exc.errors():
		field = ".".join(str(part) for part in err["loc"]) or None
		category = error_category(err["type"])
		message = messages.get((field, category))
		if message is None:
			if err["type"] == "json_invalid":
				message = "Request body must be valid JSON"
			elif err["type"] == "model_type":
				message = "Request body must be a JSON object"
			elif category == "unknown":
				message = f'"{field}" is not allowed'
			else:
				message = f"{field}: {err['msg']}" if field else err["msg"]
		errors.append({"location": location, "field": field, "message": message})
	return errors


@dataclass
class ValidatedRequest:
	body: Optional[BaseModel] = None
	params: Optional[BaseModel] = None


class ValidationGate:
	"""Dependency validating path params and body before a route runs.

	Usage:
		@router.put("/{id}")
		async def update(req: ValidatedRequest = Depends(ValidationGate(body=GameUpdate, params=GameIdParams))):
			...
	"""

	def __init__(self, *, body: Optional[type[BaseModel]] = None, params: Optional[type[BaseModel]] = None):
		self.body = body
		self.params = params

	async def __call__(self, request: Request) -> ValidatedRequest:
		errors: list[dict] = []
		validated = ValidatedRequest()

		if self.params is not None:
			try:
				validated.params = self.params.model_validate(dict(request.path_params))
			except ValidationError as exc:
				errors.extend(format_errors(self.params, exc, "params"))

		if self.body is not None:
			raw = await request.body()
			try:
				validated.body = self.body.model_validate_json(raw or b"{}")
			except ValidationError as exc:
				errors.extend(format_errors(self.body, exc, "body"))

		if errors:
			logger.info(f"Rejected {request.method} {request.url.path}: {len(errors)} validation error(s)")
			raise RequestValidationFailed(errors)
		return validated
