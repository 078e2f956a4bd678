"""Utility helpers used across the project.

Make commonly used helpers available at the package level for convenience.

Exports:
- time helpers: `now_utc`, `as_utc`, `to_iso`, `parse_iso`
- validation helpers: `ValidationGate`, `ValidatedRequest`, `is_valid_document_id`, `is_valid_username`
- token helpers: `Identity`, `create_access_token`, `decode_access_token`
- response helpers: `success_response`, `error_response`

The auth gates live in `utils.security`; import them from there.
"""

from .time import now_utc, as_utc, to_iso, parse_iso
from .validation import ValidationGate, ValidatedRequest, is_valid_document_id, is_valid_username
from .tokens import Identity, create_access_token, decode_access_token
from .responses import success_response, error_response

__all__ = [
	"now_utc",
	"as_utc",
	"to_iso",
	"parse_iso",
	"ValidationGate",
	"ValidatedRequest",
	"is_valid_document_id",
	"is_valid_username",
	"Identity",
	"create_access_token",
	"decode_access_token",
	"success_response",
	"error_response",
]
