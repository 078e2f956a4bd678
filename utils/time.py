"""Time utilities: timezone-aware helpers and ISO formatting/parsing.

These helpers keep code that deals with timestamps consistent across modules.
"""
from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
	"""Return current UTC datetime with tzinfo set."""
	return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
	"""Attach UTC to naive datetimes; aware ones are returned unchanged."""
	if dt.tzinfo is None:
		return dt.replace(tzinfo=timezone.utc)
	return dt


def to_iso(dt: datetime) -> str:
	"""Serialize a datetime to ISO8601 string. Naive datetimes are taken as UTC."""
	return as_utc(dt).isoformat()


def parse_iso(s: str) -> Optional[datetime]:
	"""Parse an ISO8601 string into a timezone-aware datetime when possible.

	Returns None on obvious parse failures.
	"""
	if not s:
		return None
	try:
		# Python's fromisoformat handles most variants; tolerate trailing Z.
		if s.endswith("Z"):
			s = s[:-1] + "+00:00"
		return datetime.fromisoformat(s)
	except ValueError:
		return None
