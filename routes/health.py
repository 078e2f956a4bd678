from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
import time

import config
from utils.time import now_utc, to_iso

router = APIRouter()

_STARTED_AT = time.monotonic()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
	return "Welcome to the Game Tracker API"


@router.get(f"{config.API_PREFIX}/health")
async def health_check():
	"""Liveness probe. Does not touch the document store."""
	return {
		"status": "OK",
		"uptime": time.monotonic() - _STARTED_AT,
		"timestamp": to_iso(now_utc()),
		"version": config.APP_VERSION,
	}
