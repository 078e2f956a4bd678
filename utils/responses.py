"""Uniform response envelope: {"success": bool, "data": ..., "message": str}."""
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(data: Any, message: str, status_code: int = 200) -> JSONResponse:
	return JSONResponse(
		status_code=status_code,
		content={"success": True, "data": jsonable_encoder(data), "message": message},
	)


def error_response(
	message: str,
	status_code: int,
	*,
	errors: Optional[list[dict]] = None,
	headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
	content: dict[str, Any] = {"success": False, "data": None, "message": message}
	if errors is not None:
		content["errors"] = errors
	return JSONResponse(status_code=status_code, content=content, headers=headers)
