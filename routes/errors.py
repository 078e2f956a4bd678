"""Central error handling: the only place errors are turned into responses.

Routes never format errors themselves; anything they raise ends up here.
`ServiceError` subclasses map to a status code through their `ErrorKind`.
Store failures and unexpected exceptions are logged with their traceback and
reported to the client as a generic 500.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from errors import ErrorKind, RequestValidationFailed, ServiceError
from utils.responses import error_response

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
	ErrorKind.VALIDATION: 400,
	ErrorKind.UNAUTHORIZED: 401,
	ErrorKind.FORBIDDEN: 403,
	ErrorKind.NOT_FOUND: 404,
	ErrorKind.CONFLICT: 409,
	ErrorKind.STORE: 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


async def handle_service_error(request: Request, exc: ServiceError):
	status_code = STATUS_BY_KIND.get(exc.kind, 500)
	if status_code >= 500:
		logger.error(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc}", exc_info=exc)
		return error_response(INTERNAL_ERROR_MESSAGE, 500)

	if exc.kind is ErrorKind.NOT_FOUND:
		logger.info(f"Not found on {request.method} {request.url.path}: {exc}")

	errors = exc.errors if isinstance(exc, RequestValidationFailed) else None
	headers = {"WWW-Authenticate": "Bearer"} if exc.kind is ErrorKind.UNAUTHORIZED else None
	return error_response(exc.message, status_code, errors=errors, headers=headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
	"""Validation done by FastAPI itself (query strings and the like)."""
	errors = []
	for err in exc.errors():
		location, *rest = err["loc"] or ("request",)
		field = ".".join(str(part) for part in rest) or None
		errors.append({"location": str(location), "field": field, "message": err["msg"]})
	messages = ", ".join(e["message"] for e in errors)
	return error_response(f"Validation error: {messages}", 400, errors=errors)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
	"""Routing errors (unknown path, wrong method) in the same envelope."""
	return error_response(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception):
	logger.exception(f"Unhandled error on {request.method} {request.url.path}")
	return error_response(INTERNAL_ERROR_MESSAGE, 500)


def register_error_handlers(app: FastAPI) -> None:
	app.add_exception_handler(ServiceError, handle_service_error)
	app.add_exception_handler(RequestValidationError, handle_request_validation_error)
	app.add_exception_handler(StarletteHTTPException, handle_http_exception)
	app.add_exception_handler(Exception, handle_unexpected_error)
