"""
Traduction des erreurs en réponses HTTP
=======================================

Seul endroit qui connaît le lien erreur métier -> statut HTTP :

- ValidationError / RequestValidationError → 400
- NotFoundError → 404
- ConflictError → 409
- StoreError → 500, message générique "Database error" (détail dans les logs)
- Toute autre exception → 500, message générique

Corps de réponse : `{"message": "<texte lisible>"}` (cf. `ErrorResponse`).
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from leaderboard.services.errors import ErrorKind, TournamentError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.STORE: 500,
}

STORE_ERROR_MESSAGE = "Database error"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _message(status_code: int, text: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": text}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    msg = str(first.get("msg") or "Invalid request.")
    # pydantic préfixe les ValueError des validateurs
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    if loc and first.get("type") != "value_error":
        return f"{'.'.join(loc)}: {msg}"
    return msg


async def tournament_error_handler(request: Request, exc: TournamentError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if exc.kind is ErrorKind.STORE:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return _message(status_code, STORE_ERROR_MESSAGE)
    logger.info("%s %s rejected (%d): %s", request.method, request.url.path, status_code, exc)
    return _message(status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _message(400, _validation_message(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _message(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _message(500, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TournamentError, tournament_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
