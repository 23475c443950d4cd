import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from core.domain.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid input"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe(exc)
    logger.warning(f"⚠️ Entrada inválida en {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, message)


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"⚠️ Entrada inválida en {request.url.path}: {exc}")
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, str(exc))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning(f"⚠️ {request.url.path}: {exc}")
    return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))


async def catch_unhandled(request: Request, call_next) -> Response:
    """
    Middleware interno (va por dentro de CORS) que convierte cualquier fallo
    no clasificado en la respuesta de error 500. El detalle solo va al log.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(f"🔴 Error no controlado en {request.url.path}: {exc}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_SERVER_ERROR,
            "Internal server error",
        )


def register_error_handlers(app: FastAPI) -> None:
    """Debe llamarse antes de añadir CORSMiddleware."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unhandled)
