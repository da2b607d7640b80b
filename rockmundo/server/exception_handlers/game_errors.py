"""
Game error handlers.

Edge functions report failures as ``{"error": message}`` with the error's
status code and the function CORS headers; the JSON API keeps FastAPI's
``{"detail": message}`` shape.
"""

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rockmundo.core.logging_config import get_logger
from rockmundo.core.monitoring import log_error
from rockmundo.errors import GameError
from rockmundo.server.api.functions.responses import error_response
from rockmundo.server.core import constant

logger = get_logger(__name__)


def is_function_request(request: Request) -> bool:
    return request.url.path.startswith(constant.FUNCTIONS_V1_STR)


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    """Translate a GameError raised by a route or dependency into its HTTP response."""
    logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    if is_function_request(request):
        log_error(type(exc).__name__, exc.message, {"path": request.url.path})
        return error_response(exc.message, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if is_function_request(request):
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request body: {location} {first.get('msg', '')}".strip()
        return error_response(message, 400)
    return await request_validation_exception_handler(request, exc)
