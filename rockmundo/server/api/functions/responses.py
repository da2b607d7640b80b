"""Response helpers shared by the edge functions."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from rockmundo.server.core.config import settings

router = APIRouter()


def function_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ", ".join(settings.cors.allow_headers),
    }


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=function_headers())


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response({"error": message}, status_code=status_code)


@router.options("/{function_name}", include_in_schema=False)
async def preflight(function_name: str) -> PlainTextResponse:
    """Answer CORS preflight requests for any edge function."""
    return PlainTextResponse("ok", headers=function_headers())
