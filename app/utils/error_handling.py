"""
Centralized error handling for the application.
"""

from typing import Dict, Any

from fastapi import Request
from fastapi.responses import JSONResponse

from app.utils.logger import logging


class VideoAgentError(Exception):
    """Base error reported to API callers as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(VideoAgentError):
    """Required request input is missing or empty."""

    status_code = 400


class ConfigurationError(VideoAgentError):
    """The upstream credential is not configured."""

    status_code = 500


class GenerationError(VideoAgentError):
    """The upstream call failed or returned unusable content."""

    status_code = 500


def error_body(message: str) -> Dict[str, Any]:
    return {"error": message}


async def video_agent_exception_handler(request: Request, exc: VideoAgentError):
    """Render a VideoAgentError as a JSON error body."""
    if exc.status_code >= 500:
        logging.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    else:
        logging.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")

    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))
