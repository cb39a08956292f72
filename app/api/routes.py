"""
API routes for the YouTube video automation agent.
"""

import os
import traceback
from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.schems import GenerateRequest, ErrorResponse, HealthResponse
from app.core.script_generator import ScriptGenerator
from app.utils.error_handling import GenerationError, ValidationError, VideoAgentError
from app.utils.logger import logging

router = APIRouter(prefix="/api", tags=["video"])


@router.post(
    "/generate",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_video(request: GenerateRequest):
    """
    Generate production data for a YouTube video.

    - Rejects an empty topic before contacting the model
    - Makes exactly one model call, with no retries
    - Returns the generated JSON object unmodified
    """
    if not request.topic or not request.topic.strip():
        raise ValidationError("Topic is required")

    generator = ScriptGenerator()

    try:
        video_data = await run_in_threadpool(
            generator.generate,
            request.topic,
            request.video_type,
            request.duration,
        )
    except VideoAgentError:
        raise
    except Exception as e:
        logging.error(f"Error generating video data: {str(e)}")
        logging.error(traceback.format_exc())
        raise GenerationError(str(e) or "Failed to generate video data")

    return JSONResponse(content=video_data)


@router.get("/health", response_model=HealthResponse)
async def health():
    """Report whether the service can reach its upstream model."""
    return HealthResponse(status="ok", openai_configured=bool(os.getenv("OPENAI_API_KEY")))
