"""
FastAPI application for the YouTube video automation agent.
"""

import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.api.routes import router
from app.utils.error_handling import VideoAgentError, error_body, video_agent_exception_handler
from app.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for generating production-ready YouTube video scripts",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


app.add_exception_handler(VideoAgentError, video_agent_exception_handler)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies in the same shape as other errors."""
    logging.warning(f"Malformed request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content=error_body("Invalid request body"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content=error_body(f"An unexpected error occurred: {str(exc)}"),
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": config.APP_DESCRIPTION,
    }
