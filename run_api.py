"""
FastAPI server entry point for the YouTube video automation agent.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv

from app.config import config
from app.utils.logger import logging


def main():
    """Run the FastAPI server."""
    # Load environment variables
    load_dotenv()

    parser = argparse.ArgumentParser(description="YouTube Video Automation Agent API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    logging.info(f"Starting {config.APP_NAME} API server v{config.APP_VERSION}")
    logging.info(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    logging.info(f"Model: {config.DEFAULT_MODEL} (temperature {config.DEFAULT_TEMPERATURE})")
    logging.info(f"Binding to: {args.host}:{args.port}")

    uvicorn.run(
        "app.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
