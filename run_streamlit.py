"""
Launcher script for the YouTube video automation agent Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

from app.utils.logger import logging

# Load environment variables
load_dotenv()


def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="YouTube Video Automation Agent Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--server-port", type=int, default=8000, help="Port where the FastAPI server is running")
    parser.add_argument("--api-url", help="URL of the API server (default: http://localhost:8000)")
    args = parser.parse_args()

    app_dir = Path(__file__).parent.absolute()
    app_path = app_dir / "app" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    api_url = args.api_url or f"http://localhost:{args.server_port}"
    env["API_URL"] = api_url

    # The app imports the `app` package from the project root
    env["PYTHONPATH"] = str(app_dir) + os.pathsep + env.get("PYTHONPATH", "")

    logging.info(f"Starting Streamlit app on port {args.port}")
    logging.info(f"API server is expected to be running at: {api_url}")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        logging.info("Streamlit app stopped")
    except subprocess.CalledProcessError as e:
        logging.error(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
