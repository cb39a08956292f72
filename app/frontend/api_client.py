"""
API client for communicating with the YouTube video automation backend.
"""

import requests
from typing import Dict, Any
from urllib.parse import urljoin
from app.config import config

FALLBACK_ERROR = "Failed to generate video data"


class ApiError(Exception):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Client for interacting with the video automation API."""

    def __init__(self, base_url: str = config.PUBLIC_URL):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return FALLBACK_ERROR
        if isinstance(body, dict) and body.get("error"):
            return body["error"]
        return FALLBACK_ERROR

    def generate_video(self, topic: str, video_type: str, duration: str) -> Dict[str, Any]:
        """
        Request a generated video script.

        Args:
            topic: Video topic
            video_type: Kind of video
            duration: Target duration in minutes

        Returns:
            Dictionary with the generated script
        """
        response = requests.post(
            self._url("generate"),
            json={
                "topic": topic,
                "videoType": video_type,
                "duration": duration
            }
        )

        if not response.ok:
            raise ApiError(self._error_message(response), response.status_code)

        return response.json()
