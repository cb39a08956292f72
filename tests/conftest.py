"""
Configuration for pytest tests.
"""

import json
import os
import pytest
from unittest.mock import patch, MagicMock


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["OPENAI_API_KEY"] = os.environ.get("OPENAI_API_KEY", "test_api_key")
    os.environ["ENVIRONMENT"] = "development"

    yield


@pytest.fixture
def sample_topic():
    """Return the sourdough example request."""
    return {
        "topic": "How to Make Perfect Sourdough Bread",
        "videoType": "tutorial",
        "duration": "5-10",
    }


@pytest.fixture
def video_script():
    """Return a generated script in the shape the model is asked for."""
    return {
        "title": "Perfect Sourdough Bread at Home (Beginner Friendly!)",
        "description": "Learn how to bake crusty, open-crumb sourdough bread at home. "
                       "We cover starter, shaping and baking step by step.",
        "thumbnail": {
            "text": "PERFECT SOURDOUGH EVERY TIME",
            "prompt": "Close-up of a golden sourdough loaf with a deep ear, rustic kitchen, dramatic light",
        },
        "segments": [
            {
                "id": 1,
                "narration": "Ever wondered how bakeries get that perfect crust?",
                "image_prompt": "Bakery shelf with artisan loaves",
                "visual_instructions": "Slow push-in, title overlay",
                "duration_seconds": 20,
            },
            {
                "id": 2,
                "narration": "It all starts with an active starter.",
                "image_prompt": "Bubbly sourdough starter in a glass jar",
                "visual_instructions": "Macro shot, time-lapse of rising",
                "duration_seconds": 75,
            },
        ],
        "broll": [
            {"segment_id": 2, "suggestions": ["Starter bubbling time-lapse", "Flour being weighed"]},
        ],
        "tags": ["sourdough", "bread baking", "homemade bread", "sourdough starter"],
    }


@pytest.fixture
def mock_chat_model(video_script):
    """Fixture to mock the langchain chat model."""
    with patch('app.core.script_generator.init_chat_model') as mock_init_model:
        mock_model = MagicMock()
        mock_model.bind.return_value = mock_model

        mock_response = MagicMock()
        mock_response.content = json.dumps(video_script)
        mock_model.invoke.return_value = mock_response

        mock_init_model.return_value = mock_model

        yield mock_model
