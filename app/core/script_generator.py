"""
Module for generating video scripts using LLM models.
"""

import json
import os
import traceback
from typing import Any, Dict, Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from app.core.prompts import system_template, user_template
from app.models.schemas import GenerationConfig, REQUIRED_FIELDS
from app.utils.error_handling import ConfigurationError, GenerationError, ValidationError
from app.utils.logger import logging


# The system prompt is passed in as a value, so the braces of its JSON
# example are not read as template variables.
script_prompt = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", user_template),
])


def _reject_constant(name: str):
    # NaN and Infinity are not valid JSON in the response body
    raise GenerationError(f"Model returned invalid JSON: unsupported value {name}")


def _count(value: Any) -> str:
    return str(len(value)) if isinstance(value, list) else "?"


def parse_video_script(content: Optional[str]) -> Dict[str, Any]:
    """
    Parse and minimally validate the model output.

    Args:
        content: Raw text returned by the model

    Returns:
        The parsed JSON object, unmodified
    """
    if not content:
        raise GenerationError("No content generated")

    try:
        video_data = json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Model returned invalid JSON: {e}")

    if not isinstance(video_data, dict):
        raise GenerationError("Invalid video data structure")

    missing = [field for field in REQUIRED_FIELDS if video_data.get(field) in (None, "")]
    if missing:
        logging.warning(f"Generated script is missing fields: {', '.join(missing)}")
        raise GenerationError("Invalid video data structure")

    return video_data


class ScriptGenerator:
    """Class to handle video script generation."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize the generator with API key.

        Args:
            api_key: OpenAI API key (if None, will try to get from environment)
        """
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not self.api_key:
            raise ConfigurationError("OpenAI API key not configured")

    def build_messages(self, topic: str, video_type: str, duration: str):
        """Build the system and user messages for one request."""
        return script_prompt.format_messages(
            system_prompt=system_template,
            topic=topic,
            video_type=video_type,
            duration=duration,
        )

    def generate(
        self,
        topic: str,
        video_type: str = "tutorial",
        duration: str = "5-10",
        config: Optional[GenerationConfig] = None,
    ) -> Dict[str, Any]:
        """
        Generate a complete video script.

        Args:
            topic: Video topic
            video_type: Kind of video, interpolated into the prompt
            duration: Target duration in minutes, e.g. "5-10"
            config: Configuration for the model call

        Returns:
            Dictionary with title, description, thumbnail, segments, broll and tags
        """
        if not topic or not topic.strip():
            raise ValidationError("Topic is required")

        config = config or GenerationConfig()

        logging.info(f"Generating script for topic='{topic}' type='{video_type}' duration='{duration}'")

        llm = init_chat_model(
            model=config.model,
            model_provider="openai",
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            api_key=self.api_key,
        ).bind(response_format={"type": "json_object"})

        messages = self.build_messages(topic, video_type, duration)

        try:
            response = llm.invoke(messages)
        except Exception as e:
            logging.error(f"Upstream model call failed: {str(e)}")
            logging.error(traceback.format_exc())
            raise GenerationError(str(e) or "Failed to generate video data")

        video_data = parse_video_script(response.content)

        logging.info(
            f"Generated script '{video_data['title']}' with "
            f"{_count(video_data['segments'])} segments and {_count(video_data['tags'])} tags"
        )
        return video_data
