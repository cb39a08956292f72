"""
Data models for the YouTube video automation agent.
"""
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field
from app.config import config


VIDEO_TYPES = ["tutorial", "educational", "entertainment", "review", "documentary", "listicle"]

DURATIONS = ["1-3", "5-10", "10-15", "15-20"]

# Top-level fields that must be present before a generated script is accepted
REQUIRED_FIELDS = ("title", "description", "thumbnail", "segments", "tags")


class Thumbnail(BaseModel):
    """Thumbnail overlay text and image generation prompt."""
    text: str = ""
    prompt: str = ""


class Segment(BaseModel):
    """One narrated unit of the script."""
    id: int = Field(..., gt=0)
    narration: str = ""
    image_prompt: str = ""
    visual_instructions: str = ""
    duration_seconds: float = Field(0, ge=0)


class BRoll(BaseModel):
    """Supplementary footage suggestions for a segment."""
    segment_id: int
    suggestions: List[str] = []


class VideoScript(BaseModel):
    """Complete production data for one video."""
    title: str
    description: str
    thumbnail: Thumbnail
    segments: List[Segment]
    broll: List[BRoll] = []
    tags: List[str]

    model_config = {"extra": "allow"}

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "VideoScript":
        # The model may send "broll": null
        if data.get("broll") is None:
            data = {**data, "broll": []}
        return cls.model_validate(data)


class GenerationConfig(BaseModel):
    """Configuration for the upstream model call."""
    model: str = config.DEFAULT_MODEL
    temperature: float = config.DEFAULT_TEMPERATURE
    max_tokens: Optional[int] = None
