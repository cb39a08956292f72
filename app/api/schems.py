from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class GenerateRequest(BaseModel):
    """Model for requesting video script generation."""
    model_config = ConfigDict(populate_by_name=True)

    topic: Optional[str] = None
    video_type: str = Field("tutorial", alias="videoType")
    duration: str = "5-10"


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str


class HealthResponse(BaseModel):
    """Model for health check responses."""
    status: str
    openai_configured: bool
