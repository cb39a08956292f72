"""
Configuration settings for the YouTube video automation agent.
"""

import os
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Automation Agent"
    APP_VERSION = "0.1.0"
    APP_DESCRIPTION = "Generate complete production-ready data for YouTube videos automatically"

    # API keys
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

    # Default model settings
    DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-turbo-preview")
    DEFAULT_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.8"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from app.utils.logger import logging

        # Validate required environment variables
        if not cls.OPENAI_API_KEY:
            logging.warning("OPENAI_API_KEY environment variable not set.")
            logging.warning("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
