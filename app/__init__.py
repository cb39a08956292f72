"""
YouTube Video Automation Agent.

This application turns a topic, video type and target duration into
production-ready YouTube video data using an LLM.
"""

from app.config import config

__version__ = config.APP_VERSION
