"""
Core functionality for the YouTube video automation agent.

This package contains the prompt template and the script generator
that calls the upstream model.
"""
