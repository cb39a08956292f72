"""
Helper utility functions for the YouTube video automation agent.
"""

import json
import math
import re
from typing import Dict, Any


def export_filename(title: str) -> str:
    """
    Build the download filename for a generated script.

    Every character outside ``[A-Za-z0-9]`` becomes an underscore and the
    result is lower-cased, e.g. ``"My Video!"`` -> ``"my_video_.json"``.

    Args:
        title: Title of the generated video

    Returns:
        Filename with a .json extension
    """
    return f"{re.sub(r'[^A-Za-z0-9]', '_', str(title)).lower()}.json"


def to_pretty_json(data: Dict[str, Any]) -> str:
    """Serialize data the way it is offered for download."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)


def duration_value(value: Any) -> float:
    """Convert a segment duration to seconds; anything unusable counts as 0."""
    try:
        seconds = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    return seconds if math.isfinite(seconds) else 0.0


def total_duration_seconds(segments: Any) -> float:
    """Sum the estimated durations of all segments."""
    if not isinstance(segments, list):
        return 0.0
    return sum(
        duration_value(segment.get("duration_seconds"))
        for segment in segments
        if isinstance(segment, dict)
    )


def format_duration(seconds: float) -> str:
    """Format seconds as m:ss."""
    seconds = int(round(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"
