"""
Command-line entry point for the YouTube video automation agent.
"""

import argparse
from pathlib import Path
from dotenv import load_dotenv
from typing import Any, Dict, Optional

from app.models.schemas import GenerationConfig, VIDEO_TYPES, DURATIONS
from app.core.script_generator import ScriptGenerator
from app.config import config
from app.utils.helpers import export_filename, save_json, total_duration_seconds, format_duration
from app.utils.logger import logging


def save_script(video_data: Dict[str, Any], output_file: Optional[str] = None) -> Path:
    """Save the generated script to a JSON file named after its title."""
    if output_file is None:
        output_file = Path.cwd() / export_filename(video_data["title"])
    else:
        output_file = Path(output_file)

    save_json(video_data, str(output_file))

    logging.info(f"Script saved to: {output_file}")
    return output_file


def generate_video_script(
    topic: str,
    video_type: str = "tutorial",
    duration: str = "5-10",
    model: str = config.DEFAULT_MODEL,
    output_file: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Generate a video script and save it as JSON.

    Args:
        topic: Video topic
        video_type: Kind of video
        duration: Target duration in minutes
        model: OpenAI model used for generation
        output_file: Optional file path to save the script

    Returns:
        The generated script
    """
    generation_config = GenerationConfig(model=model)

    generator = ScriptGenerator()
    video_data = generator.generate(topic, video_type, duration, generation_config)

    save_script(video_data, output_file)

    return video_data


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Automation Agent")
    parser.add_argument("topic", help="Video topic")
    parser.add_argument("--type", dest="video_type", default="tutorial", choices=VIDEO_TYPES,
                        help="Video type")
    parser.add_argument("--duration", default="5-10", choices=DURATIONS,
                        help="Target duration in minutes")
    parser.add_argument("--model", default=config.DEFAULT_MODEL,
                        help="OpenAI model for generation")
    parser.add_argument("--output", help="Output file path for the script")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    video_data = generate_video_script(
        args.topic,
        video_type=args.video_type,
        duration=args.duration,
        model=args.model,
        output_file=args.output,
    )

    print("\n" + "=" * 80)
    print(video_data["title"])
    print("=" * 80)
    print(video_data["description"])
    print(f"\nSegments: {len(video_data['segments'])} "
          f"(~{format_duration(total_duration_seconds(video_data['segments']))})")
    print(f"Tags: {', '.join(video_data['tags'])}")
    print("=" * 80)


if __name__ == "__main__":
    main()
