"""
Reusable UI components for the Streamlit app.
"""

import html
import streamlit as st
from pydantic import ValidationError as PydanticValidationError
from typing import Dict, Any, Tuple

from app.models.schemas import VIDEO_TYPES, DURATIONS, VideoScript
from app.utils.helpers import (
    export_filename, to_pretty_json, total_duration_seconds, format_duration, duration_value,
)
from app.utils.logger import logging


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Video Automation Agent",
        page_icon="🎬",
        layout="wide",
    )

    st.title("🎬 YouTube Video Automation Agent")
    st.markdown("""
    Generate complete production-ready data for YouTube videos automatically.
    """)
    st.divider()


def sidebar():
    """Display the sidebar with app information and options."""
    with st.sidebar:
        st.title("Video Automation Agent")

        st.markdown("## About")
        st.info("""
        Enter a topic and get:
        - A title, description and thumbnail idea
        - A segmented narration script with visual guidance
        - B-roll suggestions and SEO tags
        """)

        st.markdown("## Settings")
        st.text_input("API URL", key="api_url")


def video_form(loading: bool = False) -> Tuple[bool, str, str, str]:
    """
    Display the generation form.

    Args:
        loading: Whether a request is in flight; disables the submit button

    Returns:
        Tuple of (submitted, topic, video type, duration)
    """
    with st.form(key="video_form"):
        topic = st.text_input(
            "Video Topic",
            key="topic",
            placeholder="e.g., How to Make Perfect Sourdough Bread",
        )

        col1, col2 = st.columns(2)
        with col1:
            video_type = st.selectbox(
                "Video Type",
                VIDEO_TYPES,
                key="video_type",
                format_func=str.title,
            )
        with col2:
            duration = st.selectbox(
                "Duration (minutes)",
                DURATIONS,
                key="duration",
                format_func=lambda d: f"{d} minutes",
            )

        submit = st.form_submit_button(
            "Generating..." if loading else "Generate Video Data",
            disabled=loading,
        )

    return submit, topic, video_type, duration


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)


def display_thumbnail(thumbnail: Any):
    st.markdown("### Thumbnail")
    if not isinstance(thumbnail, dict):
        st.markdown(str(thumbnail))
        return
    st.markdown(f"**Text:** {thumbnail.get('text', '')}")
    st.markdown(f"**Image Prompt:** {thumbnail.get('prompt', '')}")


def display_segments(segments: Any):
    """
    Display one card per script segment.

    Args:
        segments: Segments of the generated script; items that are not
            objects are skipped
    """
    cards = [segment for segment in segments if isinstance(segment, dict)] if isinstance(segments, list) else []
    total = format_duration(total_duration_seconds(cards))
    st.markdown(f"### Script Segments ({len(cards)}) · ~{total}")

    for segment in cards:
        with st.container(border=True):
            col1, col2 = st.columns([6, 1])
            with col1:
                st.markdown(f"#### Segment {segment.get('id', '')}")
            with col2:
                st.markdown(f"`{duration_value(segment.get('duration_seconds')):g}s`")
            st.markdown(f"**Narration:** {segment.get('narration', '')}")
            st.markdown(f"**Image Prompt:** {segment.get('image_prompt', '')}")
            st.markdown(f"**Visual Instructions:** {segment.get('visual_instructions', '')}")


def display_broll(broll: Any):
    """Display b-roll suggestions; nothing is shown when there are none."""
    items = [item for item in broll if isinstance(item, dict)] if isinstance(broll, list) else []
    if not items:
        return

    st.markdown("### B-Roll Suggestions")
    for item in items:
        suggestions = item.get("suggestions")
        if not isinstance(suggestions, list):
            suggestions = []
        lines = "\n".join(f"- {s}" for s in suggestions)
        st.markdown(f"**Segment {item.get('segment_id', '')}:**\n{lines}")


def tag_chips(tags: Any) -> str:
    """Render tags as HTML chips, one span per tag."""
    if not isinstance(tags, list):
        tags = [tags]
    chip_style = (
        "display:inline-block;background:#dbeafe;color:#1d4ed8;"
        "padding:4px 14px;margin:3px;border-radius:999px;font-size:0.85rem;"
    )
    return "".join(
        f'<span class="tag-chip" style="{chip_style}">{html.escape(str(tag))}</span>'
        for tag in tags
    )


def display_tags(tags: Any):
    st.markdown("### Tags / Keywords")
    st.markdown(tag_chips(tags), unsafe_allow_html=True)


def download_button(result: Dict[str, Any]):
    """Offer the raw result as a JSON file named after its title."""
    st.download_button(
        "Download JSON",
        data=to_pretty_json(result),
        file_name=export_filename(result.get("title", "video")),
        mime="application/json",
    )


def normalize_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a result into a VideoScript for rendering.

    The server only checks that the required fields are present, so a
    result that does not fit the model is rendered as returned.
    """
    try:
        return VideoScript.from_response(result).model_dump()
    except PydanticValidationError as e:
        logging.warning(f"Rendering result that does not match VideoScript: {e.error_count()} errors")
        return result


def display_result(result: Dict[str, Any]):
    """
    Display a generated video script.

    Args:
        result: Dictionary returned by the generation endpoint
    """
    script = normalize_result(result)

    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown("## Generated Video Data")
    with col2:
        download_button(result)

    st.markdown("### Title")
    st.markdown(str(script.get("title", "")))

    st.markdown("### Description")
    st.text(str(script.get("description", "")))

    display_thumbnail(script.get("thumbnail"))
    display_segments(script.get("segments"))
    display_broll(script.get("broll"))
    display_tags(script.get("tags"))
