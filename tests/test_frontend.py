"""
Tests for the Streamlit frontend: API client, session flow and rendering.
"""

import pytest
from unittest.mock import patch, MagicMock

from app.frontend.api_client import ApiClient, ApiError, FALLBACK_ERROR
from app.frontend.components import (
    display_result, display_broll, display_segments, display_thumbnail, normalize_result, tag_chips,
)
from app.frontend.streamlit_app import start_generation, run_generation, EMPTY_TOPIC_ERROR


def make_response(status_code, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def mock_st():
    """Fixture to mock the streamlit module used by the components."""
    with patch('app.frontend.components.st') as st:
        st.columns.side_effect = lambda spec: [
            MagicMock() for _ in range(spec if isinstance(spec, int) else len(spec))
        ]
        yield st


@patch('app.frontend.api_client.requests.post')
def test_generate_video_posts_form_fields(mock_post, video_script):
    mock_post.return_value = make_response(200, video_script)

    client = ApiClient("http://localhost:8000")
    result = client.generate_video("Sourdough", "tutorial", "5-10")

    assert result == video_script
    mock_post.assert_called_once_with(
        "http://localhost:8000/api/generate",
        json={"topic": "Sourdough", "videoType": "tutorial", "duration": "5-10"},
    )


@patch('app.frontend.api_client.requests.post')
def test_generate_video_error_message(mock_post):
    mock_post.return_value = make_response(500, {"error": "OpenAI API key not configured"})

    client = ApiClient("http://localhost:8000")
    with pytest.raises(ApiError) as exc_info:
        client.generate_video("Sourdough", "tutorial", "5-10")

    assert exc_info.value.message == "OpenAI API key not configured"
    assert exc_info.value.status_code == 500


@patch('app.frontend.api_client.requests.post')
def test_generate_video_fallback_message(mock_post):
    mock_post.return_value = make_response(502)

    client = ApiClient("http://localhost:8000")
    with pytest.raises(ApiError) as exc_info:
        client.generate_video("Sourdough", "tutorial", "5-10")

    assert exc_info.value.message == FALLBACK_ERROR


def test_start_generation_empty_topic():
    state = {"loading": False, "result": {"title": "old"}, "error": ""}

    assert start_generation(state, "   ") is False
    assert state["error"] == EMPTY_TOPIC_ERROR
    assert state["loading"] is False


def test_start_generation_clears_previous_outcome():
    state = {"loading": False, "result": {"title": "old"}, "error": "old error"}

    assert start_generation(state, "Sourdough") is True
    assert state == {"loading": True, "result": None, "error": ""}


def test_run_generation_success(video_script):
    state = {"topic": "Sourdough", "video_type": "tutorial", "duration": "5-10",
             "loading": True, "result": None, "error": ""}
    client = MagicMock()
    client.generate_video.return_value = video_script

    run_generation(state, client)

    client.generate_video.assert_called_once_with("Sourdough", "tutorial", "5-10")
    assert state["result"] == video_script
    assert state["error"] == ""
    assert state["loading"] is False


def test_run_generation_failure():
    state = {"topic": "Sourdough", "video_type": "tutorial", "duration": "5-10",
             "loading": True, "result": None, "error": ""}
    client = MagicMock()
    client.generate_video.side_effect = ApiError("Invalid video data structure", 500)

    run_generation(state, client)

    assert state["result"] is None
    assert state["error"] == "Invalid video data structure"
    assert state["loading"] is False


def test_one_card_per_segment(mock_st, video_script):
    display_segments(video_script["segments"])

    assert mock_st.container.call_count == len(video_script["segments"])


def test_one_chip_per_tag(video_script):
    chips = tag_chips(video_script["tags"])

    assert chips.count('class="tag-chip"') == len(video_script["tags"])


def test_tag_chips_escape_html():
    assert "<script>" not in tag_chips(["<script>"])


def test_broll_is_optional(mock_st):
    display_broll(None)
    display_broll([])

    mock_st.markdown.assert_not_called()


def test_display_result_without_broll(mock_st, video_script):
    del video_script["broll"]

    display_result(video_script)

    mock_st.download_button.assert_called_once()
    assert mock_st.download_button.call_args.kwargs["file_name"] == (
        "perfect_sourdough_bread_at_home__beginner_friendly__.json"
    )


def test_normalize_result_fills_null_broll(video_script):
    video_script["broll"] = None

    script = normalize_result(video_script)

    assert script["broll"] == []
    assert script["segments"][0]["duration_seconds"] == 20


def test_normalize_result_keeps_result_that_does_not_fit(video_script):
    video_script["thumbnail"] = "BREAD!"

    assert normalize_result(video_script) is video_script


def test_segments_with_unusable_duration(mock_st, video_script):
    video_script["segments"][0]["duration_seconds"] = "about 30"

    display_segments(video_script["segments"])

    assert mock_st.container.call_count == 2
    rendered = [c.args[0] for c in mock_st.markdown.call_args_list]
    assert "`0s`" in rendered
    assert "`75s`" in rendered


def test_segments_skip_items_that_are_not_objects(mock_st, video_script):
    display_segments(["Intro narration"] + video_script["segments"])

    assert mock_st.container.call_count == len(video_script["segments"])


def test_segments_not_a_list(mock_st):
    display_segments(True)

    mock_st.container.assert_not_called()


def test_thumbnail_as_text(mock_st):
    display_thumbnail("BREAD!")

    mock_st.markdown.assert_any_call("BREAD!")


def test_tag_chips_not_a_list():
    assert tag_chips(7).count('class="tag-chip"') == 1


def test_display_result_with_loose_payload(mock_st, video_script):
    """A result the server accepted renders even when its parts are malformed."""
    video_script["thumbnail"] = "BREAD!"
    video_script["segments"] = [{"id": 1, "duration_seconds": "~30s"}, "outro"]
    video_script["broll"] = "stock footage"
    video_script["tags"] = "sourdough"

    display_result(video_script)

    assert mock_st.container.call_count == 1
    mock_st.download_button.assert_called_once()
