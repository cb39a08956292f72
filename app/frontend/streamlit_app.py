"""
Main Streamlit application for the YouTube video automation agent.
"""

import os
import streamlit as st
from typing import Any, MutableMapping
from dotenv import load_dotenv
from app.frontend.api_client import ApiClient, ApiError, FALLBACK_ERROR
from app.frontend.components import (
    header, sidebar, video_form, display_result,
    display_error,
)


load_dotenv()

EMPTY_TOPIC_ERROR = "Please enter a video topic"


def init_session_state():
    """Initialize session state variables."""
    if "api_url" not in st.session_state:
        st.session_state.api_url = os.getenv("API_URL", "http://localhost:8000")

    if "loading" not in st.session_state:
        st.session_state.loading = False

    if "result" not in st.session_state:
        st.session_state.result = None

    if "error" not in st.session_state:
        st.session_state.error = ""


def start_generation(state: MutableMapping[str, Any], topic: str) -> bool:
    """
    Move from idle to loading, unless the topic is empty.

    Args:
        state: Session state
        topic: Topic entered in the form

    Returns:
        True if a request should be sent
    """
    if not topic.strip():
        state["error"] = EMPTY_TOPIC_ERROR
        return False

    state["loading"] = True
    state["error"] = ""
    state["result"] = None
    return True


def run_generation(state: MutableMapping[str, Any], client: ApiClient):
    """
    Send the pending request and store its outcome.

    Args:
        state: Session state holding topic, video_type and duration
        client: API client used for the request
    """
    try:
        state["result"] = client.generate_video(
            state["topic"], state["video_type"], state["duration"]
        )
    except ApiError as e:
        state["error"] = e.message
    except Exception as e:
        state["error"] = str(e) or FALLBACK_ERROR
    finally:
        state["loading"] = False


def main():
    """Main application entry point."""
    header()
    init_session_state()
    sidebar()

    submit, topic, _, _ = video_form(loading=st.session_state.loading)

    if submit and start_generation(st.session_state, topic):
        # Rerun so the form renders disabled while the request is in flight
        st.rerun()

    if st.session_state.loading:
        with st.spinner("Generating..."):
            run_generation(st.session_state, ApiClient(st.session_state.api_url))
        st.rerun()

    if st.session_state.error:
        display_error(st.session_state.error)

    if st.session_state.result:
        display_result(st.session_state.result)


if __name__ == "__main__":
    main()
