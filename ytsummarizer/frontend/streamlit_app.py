"""
Main Streamlit application for YouTube Video Summarizer.
"""

import os
from typing import Optional

import streamlit as st
from dotenv import load_dotenv

from ytsummarizer.frontend.api_client import ApiClient, ApiError
from ytsummarizer.frontend.components import (
    display_error,
    display_success,
    display_summary,
    header,
    loading_spinner,
    question_interface,
    sidebar,
    youtube_input,
)

load_dotenv()

# Client-side policy; the API itself is stateless and does not count questions.
MAX_QUESTIONS = 6


def init_session_state(api_url: str):
    """Initialize session state variables."""
    if st.session_state.get("api_base_url") != api_url:
        st.session_state.api_base_url = api_url
        st.session_state.api_client = ApiClient(api_url)

    if "summary" not in st.session_state:
        st.session_state.summary = None

    if "chat_history" not in st.session_state:
        st.session_state.chat_history = []

    if "questions_asked" not in st.session_state:
        st.session_state.questions_asked = 0


def process_youtube_url(url: str):
    """Request a summary and store it as the context for follow-up questions."""
    client = st.session_state.api_client

    try:
        with loading_spinner("Downloading, transcribing and summarizing. This may take a few minutes..."):
            summary = client.summarize_video(url)
    except ApiError as e:
        display_error(f"Error processing video: {e.message}")
        return

    st.session_state.summary = summary
    st.session_state.chat_history = []
    st.session_state.questions_asked = 0
    display_success("Video processed successfully!")


def handle_question(question: str) -> Optional[str]:
    """Ask a question against the current summary."""
    client = st.session_state.api_client

    try:
        answer = client.ask(question, st.session_state.summary)
    except ApiError as e:
        display_error(f"Error: {e.message}")
        return None

    st.session_state.questions_asked += 1
    return answer


def main():
    """Main application entry point."""
    header()
    default_url = os.getenv("API_URL") or os.getenv("PUBLIC_URL", "http://localhost:8000")
    api_url = sidebar(default_url)
    init_session_state(api_url)

    url = youtube_input()
    if url:
        process_youtube_url(url)

    if st.session_state.summary:
        display_summary(st.session_state.summary)
        question_interface(
            st.session_state.chat_history,
            MAX_QUESTIONS - st.session_state.questions_asked,
            handle_question,
        )


if __name__ == "__main__":
    main()
