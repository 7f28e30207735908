"""
Reusable UI components for the Streamlit app.
"""

from typing import Callable, List, Optional

import streamlit as st


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Video Summarizer",
        page_icon="🎬",
        layout="wide",
    )

    st.title("🎬 YouTube Video Summarizer")
    st.markdown("Get a structured AI summary of a YouTube video and ask follow-up questions about it.")
    st.divider()


def sidebar(default_api_url: str) -> str:
    """
    Display the sidebar with app information and settings.

    Returns:
        The API URL entered in the settings
    """
    with st.sidebar:
        st.title("YouTube Summarizer")

        st.markdown("## About")
        st.info("""
        Paste a YouTube link to:
        - Download and transcribe its audio
        - Generate a structured summary
        - Ask follow-up questions answered from that summary
        """)

        st.markdown("## Settings")
        return st.text_input("API URL", value=default_api_url, key="api_url")


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input form.

    Returns:
        The submitted URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "Enter YouTube URL",
            placeholder="https://www.youtube.com/watch?v=VIDEO_ID",
        )
        submit = st.form_submit_button("Summarize")

    if submit and url:
        return url.strip()

    return None


def display_summary(summary: str):
    """Display the video summary."""
    st.markdown("### Summary")
    st.markdown(summary)


def loading_spinner(message: str = "Processing..."):
    """Display a loading spinner with a message."""
    return st.spinner(message)


def display_error(message: str):
    st.error(message)


def display_success(message: str):
    st.success(message)


def question_interface(history: List[dict], remaining: int, ask_callback: Callable[[str], Optional[str]]):
    """
    Display previous questions and a box for asking another.

    Args:
        history: Previous messages as {"role", "content"} dicts
        remaining: Questions left in this session
        ask_callback: Called with the question; returns the answer or None on error
    """
    st.markdown("## Ask about this video")

    for message in history:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])

    if remaining <= 0:
        st.info("You have reached the question limit for this video. Summarize another video to continue.")
        return

    st.caption(f"{remaining} question(s) remaining")
    user_input = st.chat_input("Ask a question about the video...")

    if user_input:
        history.append({"role": "user", "content": user_input})
        with st.chat_message("user"):
            st.markdown(user_input)

        with st.chat_message("assistant"):
            with st.spinner("Thinking..."):
                answer = ask_callback(user_input)
            if answer is None:
                history.pop()
                return
            st.markdown(answer)

        history.append({"role": "assistant", "content": answer})
        st.rerun()
