"""
Core functionality for the YouTube video summarization service.

This package contains the adapters for downloading YouTube audio,
transcribing it and summarizing transcripts, plus the pipeline that
sequences them for one request.
"""
