"""
Command-line entry point: summarize one YouTube video without running the API.
"""

import argparse
import asyncio
import sys
from typing import List, Optional, Tuple

from ytsummarizer.config import load_config
from ytsummarizer.core.pipeline import SummarizationPipeline
from ytsummarizer.dependencies import AppContext, build_context
from ytsummarizer.exceptions import SummarizerError
from ytsummarizer.utils.logger import logging


async def summarize_youtube_video(
    context: AppContext,
    url: str,
    questions: Optional[List[str]] = None,
) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Summarize a video and answer follow-up questions against the summary.

    Args:
        context: Application context with configured adapters
        url: YouTube video URL
        questions: Optional questions to ask about the summary

    Returns:
        The summary and a list of (question, answer) pairs
    """
    pipeline = SummarizationPipeline(context)
    summary = await pipeline.summarize(url)

    answers = []
    for question in questions or []:
        answers.append((question, await pipeline.ask(question, summary)))

    return summary, answers


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the summarizer from the command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--question", "-q", action="append", default=[],
                        help="Follow-up question to answer from the summary (repeatable)")
    args = parser.parse_args(argv)

    context = build_context(load_config())

    try:
        summary, answers = asyncio.run(summarize_youtube_video(context, args.url, args.question))
    except SummarizerError as e:
        logging.error(f"{e.kind.value}: {e.message}")
        print(f"Error ({e.kind.value}): {e.message}", file=sys.stderr)
        return 1

    print("\n" + "=" * 80)
    print("Summary")
    print("=" * 80)
    print(summary)
    for question, answer in answers:
        print("-" * 80)
        print(f"Q: {question}")
        print(f"A: {answer}")
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
