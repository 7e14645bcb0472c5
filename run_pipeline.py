#!/usr/bin/env python3
"""
Content Studio — Main Orchestrator

Runs the stages in sequence: topic → streamed outline → 2-sentence summary →
follow-up Q&A grounded in what was generated.

Usage:
    python run_pipeline.py
    python run_pipeline.py composting
    python run_pipeline.py "urban beekeeping" --keep-going
    python run_pipeline.py "home espresso" --model glm-4.7 --verbose
"""
import argparse
import logging
import sys
import textwrap

import config
from studio.answer import GroundedAnswerer
from studio.context import build_context
from studio.display import (
    display_outline_end,
    display_outline_start,
    display_run_summary,
    display_summary,
    display_topic,
)
from studio.errors import GenerationFailure, ValidationError
from studio.llm import GenerationClient, create_client
from studio.logging_config import configure_logging
from studio.outline import StreamAccumulator
from studio.session import InteractiveSession
from studio.summary import Summarizer, count_sentences
from studio.ui import Colors, LineReader, print_error, print_header

logger = logging.getLogger("studio.pipeline")


def check_prerequisites() -> bool:
    """Check that the provider is configured."""
    print("🔍 Checking prerequisites...")

    issues = []
    if not config.LLM_API_KEY:
        issues.append("LLM_API_KEY not set in .env file")
    if not config.LLM_MODEL:
        issues.append("LLM_MODEL is empty")

    if issues:
        print("\n❌ Issues found:")
        for issue in issues:
            print(f"   • {issue}")
        print("\nPlease fix these issues before running the pipeline.")
        return False

    print(f"   ✅ All prerequisites met {Colors.DIM}({config.LLM_BASE_URL}){Colors.END}\n")
    return True


def capture_topic(reader: LineReader) -> str:
    """Read the topic from the terminal. Blank input is a ValidationError."""
    with reader:
        topic = reader.prompt("Enter a topic: ").strip()
    if not topic:
        raise ValidationError("Topic cannot be empty. Please run again.")
    return topic


def run_outline_stage(client: GenerationClient, topic: str) -> str:
    """Stage 1: stream the outline to the terminal and return the full text."""
    display_outline_start(client.model)
    accumulator = StreamAccumulator(client, max_tokens=config.OUTLINE_MAX_TOKENS)
    outline = accumulator.run(topic)
    display_outline_end(outline)
    return outline


def run_summary_stage(client: GenerationClient, outline: str) -> str:
    """Stage 2: two-sentence summary of the outline."""
    summarizer = Summarizer(client, max_tokens=config.SUMMARY_MAX_TOKENS)
    summary = summarizer.run(outline)
    display_summary(summary, count_sentences(summary))
    return summary


def run_qa_stage(
    client: GenerationClient,
    context: str,
    reader: LineReader,
    keep_going: bool = False,
) -> InteractiveSession:
    """Stage 3: follow-up questions until exit/quit."""
    answerer = GroundedAnswerer(client, max_tokens=config.ANSWER_MAX_TOKENS)
    session = InteractiveSession(answerer, context, reader, keep_going=keep_going)
    session.run()
    return session


def run(
    client: GenerationClient,
    topic: str | None = None,
    reader_factory=LineReader,
    keep_going: bool = False,
) -> dict:
    """
    Run every stage in order and return the session's artifacts.

    Each stage finishes before the next starts. Errors propagate to the caller.

    Returns:
        {"topic", "outline", "summary", "context", "answered"}
    """
    if topic is None:
        topic = capture_topic(reader_factory())
    topic = topic.strip()
    if not topic:
        raise ValidationError("Topic cannot be empty. Please run again.")
    display_topic(topic)

    outline = run_outline_stage(client, topic)
    summary = run_summary_stage(client, outline)
    context = build_context(topic, outline, summary)
    logger.debug("context built: %d chars", len(context))

    session = run_qa_stage(client, context, reader_factory(), keep_going=keep_going)

    return {
        "topic": topic,
        "outline": outline,
        "summary": summary,
        "context": context,
        "answered": session.answered,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Content Studio: outline, summary and grounded Q&A for a topic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          python run_pipeline.py
          python run_pipeline.py composting
          python run_pipeline.py "urban beekeeping" --keep-going
        """),
    )
    parser.add_argument("topic", nargs="*", help="Topic to write about (prompted for if omitted)")
    parser.add_argument("--model", type=str, default=config.LLM_MODEL, help="Model name")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report a failed answer and keep asking instead of ending the session",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging to stderr")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    print_header("CONTENT STUDIO")

    if not check_prerequisites():
        sys.exit(1)

    topic = " ".join(args.topic) if args.topic else None
    client = GenerationClient(create_client(config.LLM_API_KEY, config.LLM_BASE_URL), args.model)

    try:
        result = run(client, topic, keep_going=args.keep_going)
    except ValidationError as e:
        print_error(str(e))
        sys.exit(1)
    except GenerationFailure as e:
        logger.debug("generation failure", exc_info=True)
        print_error(str(e))
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print("\n\n  Cancelled.")
        sys.exit(0)

    display_run_summary(result["topic"], args.model, result["answered"])


if __name__ == "__main__":
    main()
