"""
Pretty-print handlers for each pipeline stage.
"""
import textwrap
from .ui import Colors, print_phase, print_info, print_success, print_warning


def display_topic(topic: str):
    print_success(f"Topic captured: {topic}")


def display_outline_start(model: str):
    print_phase("BLOG OUTLINE (streaming)", "📋")
    print(f"  {Colors.DIM}model: {model}{Colors.END}\n")


def display_outline_end(outline: str):
    """Close the live stream block and show what was accumulated."""
    print(f"\n\n{Colors.DIM}{'─' * 50}{Colors.END}")
    lines = [line for line in outline.splitlines() if line.strip()]
    print(f"  {Colors.DIM}Stream complete — {len(outline.split())} words, {len(lines)} lines{Colors.END}")


def display_summary(summary: str, sentences: int, expected: int = 2):
    print_phase("2-SENTENCE SUMMARY", "📖")
    wrapped = textwrap.fill(summary, width=64, initial_indent="     ", subsequent_indent="     ")
    print(wrapped)
    if sentences != expected:
        print()
        print_warning(f"Summary has {sentences} sentence(s), expected {expected}.")


def display_qa_banner():
    print_phase("FOLLOW-UP Q&A", "💬")
    print('  Ask a question about the topic. Type "exit" to quit.\n')


def display_run_summary(topic: str, model: str, answered: int):
    print(f"\n{'═' * 70}")
    print_success("Session complete!")
    print_info("Topic", topic)
    print_info("Model", model)
    print_info("Questions answered", answered)
    print()
