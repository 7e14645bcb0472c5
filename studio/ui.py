"""
Terminal UI helpers — colors, styled print functions, live output and line input.
"""
import sys
import textwrap


class Colors:
    HEADER = "\033[95m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    END = "\033[0m"


def print_header(text):
    print(f"\n{Colors.BOLD}{Colors.HEADER}{'═' * 70}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}  {text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{'═' * 70}{Colors.END}\n")


def print_phase(phase_name, emoji="🔹"):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{emoji} {phase_name}{Colors.END}")
    print(f"{Colors.DIM}{'─' * 50}{Colors.END}")


def print_assistant(text):
    """Print a model answer, wrapped."""
    wrapped = "\n".join(
        textwrap.fill(line, width=68, initial_indent="  ", subsequent_indent="  ") if line else ""
        for line in text.splitlines()
    )
    print(f"\n{Colors.GREEN}🤖 Assistant:{Colors.END}")
    print(f"{Colors.GREEN}{wrapped}{Colors.END}\n")


def print_info(label, value):
    print(f"  {Colors.BOLD}{label}:{Colors.END} {value}")


def print_warning(text):
    print(f"  {Colors.YELLOW}⚠️  {text}{Colors.END}")


def print_error(text):
    print(f"  {Colors.RED}❌ {text}{Colors.END}")


def print_success(text):
    print(f"  {Colors.GREEN}✅ {text}{Colors.END}")


def write_live(text: str):
    """Live-output sink: show a fragment immediately, no line buffering."""
    sys.stdout.write(text)
    sys.stdout.flush()


class LineReader:
    """
    Line-oriented input source for one interactive stretch.

    prompt() raises EOFError at end of input. close() is idempotent and the
    reader refuses to prompt once closed. Use it as a context manager so it is
    released on every exit path.
    """

    def __init__(self, stream=None, output=None):
        self._stream = stream if stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self.closed = False

    def prompt(self, prompt_text: str) -> str:
        if self.closed:
            raise ValueError("prompt() on a closed LineReader")

        # input() keeps line editing when attached to the real terminal
        if self._stream is sys.stdin and self._output is sys.stdout:
            return input(prompt_text)

        self._output.write(prompt_text)
        self._output.flush()
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def close(self):
        if self.closed:
            return
        self.closed = True
        if self._stream is not sys.stdin:
            self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
