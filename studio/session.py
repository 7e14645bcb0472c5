"""
InteractiveSession — follow-up Q&A loop over a fixed grounding context.
Phases: awaiting_question → answering → awaiting_question ... → closed
"""
import logging

from .answer import GroundedAnswerer
from .display import display_qa_banner
from .errors import GenerationFailure
from .ui import Colors, LineReader, print_assistant, print_error

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")


class InteractiveSession:
    """
    Reads questions until "exit"/"quit" (any case) or end of input.

    Blank lines just re-prompt. Each other line is answered synchronously
    against the same context, which is never modified by the loop. The reader
    is closed exactly once, whichever way the loop ends.

    A GenerationFailure while answering ends the session by propagating,
    unless keep_going is set, in which case it is reported and the loop
    re-prompts.
    """

    def __init__(
        self,
        answerer: GroundedAnswerer,
        context: str,
        reader: LineReader,
        keep_going: bool = False,
        prompt_text: str = "You: ",
    ):
        self.answerer = answerer
        self.context = context
        self.reader = reader
        self.keep_going = keep_going
        self.prompt_text = prompt_text
        self.phase = "awaiting_question"
        self.answered = 0

    def run(self):
        display_qa_banner()

        try:
            while self.phase != "closed":
                self._step()
        finally:
            self.phase = "closed"
            self.reader.close()

    def _step(self):
        try:
            line = self.reader.prompt(self.prompt_text)
        except EOFError:
            print()
            self._close()
            return

        question = line.strip()
        if not question:
            return

        if question.lower() in EXIT_COMMANDS:
            self._close()
            return

        self.phase = "answering"
        try:
            answer = self.answerer.answer(self.context, question)
        except GenerationFailure as e:
            if not self.keep_going:
                raise
            logger.warning("answer failed, continuing: %s", e)
            print_error(str(e))
            self.phase = "awaiting_question"
            return

        self.answered += 1
        print_assistant(answer)
        self.phase = "awaiting_question"

    def _close(self):
        print(f"  Goodbye. {Colors.DIM}({self.answered} question(s) answered){Colors.END}")
        self.phase = "closed"
