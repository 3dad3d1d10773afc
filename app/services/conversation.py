"""In-memory chat transcript and the progressive reveal of a reply.

The transcript always holds at least the greeting. Only the most recent
assistant message is ever rewritten, and only by the reveal sequence that
currently owns it.
"""
import itertools
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

DEFAULT_GREETING = "Hello! Ask me anything about the company."
REVEAL_STEP = 12
REVEAL_DELAY = 0.04

_ids = itertools.count(1)


@dataclass
class ChatMessage:
    role: str  # "user" | "assistant"
    text: str
    id: int = 0

    def __post_init__(self):
        if not self.id:
            self.id = next(_ids)


class Conversation:
    def __init__(self, greeting: str = DEFAULT_GREETING):
        self.greeting = greeting
        self.messages: List[ChatMessage] = [ChatMessage("assistant", greeting)]
        self._reveal: Optional["RevealSequence"] = None

    def add(self, role: str, text: str) -> ChatMessage:
        msg = ChatMessage(role, text)
        self.messages.append(msg)
        return msg

    def last_assistant(self) -> Optional[ChatMessage]:
        for msg in reversed(self.messages):
            if msg.role == "assistant":
                return msg
        return None

    def replace_last_assistant(self, text: str) -> None:
        msg = self.last_assistant()
        if msg is not None:
            msg.text = text

    def add_error(self, details: str) -> ChatMessage:
        return self.add("assistant", f"Error: {details}")

    def clear(self) -> None:
        self.cancel_reveal()
        self.messages = [ChatMessage("assistant", self.greeting)]

    def reveal(self, reply: str, step: int = REVEAL_STEP, delay: float = REVEAL_DELAY) -> "RevealSequence":
        """Start revealing ``reply``; any reveal still in flight is superseded."""
        self.cancel_reveal()
        self._reveal = RevealSequence(self, reply, step=step, delay=delay)
        return self._reveal

    def cancel_reveal(self) -> None:
        if self._reveal is not None:
            self._reveal.cancel()
            self._reveal = None


class RevealSequence:
    """Scheduled updates that grow the last assistant message to ``reply``.

    The first frame appends a new assistant message, later frames rewrite it
    and the last frame is always the full reply. After ``cancel()`` the
    sequence never touches the transcript again.
    """

    def __init__(self, conversation: Conversation, reply: str, step: int = REVEAL_STEP, delay: float = REVEAL_DELAY):
        if step < 1:
            raise ValueError("step must be >= 1")
        self.conversation = conversation
        self.reply = reply or "(no reply)"
        self.step = step
        self.delay = delay
        self._cancelled = threading.Event()
        self._message: Optional[ChatMessage] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def frames(self) -> Iterator[str]:
        for i in range(1, len(self.reply) + 1, self.step):
            yield self.reply[:i]
        yield self.reply

    def _apply(self, text: str) -> None:
        if self._message is None:
            self._message = self.conversation.add("assistant", text)
        else:
            self._message.text = text

    def run(self, sleep: Optional[Callable[[float], None]] = None, on_frame: Optional[Callable[[str], None]] = None) -> bool:
        """Play every frame; returns False when cancelled before the end."""
        sleep = sleep or time.sleep
        for text in self.frames():
            if self.cancelled:
                return False
            self._apply(text)
            if on_frame:
                on_frame(text)
            if text != self.reply:
                sleep(self.delay)
        return not self.cancelled
