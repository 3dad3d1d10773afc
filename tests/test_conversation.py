import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from app.services.conversation import Conversation, RevealSequence


def test_starts_with_greeting_and_clear_resets():
    convo = Conversation(greeting="Halo")
    assert [(m.role, m.text) for m in convo.messages] == [("assistant", "Halo")]
    convo.add("user", "hi")
    convo.clear()
    assert [(m.role, m.text) for m in convo.messages] == [("assistant", "Halo")]


def test_message_ids_are_unique():
    convo = Conversation()
    a = convo.add("user", "a")
    b = convo.add("user", "b")
    assert len({convo.messages[0].id, a.id, b.id}) == 3


def test_reveal_frames_and_final_text():
    convo = Conversation()
    convo.add("user", "q")
    reply = "x" * 30
    seen = []
    sleeps = []
    finished = convo.reveal(reply, step=12).run(sleep=sleeps.append, on_frame=seen.append)

    assert finished is True
    assert seen == ["x", "x" * 13, "x" * 25, reply]
    assert len(sleeps) == 3
    # one assistant message appended, rewritten in place
    assert len(convo.messages) == 3
    assert convo.messages[-1].role == "assistant"
    assert convo.messages[-1].text == reply


def test_cancelled_reveal_stops_touching_transcript():
    convo = Conversation()
    seq = convo.reveal("abcdefghij", step=2)
    frames = []

    def sleep(_):
        if len(frames) == 2:
            seq.cancel()

    assert seq.run(sleep=sleep, on_frame=frames.append) is False
    assert frames == ["a", "abc"]
    assert convo.messages[-1].text == "abc"


def test_new_reveal_supersedes_previous():
    convo = Conversation()
    first = convo.reveal("first reply")
    second = convo.reveal("second reply")
    assert first.cancelled is True
    assert second.cancelled is False

    assert first.run(sleep=lambda _: None) is False
    assert second.run(sleep=lambda _: None) is True
    assert [m.text for m in convo.messages[1:]] == ["second reply"]


def test_empty_reply_shows_placeholder():
    convo = Conversation()
    convo.reveal("").run(sleep=lambda _: None)
    assert convo.messages[-1].text == "(no reply)"


def test_error_rendered_as_assistant_message():
    convo = Conversation()
    convo.add("user", "hi")
    msg = convo.add_error("Server error")
    assert msg.role == "assistant"
    assert convo.last_assistant().text == "Error: Server error"


def test_replace_last_assistant():
    convo = Conversation()
    convo.add("assistant", "draft")
    convo.add("user", "q")
    convo.replace_last_assistant("final")
    assert [m.text for m in convo.messages] == [convo.greeting, "final", "q"]


def test_step_must_be_positive():
    with pytest.raises(ValueError):
        RevealSequence(Conversation(), "x", step=0)
