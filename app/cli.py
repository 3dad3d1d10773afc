"""Command line entry points: run the API server or chat with it from a terminal.

The terminal client only talks to this backend's ``/api/chat``; the upstream
API key never leaves the server.
"""
import argparse
import logging
import sys
from typing import Optional

import requests

from app.core.config import Settings
from app.services.conversation import Conversation

logger = logging.getLogger(__name__)


def post_chat(base_url: str, message: str, timeout: Optional[float] = None) -> str:
    response = requests.post(base_url.rstrip("/") + "/api/chat", json={"message": message}, timeout=timeout)
    if not response.ok:
        raise RuntimeError(response.text or f"Server error ({response.status_code})")
    data = response.json()
    return data.get("reply") or "(no reply)"


def _print_frame(previous: list, text: str) -> None:
    # frames are prefixes of each other: print only the new tail
    sys.stdout.write(text[len(previous[0]):])
    sys.stdout.flush()
    previous[0] = text


def chat_loop(base_url: str, conversation: Optional[Conversation] = None, read=input) -> Conversation:
    conversation = conversation or Conversation()
    print(conversation.messages[0].text)
    while True:
        try:
            text = read("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return conversation
        if not text:
            continue
        if text in ("/quit", "/exit"):
            return conversation
        if text == "/clear":
            conversation.clear()
            print(conversation.messages[0].text)
            continue

        conversation.add("user", text)
        try:
            reply = post_chat(base_url, text)
            shown = [""]
            conversation.reveal(reply).run(on_frame=lambda t: _print_frame(shown, t))
        except (requests.RequestException, RuntimeError, ValueError) as exc:
            logger.debug("Chat request failed", exc_info=True)
            print(conversation.add_error(str(exc)).text)
            continue
        except KeyboardInterrupt:
            conversation.cancel_reveal()
            print()
            return conversation
        print()


def serve(settings: Settings, host: str) -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=host, port=settings.port)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="company-chat")
    sub = parser.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="run the HTTP API")
    serve_p.add_argument("--host", default="127.0.0.1")

    chat_p = sub.add_parser("chat", help="interactive terminal chat against a running server")
    chat_p.add_argument("--url", default=None, help="server base URL")

    args = parser.parse_args(argv)
    settings = Settings()
    if args.command == "serve":
        serve(settings, args.host)
    else:
        chat_loop(args.url or f"http://127.0.0.1:{settings.port}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
