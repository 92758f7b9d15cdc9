"""Interactive console chat over a knowledge base.

Usage::

    python -m faq_match_engine --config engine.yaml
    python -m faq_match_engine --knowledge-base path/to/knowledge_base.json
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from faq_match_engine.api import build_responder
from faq_match_engine.config import load_config


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="faq_match_engine", description="Chat with a FAQ knowledge base.")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--knowledge-base", help="registered knowledge base name or document path")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    config = load_config(args.config)
    if args.knowledge_base:
        config.knowledge_base = args.knowledge_base

    try:
        responder = build_responder(config)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}")
        return 2

    print(f"\n{responder.welcome_message}\n")
    if responder.suggestions:
        print("Try asking:")
        for suggestion in responder.suggestions:
            print(f"  - {suggestion}")
    print("Type 'exit' to quit.")

    while True:
        try:
            user_input = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if user_input.strip().lower() == "exit":
            break
        reply = responder.respond(user_input)
        if reply is not None:
            print(f"\n{reply.text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
