"""Package-level entry points: build_responder() and answer_message()."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from faq_match_engine.config import EngineConfig, load_config
from faq_match_engine.knowledge.static import load_knowledge_base
from faq_match_engine.knowledge_registry import resolve_knowledge_base
from faq_match_engine.matcher import Matcher
from faq_match_engine.models import Reply
from faq_match_engine.responder import Responder

logger = logging.getLogger(__name__)


def build_responder(config: EngineConfig | str | Path | dict[str, Any] | None = None) -> Responder:
    """Load the configured knowledge base and wrap it in a Responder.

    Parameters
    ----------
    config : EngineConfig | str | Path | dict | None
        An ``EngineConfig``, a YAML file path, a raw dict, or ``None``
        for defaults.

    Returns
    -------
    Responder
        Responder over the loaded knowledge base. If the document could not
        be read, the knowledge base is unavailable and every message gets
        the default response.

    Raises
    ------
    KeyError
        If the configured knowledge base is neither registered nor a file.

    Examples
    --------
    >>> responder = build_responder({"knowledge_base": "twin_health"})
    >>> responder.respond("What is Twin Health?").matched
    True
    """
    if not isinstance(config, EngineConfig):
        config = load_config(config)

    path = resolve_knowledge_base(config.knowledge_base)
    knowledge_base = load_knowledge_base(path)
    matcher = Matcher.from_config(knowledge_base, config)

    logger.debug("Built responder over %r (ready=%s)", knowledge_base.name, matcher.ready)
    return Responder(matcher, config.responses)


def answer_message(message: str, config: EngineConfig | str | Path | dict[str, Any] | None = None) -> Reply | None:
    """Answer a single message with a freshly built responder.

    Parameters
    ----------
    message : str
        Raw user message.
    config : EngineConfig | str | Path | dict | None
        Configuration source, see :func:`build_responder`.

    Returns
    -------
    Reply | None
        ``None`` for a blank message.
    """
    return build_responder(config).respond(message)
