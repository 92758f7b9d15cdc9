"""Turn match results into the reply text shown to a user."""

from __future__ import annotations

import logging

import jinja2

from faq_match_engine.config import ResponseConfig
from faq_match_engine.matcher import Matcher
from faq_match_engine.models import MatchResult, Reply

logger = logging.getLogger(__name__)


class Responder:
    """Answer user messages from a matcher, falling back to a default response.

    Parameters
    ----------
    matcher : Matcher
        Matcher over a loaded knowledge base.
    responses : ResponseConfig | None
        Reply template and canned texts.
    """

    def __init__(self, matcher: Matcher, responses: ResponseConfig | None = None) -> None:
        self._matcher = matcher
        self._responses = responses or ResponseConfig()
        env = jinja2.Environment(autoescape=False, keep_trailing_newline=True, undefined=jinja2.StrictUndefined)
        self._template = env.from_string(self._responses.reply_template)

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    @property
    def welcome_message(self) -> str:
        return self._responses.welcome_message

    @property
    def suggestions(self) -> list[str]:
        return list(self._responses.suggestions)

    def respond(self, message: str | None) -> Reply | None:
        """Return the reply for *message*, or ``None`` if it is blank.

        Parameters
        ----------
        message : str | None
            Raw user message.

        Returns
        -------
        Reply | None
            A rendered answer when an entry is accepted, otherwise the
            default response.
        """
        if not message or not message.strip():
            return None

        result = self._matcher.find_best_match(message)
        if result is None:
            return Reply(text=self._responses.default_response)
        return Reply(text=self.format(result), matched=True, result=result)

    def format(self, result: MatchResult) -> str:
        """Render *result* with the configured reply template."""
        return self._template.render(
            answer=result.answer,
            source=result.source,
            score=result.score,
            question=result.question,
        )
