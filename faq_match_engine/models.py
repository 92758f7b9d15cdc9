"""Data models for knowledge entries and match results."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "Knowledge Base"

_TEXT_FIELDS = ("question", "answer", "category", "source", "last_updated")


@dataclass(frozen=True)
class KnowledgeEntry:
    """A single static FAQ record.

    Parameters
    ----------
    question : str
        Canonical question text.
    answer : str
        Answer text. May embed simple markup, which is never interpreted.
    tags : tuple[str, ...]
        Ordered tag phrases, possibly empty.
    category : str
        Optional category label.
    source : str
        Optional attribution label.
    last_updated : str
        Optional display-only date string.
    """

    question: str = ""
    answer: str = ""
    tags: tuple[str, ...] = ()
    category: str = ""
    source: str = ""
    last_updated: str = ""

    def __post_init__(self) -> None:
        for name in _TEXT_FIELDS:
            object.__setattr__(self, name, _as_text(getattr(self, name)))
        object.__setattr__(self, "tags", _as_tags(self.tags))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> KnowledgeEntry:
        """Construct an entry from a JSON-like record.

        Field coercion is shared with direct construction: ``None`` takes
        the default, a single string tag becomes a one-element tuple and
        other values are coerced with ``str()``.

        Parameters
        ----------
        raw : Mapping[str, Any]
            Record from a knowledge document.

        Returns
        -------
        KnowledgeEntry
        """
        values = {name: raw.get(name) for name in _TEXT_FIELDS}
        return cls(tags=raw.get("tags"), **values)


@dataclass
class MatchResult:
    """Outcome of a successful match.

    Parameters
    ----------
    answer : str
        Answer text copied verbatim from the winning entry.
    source : str
        Attribution label, or the configured default when the entry has none.
    score : float
        Aggregate relevance score, for diagnostics.
    question : str
        Question of the winning entry, for diagnostics.
    """

    answer: str
    source: str = DEFAULT_SOURCE
    score: float = 0.0
    question: str = ""


@dataclass
class ScoreBreakdown:
    """Per-term score contributions for one entry."""

    containment: float = 0.0
    tags: float = 0.0
    category: float = 0.0
    question_overlap: float = 0.0
    answer_overlap: float = 0.0
    attributed: bool = False

    @property
    def total(self) -> float:
        """Relevance score. ``attributed`` only orders exact ties."""
        return self.containment + self.tags + self.category + self.question_overlap + self.answer_overlap


@dataclass
class Reply:
    """Text returned to the user for one message.

    Parameters
    ----------
    text : str
        Rendered reply, either the formatted answer or the default response.
    matched : bool
        Whether a knowledge entry was accepted.
    result : MatchResult | None
        The accepted match, if any.
    """

    text: str
    matched: bool = False
    result: MatchResult | None = field(default=None)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, (list, tuple)):
        return tuple(_as_text(tag) for tag in value if tag is not None)
    logger.debug("Ignoring tags of unsupported type %s", type(value).__name__)
    return ()
