"""Weighted multi-field matching of user messages against knowledge entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from faq_match_engine.config import EngineConfig, ScoringConfig
from faq_match_engine.knowledge.base import KnowledgeBase
from faq_match_engine.models import DEFAULT_SOURCE, KnowledgeEntry, MatchResult, ScoreBreakdown
from faq_match_engine.normalize import contains_phrase, extract_keywords, normalize

logger = logging.getLogger(__name__)

_SCORE_DIGITS = 9


@dataclass(frozen=True)
class _Phrase:
    """Normalized phrase and whether it carries at least one keyword."""

    text: str
    has_keyword: bool

    @classmethod
    def of(cls, raw: str) -> _Phrase:
        return cls(text=normalize(raw), has_keyword=bool(extract_keywords(raw)))

    def matches(self, other: _Phrase) -> bool:
        """Equal, or one contains the other and the contained side has a keyword."""
        if not self.text or not other.text:
            return False
        if self.text == other.text:
            return True
        if other.has_keyword and contains_phrase(self.text, other.text):
            return True
        return self.has_keyword and contains_phrase(other.text, self.text)

    def mentions(self, label: _Phrase) -> bool:
        """Tag or category match: the label appears in this message, or this
        message is a keyword-bearing part of the label."""
        if not self.text or not label.text:
            return False
        if contains_phrase(self.text, label.text):
            return True
        return self.has_keyword and contains_phrase(label.text, self.text)


@dataclass(frozen=True)
class _IndexedEntry:
    entry: KnowledgeEntry
    question: _Phrase
    question_keywords: frozenset[str]
    answer_keywords: frozenset[str]
    tags: tuple[_Phrase, ...]
    category: _Phrase

    @classmethod
    def build(cls, entry: KnowledgeEntry) -> _IndexedEntry:
        return cls(
            entry=entry,
            question=_Phrase.of(entry.question),
            question_keywords=frozenset(extract_keywords(entry.question)),
            answer_keywords=frozenset(extract_keywords(entry.answer)),
            tags=tuple(_Phrase.of(tag) for tag in entry.tags),
            category=_Phrase.of(entry.category),
        )


class Matcher:
    """Score a message against every entry and return the best match.

    Entries are indexed once at construction and never mutated, so one
    matcher can answer any number of independent queries.

    Parameters
    ----------
    knowledge_base : KnowledgeBase | Iterable | None
        Knowledge base, or a plain iterable of ``KnowledgeEntry`` objects or
        mapping records. ``None`` behaves like a base that never loaded.
    scoring : ScoringConfig | None
        Weight table and threshold. Defaults to the calibrated table.
    default_source : str
        Attribution used when the winning entry has no source.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase | Iterable[KnowledgeEntry | Mapping[str, Any]] | None = None,
        scoring: ScoringConfig | None = None,
        *,
        default_source: str = DEFAULT_SOURCE,
    ) -> None:
        if knowledge_base is None:
            knowledge_base = KnowledgeBase.unavailable()
        elif not isinstance(knowledge_base, KnowledgeBase):
            knowledge_base = KnowledgeBase(_coerce_entry(item) for item in knowledge_base)
        self._knowledge_base = knowledge_base
        self._scoring = scoring or ScoringConfig()
        self._default_source = default_source
        self._index = tuple(_IndexedEntry.build(entry) for entry in knowledge_base)

    @classmethod
    def from_config(cls, knowledge_base: KnowledgeBase, config: EngineConfig) -> Matcher:
        """Construct a Matcher using the scoring and response settings of *config*."""
        return cls(knowledge_base, config.scoring, default_source=config.responses.default_source)

    @property
    def ready(self) -> bool:
        """Whether the knowledge base is loaded and non-empty."""
        return self._knowledge_base.ready and bool(self._index)

    @property
    def scoring(self) -> ScoringConfig:
        return self._scoring

    def explain(self, message: str, entry: KnowledgeEntry) -> ScoreBreakdown:
        """Return the per-term score contributions of *entry* for *message*."""
        return self._breakdown(_Phrase.of(message), extract_keywords(message), _IndexedEntry.build(entry))

    def score(self, message: str, entry: KnowledgeEntry) -> float:
        """Return the aggregate relevance score of *entry* for *message*."""
        return self.explain(message, entry).total

    def find_best_match(self, message: str | None) -> MatchResult | None:
        """Return the highest-scoring entry if it reaches the threshold.

        Parameters
        ----------
        message : str | None
            Raw user message.

        Returns
        -------
        MatchResult | None
            ``None`` for blank input, an unavailable or empty knowledge base,
            or when the best score falls below the threshold. On equal
            scores an entry with a source beats one without; otherwise the
            entry that comes first wins.
        """
        phrase = self._prepare(message)
        if phrase is None:
            return None
        keywords = extract_keywords(message)

        best: _IndexedEntry | None = None
        best_key: tuple[float, bool] = (0.0, False)
        best_score = 0.0
        for indexed in self._index:
            breakdown = self._breakdown(phrase, keywords, indexed)
            if breakdown.total <= 0:
                continue
            key = _rank_key(breakdown)
            if best is None or key > best_key:
                best, best_key, best_score = indexed, key, breakdown.total

        if best is None or best_score < self._scoring.threshold:
            logger.debug("No match for %r (best score %.2f)", phrase.text, best_score)
            return None

        result = self._result(best.entry, best_score)
        logger.info("Matched %r to %r score=%.2f", phrase.text, result.question, best_score)
        return result

    def rank(self, message: str | None, *, top_k: int = 5) -> list[MatchResult]:
        """Return up to *top_k* candidates with a positive score, best first.

        Candidates are not filtered by the threshold. Ordering matches
        :meth:`find_best_match`: score, then attribution, then knowledge
        base order.
        """
        phrase = self._prepare(message)
        if phrase is None or top_k <= 0:
            return []
        keywords = extract_keywords(message)

        scored: list[tuple[tuple[float, bool], float, _IndexedEntry]] = []
        for indexed in self._index:
            breakdown = self._breakdown(phrase, keywords, indexed)
            if breakdown.total > 0:
                scored.append((_rank_key(breakdown), breakdown.total, indexed))
        scored.sort(key=lambda item: item[0], reverse=True)
        return [self._result(indexed.entry, total) for _, total, indexed in scored[:top_k]]

    def _prepare(self, message: str | None) -> _Phrase | None:
        if not self._knowledge_base.ready:
            logger.warning("Knowledge base %r is not ready; no match attempted", self._knowledge_base.name)
            return None
        if not self._index:
            return None
        phrase = _Phrase.of(message or "")
        return phrase if phrase.text else None

    def _breakdown(self, message: _Phrase, keywords: list[str], indexed: _IndexedEntry) -> ScoreBreakdown:
        weights = self._scoring
        breakdown = ScoreBreakdown()

        if message.matches(indexed.question):
            breakdown.containment = weights.containment_bonus

        matched_tags = sum(1 for tag in indexed.tags if message.mentions(tag))
        breakdown.tags = matched_tags * weights.tag_weight

        if message.mentions(indexed.category):
            breakdown.category = weights.category_weight

        breakdown.question_overlap = weights.question_token_weight * sum(
            1 for keyword in keywords if keyword in indexed.question_keywords
        )
        breakdown.answer_overlap = weights.answer_token_weight * sum(
            1 for keyword in keywords if keyword in indexed.answer_keywords
        )

        breakdown.attributed = bool(indexed.entry.source.strip())
        return breakdown

    def _result(self, entry: KnowledgeEntry, score: float) -> MatchResult:
        return MatchResult(
            answer=entry.answer,
            source=entry.source.strip() or self._default_source,
            score=score,
            question=entry.question,
        )


def find_best_match(
    message: str | None,
    entries: KnowledgeBase | Iterable[KnowledgeEntry | Mapping[str, Any]] | None,
    config: ScoringConfig | EngineConfig | None = None,
) -> MatchResult | None:
    """Match *message* against *entries* in a single call.

    Parameters
    ----------
    message : str | None
        Raw user message.
    entries : KnowledgeBase | Iterable | None
        Entries to score. ``None`` means the knowledge base is unavailable.
    config : ScoringConfig | EngineConfig | None
        Scoring settings. An ``EngineConfig`` also supplies the default source.

    Returns
    -------
    MatchResult | None
    """
    if isinstance(config, EngineConfig):
        return Matcher(entries, config.scoring, default_source=config.responses.default_source).find_best_match(
            message
        )
    return Matcher(entries, config).find_best_match(message)


def _coerce_entry(item: KnowledgeEntry | Mapping[str, Any]) -> KnowledgeEntry:
    if isinstance(item, KnowledgeEntry):
        return item
    return KnowledgeEntry.from_dict(item)


def _rank_key(breakdown: ScoreBreakdown) -> tuple[float, bool]:
    """Order by score, then attribution. Rounding keeps float summation noise from splitting ties."""
    return (round(breakdown.total, _SCORE_DIGITS), breakdown.attributed)
