"""Unified configuration for scoring weights, threshold and reply texts."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from faq_match_engine.models import DEFAULT_SOURCE

DEFAULT_KNOWLEDGE_BASE = "twin_health"
DEFAULT_REPLY_TEMPLATE = "{{ answer }}\n\n<em>Source: {{ source }}</em>"
DEFAULT_RESPONSE = (
    "I specialize in Twin Health, diabetes reversal, and metabolic health. Please ask a question "
    "related to these topics, and I'll be happy to help you!"
)
WELCOME_MESSAGE = (
    "Hello! I'm your Twin Health assistant. I can help you learn about reversing diabetes naturally "
    "using our Whole Body Digital Twin technology. How can I assist you now?"
)

SUGGESTIONS = (
    "What is Twin Health?",
    "How does it work?",
    "Benefits of Twin Health",
    "Who is eligible?",
    "Twin Health India",
    "How to join Twin Health program?",
)


@dataclass
class ScoringConfig:
    """Calibrated weight table and acceptance threshold.

    The weights and the threshold are coupled: changing one without the
    others shifts which messages are accepted. Entries carrying a source
    win exact score ties; attribution never adds to the score.

    Parameters
    ----------
    containment_bonus : float
        Awarded when message and question contain one another.
    tag_weight : float
        Awarded per tag phrase matched against the message.
    category_weight : float
        Awarded once when the category phrase matches the message.
    question_token_weight : float
        Awarded per message keyword found among the question keywords.
    answer_token_weight : float
        Awarded per message keyword found among the answer keywords.
    threshold : float
        Minimum aggregate score for a match to be accepted.
    """

    containment_bonus: float = 50.0
    tag_weight: float = 10.0
    category_weight: float = 8.0
    question_token_weight: float = 3.0
    answer_token_weight: float = 1.0
    threshold: float = 6.0

    def __post_init__(self) -> None:
        weights = {
            "containment_bonus": self.containment_bonus,
            "tag_weight": self.tag_weight,
            "category_weight": self.category_weight,
            "question_token_weight": self.question_token_weight,
            "answer_token_weight": self.answer_token_weight,
        }
        for name, value in weights.items():
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ValueError(msg)
        if self.threshold <= 0:
            msg = f"threshold must be > 0, got {self.threshold}"
            raise ValueError(msg)


@dataclass
class ResponseConfig:
    """Reply texts used when presenting a match to the user.

    Parameters
    ----------
    default_source : str
        Attribution used when the winning entry has no source.
    reply_template : str
        Jinja2 template rendered with ``answer``, ``source``, ``score`` and
        ``question``.
    default_response : str
        Text returned when no entry is accepted.
    welcome_message : str
        Greeting shown when a conversation starts.
    suggestions : list[str]
        Starter questions offered alongside the welcome message.
    """

    default_source: str = DEFAULT_SOURCE
    reply_template: str = DEFAULT_REPLY_TEMPLATE
    default_response: str = DEFAULT_RESPONSE
    welcome_message: str = WELCOME_MESSAGE
    suggestions: list[str] = field(default_factory=lambda: list(SUGGESTIONS))

    def __post_init__(self) -> None:
        if not self.default_source or not self.default_source.strip():
            msg = "default_source must be a non-empty string"
            raise ValueError(msg)


@dataclass
class EngineConfig:
    """Top-level configuration.

    Parameters
    ----------
    knowledge_base : str
        Registered knowledge base name or path to a knowledge document.
    scoring : ScoringConfig
        Weight table and threshold.
    responses : ResponseConfig
        Reply texts.
    """

    knowledge_base: str = DEFAULT_KNOWLEDGE_BASE
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    responses: ResponseConfig = field(default_factory=ResponseConfig)


def load_config(source: str | Path | dict[str, Any] | None = None) -> EngineConfig:
    """Load an EngineConfig from a YAML file, dict, or environment variables.

    Parameters
    ----------
    source : str | Path | dict | None
        A path to a YAML file, a raw dict, or ``None`` to use only
        environment variable overrides on defaults.

    Returns
    -------
    EngineConfig
    """
    raw: dict[str, Any] = {}

    if isinstance(source, dict):
        raw = source
    elif source is not None:
        path = Path(source)
        if path.is_file():
            raw = _load_yaml(path)

    scoring_raw = {k: v for k, v in (raw.get("scoring") or {}).items() if k in _field_names(ScoringConfig)}
    scoring_values = {k: float(v) for k, v in scoring_raw.items()}
    threshold = os.environ.get("FAQ_MATCH_THRESHOLD")
    if threshold is not None:
        scoring_values["threshold"] = float(threshold)

    responses_raw = raw.get("responses") or {}
    responses_values: dict[str, Any] = {
        k: str(v) for k, v in responses_raw.items() if k in _field_names(ResponseConfig) and k != "suggestions"
    }
    suggestions = responses_raw.get("suggestions")
    if suggestions is not None:
        responses_values["suggestions"] = [suggestions] if isinstance(suggestions, str) else [str(s) for s in suggestions]
    default_source = os.environ.get("FAQ_MATCH_DEFAULT_SOURCE")
    if default_source is not None:
        responses_values["default_source"] = default_source

    knowledge_base = os.environ.get("FAQ_MATCH_KNOWLEDGE_BASE", raw.get("knowledge_base", DEFAULT_KNOWLEDGE_BASE))

    return EngineConfig(
        knowledge_base=str(knowledge_base),
        scoring=ScoringConfig(**scoring_values),
        responses=ResponseConfig(**responses_values),
    )


def _field_names(cls: type) -> set[str]:
    return {f.name for f in fields(cls)}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file using PyYAML."""
    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}
