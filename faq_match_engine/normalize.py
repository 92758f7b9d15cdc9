"""Text normalization and tokenization for FAQ matching."""

from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^a-z0-9_\s]")
_WHITESPACE = re.compile(r"\s+")

MIN_KEYWORD_LENGTH = 3

STOP_WORDS: frozenset[str] = frozenset(
    {
        # articles and determiners
        "a", "an", "the", "this", "that", "these", "those", "some", "any", "each", "every",
        # prepositions
        "about", "above", "across", "after", "against", "along", "among", "around", "at",
        "before", "behind", "below", "between", "by", "down", "during", "for", "from", "in",
        "inside", "into", "near", "of", "off", "on", "onto", "out", "over", "since", "through",
        "to", "toward", "under", "until", "up", "upon", "with", "within", "without",
        # auxiliary and modal verbs
        "am", "is", "are", "was", "were", "be", "been", "being", "do", "does", "did", "doing",
        "have", "has", "had", "having", "can", "could", "will", "would", "shall", "should",
        "may", "might", "must",
        # pronouns
        "i", "me", "my", "mine", "myself", "you", "your", "yours", "yourself", "he", "him",
        "his", "she", "her", "hers", "it", "its", "we", "us", "our", "ours", "they", "them",
        "their", "theirs",
        # conjunctions
        "and", "but", "or", "nor", "so", "yet", "if", "then", "than", "because", "while",
        # question words and fillers
        "what", "which", "who", "whom", "whose", "when", "where", "why", "how", "there",
        "here", "just", "also", "very", "too", "not", "no", "yes", "please", "tell",
    }
)


def normalize(text: str | None) -> str:
    """Lowercase *text*, replace punctuation with spaces and collapse whitespace.

    Parameters
    ----------
    text : str | None
        Raw input. ``None`` is treated as empty.

    Returns
    -------
    str
        Normalized text; ``""`` for empty or punctuation-only input.
    """
    if not text:
        return ""
    lowered = _NON_WORD.sub(" ", str(text).lower())
    return _WHITESPACE.sub(" ", lowered).strip()


def tokenize(text: str | None) -> list[str]:
    """Split normalized *text* into word tokens.

    Apostrophes count as punctuation, so ``"don't"`` yields ``["don", "t"]``.
    """
    normalized = normalize(text)
    return normalized.split(" ") if normalized else []


def extract_keywords(text: str | None) -> list[str]:
    """Return distinct content tokens of *text* in first-seen order.

    Drops tokens shorter than ``MIN_KEYWORD_LENGTH`` and members of
    ``STOP_WORDS``.

    Parameters
    ----------
    text : str | None
        Raw or normalized text.

    Returns
    -------
    list[str]
    """
    keywords: list[str] = []
    seen: set[str] = set()
    for token in tokenize(text):
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS or token in seen:
            continue
        seen.add(token)
        keywords.append(token)
    return keywords


def contains_phrase(haystack: str, needle: str) -> bool:
    """Word-boundary containment of two already-normalized strings."""
    if not needle or not haystack:
        return False
    return f" {needle} " in f" {haystack} "
