"""Tests for knowledge and result data models."""

import dataclasses

import pytest

from faq_match_engine.models import KnowledgeEntry, MatchResult, Reply, ScoreBreakdown


def test_entry_from_dict_full():
    entry = KnowledgeEntry.from_dict(
        {
            "question": "What is Twin Health?",
            "answer": "A platform.",
            "tags": ["twin health", "overview"],
            "category": "General",
            "source": "FAQ",
            "last_updated": "2024-05-01",
        }
    )
    assert entry.tags == ("twin health", "overview")
    assert entry.category == "General"
    assert entry.last_updated == "2024-05-01"


def test_entry_from_dict_minimal():
    entry = KnowledgeEntry.from_dict({"question": "Q"})
    assert entry.answer == ""
    assert entry.tags == ()
    assert entry.category == ""
    assert entry.source == ""


def test_entry_from_dict_none_values():
    entry = KnowledgeEntry.from_dict({"question": None, "tags": None, "source": None})
    assert entry == KnowledgeEntry()


def test_entry_from_dict_single_string_tag():
    assert KnowledgeEntry.from_dict({"tags": "billing"}).tags == ("billing",)


def test_entry_from_dict_coerces_values():
    entry = KnowledgeEntry.from_dict({"question": 42, "tags": ["a", 7, None]})
    assert entry.question == "42"
    assert entry.tags == ("a", "7")


def test_entry_from_dict_ignores_unsupported_tags():
    assert KnowledgeEntry.from_dict({"tags": {"nested": "mapping"}}).tags == ()


def test_entry_is_immutable():
    entry = KnowledgeEntry(question="Q")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.question = "changed"


def test_match_result_defaults():
    result = MatchResult(answer="text")
    assert result.source == "Knowledge Base"
    assert result.score == 0.0
    assert result.question == ""


def test_score_breakdown_total():
    breakdown = ScoreBreakdown(containment=50.0, tags=10.0, question_overlap=3.0, attributed=True)
    assert breakdown.total == 63.0


def test_entry_constructor_applies_defaults_for_none():
    entry = KnowledgeEntry(question="Q", answer="A", tags=None, category=None, source=None, last_updated=None)
    assert entry == KnowledgeEntry(question="Q", answer="A")
    assert entry.tags == ()
    assert entry.source == ""


def test_entry_constructor_coerces_tags():
    assert KnowledgeEntry(tags="billing").tags == ("billing",)
    assert KnowledgeEntry(tags=["a", None, 3]).tags == ("a", "3")


def test_reply_defaults():
    reply = Reply(text="fallback")
    assert reply.matched is False
    assert reply.result is None
