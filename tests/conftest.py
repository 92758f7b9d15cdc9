"""Shared fixtures for matching tests."""

import json

import pytest

from faq_match_engine.knowledge_registry import clear_knowledge_registry
from faq_match_engine.models import KnowledgeEntry

TWIN_HEALTH_RECORD = {
    "question": "What is Twin Health?",
    "answer": "Twin Health is a metabolic care platform.",
    "tags": ["twin health", "overview"],
    "source": "FAQ",
}


@pytest.fixture()
def twin_health_entry():
    """The single Twin Health overview entry."""
    return KnowledgeEntry.from_dict(TWIN_HEALTH_RECORD)


@pytest.fixture()
def faq_entries(twin_health_entry):
    """A small knowledge base with distinct topics."""
    return [
        twin_health_entry,
        KnowledgeEntry(
            question="How do I reset my password?",
            answer="Open settings and choose <b>Reset password</b>.",
            tags=("password", "login"),
            category="Account",
            source="Help Center",
        ),
        KnowledgeEntry(
            question="Which sensors does the program use?",
            answer="Members receive a glucose monitor and a smart scale.",
            tags=("sensors", "glucose monitor"),
            category="Program",
        ),
    ]


@pytest.fixture()
def knowledge_file(tmp_path):
    """JSON knowledge document holding the Twin Health entry."""
    path = tmp_path / "knowledge_base.json"
    path.write_text(json.dumps({"entries": [TWIN_HEALTH_RECORD]}), encoding="utf-8")
    return path


@pytest.fixture()
def clean_registry():
    """Reset the knowledge registry around a test."""
    clear_knowledge_registry()
    yield
    clear_knowledge_registry()
