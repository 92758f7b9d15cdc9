"""Tests for the knowledge base container and static document loading."""

import json

import pytest

from faq_match_engine.knowledge import KnowledgeBase, load_knowledge_base, read_knowledge_document
from faq_match_engine.models import KnowledgeEntry


def test_knowledge_base_defaults():
    kb = KnowledgeBase([KnowledgeEntry(question="Q")])
    assert kb.ready
    assert len(kb) == 1
    assert list(kb) == [KnowledgeEntry(question="Q")]


def test_unavailable_knowledge_base():
    kb = KnowledgeBase.unavailable("remote")
    assert not kb.ready
    assert kb.entries == ()
    assert kb.name == "remote"


def test_knowledge_base_copies_entries():
    entries = [KnowledgeEntry(question="Q")]
    kb = KnowledgeBase(entries)
    entries.append(KnowledgeEntry(question="later"))
    assert len(kb) == 1


def test_read_json_document(knowledge_file):
    entries = read_knowledge_document(knowledge_file)
    assert len(entries) == 1
    assert entries[0].question == "What is Twin Health?"
    assert entries[0].tags == ("twin health", "overview")


def test_read_yaml_document(tmp_path):
    path = tmp_path / "faq.yaml"
    path.write_text(
        "entries:\n  - question: How do I log in?\n    answer: Use your email.\n    tags: [login]\n",
        encoding="utf-8",
    )
    entries = read_knowledge_document(path)
    assert entries == [KnowledgeEntry(question="How do I log in?", answer="Use your email.", tags=("login",))]


def test_read_bare_list_document(tmp_path):
    path = tmp_path / "faq.json"
    path.write_text(json.dumps([{"question": "Q", "answer": "A"}]), encoding="utf-8")
    assert read_knowledge_document(path) == [KnowledgeEntry(question="Q", answer="A")]


def test_non_list_entries_yield_nothing(tmp_path):
    path = tmp_path / "faq.json"
    path.write_text(json.dumps({"entries": {"question": "Q"}}), encoding="utf-8")
    assert read_knowledge_document(path) == []


def test_non_mapping_records_are_skipped(tmp_path):
    path = tmp_path / "faq.json"
    path.write_text(json.dumps({"entries": ["oops", {"question": "Q"}, 3]}), encoding="utf-8")
    assert read_knowledge_document(path) == [KnowledgeEntry(question="Q")]


def test_read_missing_document_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Knowledge document not found"):
        read_knowledge_document(tmp_path / "absent.json")


def test_read_unsupported_suffix_raises(tmp_path):
    path = tmp_path / "faq.csv"
    path.write_text("question,answer\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported knowledge document format"):
        read_knowledge_document(path)


def test_read_invalid_yaml_raises(tmp_path):
    path = tmp_path / "faq.yaml"
    path.write_text("entries: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        read_knowledge_document(path)


def test_load_knowledge_base_ready(knowledge_file):
    kb = load_knowledge_base(knowledge_file)
    assert kb.ready
    assert kb.name == "knowledge_base"
    assert len(kb) == 1


def test_load_knowledge_base_missing_is_unavailable(tmp_path):
    kb = load_knowledge_base(tmp_path / "absent.json", name="remote")
    assert not kb.ready
    assert kb.name == "remote"
    assert len(kb) == 0


def test_load_knowledge_base_invalid_json_is_unavailable(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert not load_knowledge_base(path).ready
