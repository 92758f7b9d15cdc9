"""FAQ matching engine: score user messages against a static knowledge base."""

from faq_match_engine.api import answer_message, build_responder
from faq_match_engine.config import EngineConfig, ResponseConfig, ScoringConfig, load_config
from faq_match_engine.knowledge import KnowledgeBase, load_knowledge_base, read_knowledge_document
from faq_match_engine.knowledge_registry import list_knowledge_bases, register_knowledge_base
from faq_match_engine.matcher import Matcher, find_best_match
from faq_match_engine.models import KnowledgeEntry, MatchResult, Reply, ScoreBreakdown
from faq_match_engine.normalize import extract_keywords, normalize, tokenize
from faq_match_engine.responder import Responder

__all__ = [
    "EngineConfig",
    "KnowledgeBase",
    "KnowledgeEntry",
    "MatchResult",
    "Matcher",
    "Reply",
    "Responder",
    "ResponseConfig",
    "ScoreBreakdown",
    "ScoringConfig",
    "answer_message",
    "build_responder",
    "extract_keywords",
    "find_best_match",
    "list_knowledge_bases",
    "load_config",
    "load_knowledge_base",
    "normalize",
    "read_knowledge_document",
    "register_knowledge_base",
    "tokenize",
]
