"""Knowledge base container and static document loading."""

from faq_match_engine.knowledge.base import KnowledgeBase
from faq_match_engine.knowledge.static import load_knowledge_base, read_knowledge_document

__all__ = ["KnowledgeBase", "load_knowledge_base", "read_knowledge_document"]
