"""In-memory knowledge base with an explicit ready state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from faq_match_engine.models import KnowledgeEntry


class KnowledgeBase:
    """Read-only collection of knowledge entries.

    Replaces a global entries list and loaded flag: callers pass a
    ``KnowledgeBase`` to the matcher, and a base that is not ``ready`` is
    treated as empty.

    Parameters
    ----------
    entries : Iterable[KnowledgeEntry]
        Entries in match priority order. Earlier entries win ties.
    ready : bool
        Whether the entries finished loading.
    name : str
        Label used in log messages.
    """

    def __init__(self, entries: Iterable[KnowledgeEntry] = (), *, ready: bool = True, name: str = "") -> None:
        self._entries: tuple[KnowledgeEntry, ...] = tuple(entries)
        self._ready = ready
        self.name = name

    @classmethod
    def unavailable(cls, name: str = "") -> KnowledgeBase:
        """Return an empty knowledge base that never became ready."""
        return cls((), ready=False, name=name)

    @property
    def entries(self) -> tuple[KnowledgeEntry, ...]:
        return self._entries

    @property
    def ready(self) -> bool:
        return self._ready

    def __iter__(self) -> Iterator[KnowledgeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KnowledgeBase(name={self.name!r}, entries={len(self._entries)}, ready={self._ready})"
