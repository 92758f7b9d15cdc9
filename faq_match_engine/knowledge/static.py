"""Static knowledge documents: read JSON or YAML files into entries."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from faq_match_engine.knowledge.base import KnowledgeBase
from faq_match_engine.models import KnowledgeEntry

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def read_knowledge_document(path: str | Path) -> list[KnowledgeEntry]:
    """Read a knowledge document into a list of entries.

    The document is either a mapping with an ``entries`` list or a bare
    list of records. A non-list ``entries`` value yields no entries, and
    records that are not mappings are skipped.

    Parameters
    ----------
    path : str | Path
        Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns
    -------
    list[KnowledgeEntry]

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the suffix is unsupported or the document cannot be parsed.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Knowledge document not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = f"Unsupported knowledge document format: {path.suffix!r}"
        raise ValueError(msg)

    with open(path, encoding="utf-8") as fh:
        try:
            data: Any = json.load(fh) if suffix == ".json" else yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in knowledge document {path}: {exc}"
            raise ValueError(msg) from exc

    if isinstance(data, Mapping):
        records = data.get("entries")
    else:
        records = data
    if not isinstance(records, list):
        logger.warning("Knowledge document %s has no entries list", path)
        return []

    entries: list[KnowledgeEntry] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.warning("Skipping knowledge record %d in %s: expected a mapping", index, path)
            continue
        entries.append(KnowledgeEntry.from_dict(record))

    logger.debug("Read %d knowledge entries from %s", len(entries), path)
    return entries


def load_knowledge_base(path: str | Path, *, name: str = "") -> KnowledgeBase:
    """Load a knowledge document, degrading to an unavailable base on failure.

    Parameters
    ----------
    path : str | Path
        Path to the knowledge document.
    name : str
        Label for the knowledge base. Defaults to the file stem.

    Returns
    -------
    KnowledgeBase
        A ready knowledge base, or an unavailable one if reading failed.
    """
    path = Path(path)
    name = name or path.stem
    try:
        entries = read_knowledge_document(path)
    except (OSError, ValueError) as exc:
        logger.error("Knowledge base %r failed to load from %s: %s", name, path, exc)
        return KnowledgeBase.unavailable(name)

    logger.info("Loaded knowledge base %r: %d entries", name, len(entries))
    return KnowledgeBase(entries, name=name)
