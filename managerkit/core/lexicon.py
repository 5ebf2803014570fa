# -*- coding: utf-8 -*-
"""
lexicon

Topic-based localization entries for manager pages.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping


logger = logging.getLogger(__name__)

DEFAULT_ENTRIES: dict[str, str] = {
    "access_denied": "Access denied.",
    "permission_denied": "You do not have permission to view this page.",
}

_PLACEHOLDER = re.compile(r"\[\[\+([\w.\-]+)\]\]")


class Lexicon:
    """Load localization topics and look up their entries.

    Topics are read from ``<directory>/<language>/<topic>.json`` when a
    directory is configured, or from the ``topics`` mapping given at
    construction. A topic may be namespaced as ``namespace:topic``; only the
    topic part selects the file.
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        *,
        language: str = "en",
        topics: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        """Configure the topic source and preload the built-in entries."""
        self._directory = Path(directory) if directory is not None else None
        self._language = language
        self._topics = {name: dict(entries) for name, entries in (topics or {}).items()}
        self._entries: dict[str, str] = dict(DEFAULT_ENTRIES)
        self._loaded: list[str] = []

    @property
    def language(self) -> str:
        return self._language

    @property
    def loaded_topics(self) -> tuple[str, ...]:
        return tuple(self._loaded)

    def load(self, topic: str) -> bool:
        """Merge the entries of ``topic``; return ``False`` when it is missing."""
        if topic in self._loaded:
            return True
        entries = self._read_topic(topic)
        if entries is None:
            logger.debug("Lexicon topic %s not found for %s", topic, self._language)
            return False
        self._entries.update(entries)
        self._loaded.append(topic)
        return True

    def fetch(self, prefix: str = "") -> dict[str, str]:
        """Return all loaded entries whose key starts with ``prefix``."""
        return {key: value for key, value in self._entries.items() if key.startswith(prefix)}

    def __call__(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        """Return the entry for ``key`` with ``[[+name]]`` placeholders filled."""
        text = self._entries.get(key, key)
        if not params:
            return text
        return _PLACEHOLDER.sub(
            lambda match: str(params.get(match.group(1), match.group(0))), text
        )

    def _read_topic(self, topic: str) -> dict[str, str] | None:
        name = topic.split(":")[-1]
        if topic in self._topics:
            return self._topics[topic]
        if name in self._topics:
            return self._topics[name]
        if self._directory is None:
            return None
        path = self._directory / self._language / f"{name}.json"
        if not path.is_file():
            return None
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            logger.warning("Lexicon topic file %s is not a JSON object", path)
            return None
        return {str(key): str(value) for key, value in data.items()}


__all__ = ["DEFAULT_ENTRIES", "Lexicon"]


# The End
