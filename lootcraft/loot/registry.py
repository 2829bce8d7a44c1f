from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from .base import LootEntry
from .external_item import ExternalItem
from .message import Message


EntryParser = Callable[[Mapping[str, Any]], LootEntry]


class LootRegistry:
    """Associe un tag de type serialise a la variante de loot correspondante."""

    def __init__(self) -> None:
        self._parsers: dict[str, EntryParser] = {}
        self._tags: dict[type, str] = {}

    def register(self, entry_type: type[LootEntry], *aliases: str) -> None:
        if inspect.isabstract(entry_type):
            raise TypeError(f"{entry_type.__name__}: variante incomplete (methodes abstraites)")
        tag = entry_type.kind
        if not tag:
            raise ValueError(f"{entry_type.__name__}: kind manquant")
        self._parsers[tag] = entry_type.from_config
        self._tags[entry_type] = tag
        for alias in aliases:
            self._parsers[alias] = entry_type.from_config

    def parser_for(self, tag: str) -> EntryParser | None:
        return self._parsers.get(tag)

    def tag_for(self, entry: LootEntry) -> str:
        tag = self._tags.get(type(entry))
        if tag is None:
            raise KeyError(f"Variante de loot non enregistree: {type(entry).__name__}")
        return tag

    def tags(self) -> list[str]:
        return sorted(self._parsers)


def build_default_registry() -> LootRegistry:
    registry = LootRegistry()
    registry.register(Message)
    # anciens fichiers: tag du plugin d'origine
    registry.register(ExternalItem, "MythicMobsItem")
    return registry
