from __future__ import annotations

from dataclasses import dataclass

from .base import LootEntry


UNKNOWN = "unknown"


@dataclass
class LoadContext:
    """Etat de chargement, utilise uniquement pour les messages de diagnostic."""

    current_table: str | None = None
    last_table: str | None = None
    last_entry: str | None = None

    def begin_table(self, name: str) -> None:
        self.current_table = name

    def entry_loaded(self, entry: LootEntry) -> None:
        self.last_entry = entry.describe()

    def end_table(self) -> None:
        if self.current_table is not None:
            self.last_table = self.current_table
        self.current_table = None

    def snapshot(self) -> dict[str, str]:
        return {
            "table": self.current_table or UNKNOWN,
            "last_table": self.last_table or UNKNOWN,
            "last_entry": self.last_entry or UNKNOWN,
        }
