from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Iterable, Iterator

from lootcraft.core.bundle import LootBundle
from lootcraft.core.errors import MissingReferenceError

from .base import LootEntry, RollContext
from .codec import FieldFailure, decode_entry, encode_entry, report_failure
from .context import LoadContext
from .registry import LootRegistry


LOG = logging.getLogger(__name__)


@dataclass
class LootTable:
    name: str
    entries: list[LootEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[LootEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, entry: LootEntry) -> None:
        self.entries.append(entry)

    def roll(
        self,
        ctx: RollContext,
        *,
        looting_bonus: float = 0.0,
        skip_missing: bool = False,
    ) -> LootBundle:
        """
        Tire chaque entree independamment et renvoie un bundle neuf.

        Un item externe introuvable remonte a l'appelant (MissingReferenceError),
        sauf si `skip_missing` est actif: l'entree est alors ignoree et journalisee.
        """
        bundle = LootBundle()
        for entry in self.entries:
            if not ctx.roller.check_hit(entry.probability):
                continue
            try:
                entry.roll(bundle, looting_bonus, ctx)
            except MissingReferenceError as exc:
                if not skip_missing:
                    raise
                LOG.warning("loot table %s: entree ignoree (%s)", self.name, exc)
        return bundle

    def serialize(self, registry: LootRegistry) -> list[dict[str, Any]]:
        return [encode_entry(entry, registry) for entry in self.entries]


def load_table(
    name: str,
    rows: Iterable[object],
    registry: LootRegistry,
    context: LoadContext | None = None,
) -> LootTable:
    """Chargement best-effort: une entree invalide est journalisee puis ignoree."""
    ctx = context if isinstance(context, LoadContext) else LoadContext()
    ctx.begin_table(name)
    table = LootTable(name=name)
    skipped = 0
    try:
        for row in rows:
            result = decode_entry(row, registry)
            if isinstance(result, FieldFailure):
                report_failure(result, ctx)
                skipped += 1
                continue
            table.add(result.entry)
            ctx.entry_loaded(result.entry)
    finally:
        ctx.end_table()

    if skipped:
        LOG.warning("loot table %s: %s entree(s) ignoree(s)", name, skipped)
    return table
