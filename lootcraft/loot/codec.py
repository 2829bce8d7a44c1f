from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping, Union

from lootcraft.core.errors import ConfigFieldError

from .base import LootEntry
from .context import LoadContext
from .registry import LootRegistry
from .schemas import TYPE_KEY


LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loaded:
    entry: LootEntry


@dataclass(frozen=True)
class FieldFailure:
    kind: str
    field: str
    reason: str = ""


EntryResult = Union[Loaded, FieldFailure]


def decode_entry(raw: object, registry: LootRegistry, *, kind: str | None = None) -> EntryResult:
    """
    Construit une entree de loot a partir d'un mapping de configuration.

    Le tag de type est lu sous "==" sauf si `kind` est fourni. Ne leve jamais:
    toute erreur est renvoyee sous forme de FieldFailure nommant le champ fautif.
    """
    if not isinstance(raw, Mapping):
        return FieldFailure(kind=kind or "?", field=TYPE_KEY, reason="entree non-objet")

    tag = kind if kind is not None else raw.get(TYPE_KEY)
    if not isinstance(tag, str) or not tag:
        return FieldFailure(kind="?", field=TYPE_KEY, reason="type de loot manquant")

    parser = registry.parser_for(tag)
    if parser is None:
        return FieldFailure(kind=tag, field=TYPE_KEY, reason=f"type de loot inconnu: {tag}")

    try:
        return Loaded(parser(raw))
    except ConfigFieldError as exc:
        return FieldFailure(kind=tag, field=exc.field, reason=exc.reason)


def encode_entry(entry: LootEntry, registry: LootRegistry) -> dict[str, Any]:
    out: dict[str, Any] = {TYPE_KEY: registry.tag_for(entry)}
    out.update(entry.serialize())
    return out


def report_failure(failure: FieldFailure, context: LoadContext | None = None) -> None:
    state = (context or LoadContext()).snapshot()
    LOG.error(
        "loot codec: echec du chargement %s, champ: %s (%s) | table: %s | derniere table chargee: %s | derniere entree: %s",
        failure.kind,
        failure.field,
        failure.reason,
        state["table"],
        state["last_table"],
        state["last_entry"],
        extra={
            "loot_kind": failure.kind,
            "loot_field": failure.field,
            "loot_table": state["table"],
            "loot_last_table": state["last_table"],
            "loot_last_entry": state["last_entry"],
        },
    )
