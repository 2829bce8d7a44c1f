from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Iterable, Protocol

from lootcraft.core.errors import DataError


class ItemProvider(Protocol):
    """
    Fournisseur d'items externe.

    `resolve` renvoie une instance neuve de l'item reference (avec un attribut
    `amount` modifiable), ou None si la reference est inconnue.
    """

    def resolve(self, reference: str) -> Any | None: ...


@dataclass(frozen=True)
class ItemDef:
    id: str
    name: str
    rarity: str = "common"
    description: str = ""


@dataclass
class ItemStack:
    item_id: str
    name: str
    amount: int = 1
    rarity: str = "common"
    description: str = ""


def normalize_item_id(value: object) -> str:
    raw = str(value or "").strip().casefold()
    return re.sub(r"[^a-z0-9_:-]+", "_", raw).strip("_")


class ItemCatalog:
    def __init__(self, defs: Iterable[ItemDef] | None = None) -> None:
        self._defs: dict[str, ItemDef] = {}
        for item in defs or ():
            self._defs[item.id] = item

    def __contains__(self, reference: object) -> bool:
        return normalize_item_id(reference) in self._defs

    def __len__(self) -> int:
        return len(self._defs)

    def get(self, reference: str) -> ItemDef | None:
        return self._defs.get(normalize_item_id(reference))

    def register(self, payload: dict) -> ItemDef:
        if not isinstance(payload, dict):
            raise DataError("item payload invalide (non-objet)")

        item_id = normalize_item_id(payload.get("id"))
        if not item_id:
            raise DataError("item id invalide")

        name = str(payload.get("name") or "").strip()
        if not name:
            raise DataError(f"{item_id}: item name invalide")

        rarity = str(payload.get("rarity") or "common").strip().casefold() or "common"
        description = str(payload.get("description") or "").strip()

        item = ItemDef(id=item_id, name=name, rarity=rarity, description=description)
        self._defs[item_id] = item
        return item

    def resolve(self, reference: str) -> ItemStack | None:
        item = self.get(reference)
        if item is None:
            return None
        return ItemStack(
            item_id=item.id,
            name=item.name,
            amount=1,
            rarity=item.rarity,
            description=item.description,
        )
