from __future__ import annotations

import logging
from typing import Any, Mapping

from lootcraft.core.bundle import LootBundle
from lootcraft.core.display import DisplayRecord
from lootcraft.core.errors import MissingReferenceError

from .base import LootEntry, RollContext
from .schemas import ExternalItemConfig, parse_config


LOG = logging.getLogger(__name__)

DEFAULT_AMOUNT = 1


class ExternalItem(LootEntry):
    """
    Item fourni par un catalogue externe, avec une quantite tiree entre deux bornes.

    La reference `item_id` est opaque: seul le fournisseur d'items sait la resoudre.
    """

    kind = "ExternalItem"
    FIELDS = ("Probability", "ItemID", "Amount", "AmountLower", "AmountUpper")

    def __init__(
        self,
        item_id: str,
        amount_lower: int = DEFAULT_AMOUNT,
        amount_upper: int | None = None,
        probability: float = 100.0,
    ) -> None:
        super().__init__(probability)
        self.item_id = item_id
        self.amount_lower = max(0, int(amount_lower))
        upper = self.amount_lower if amount_upper is None else int(amount_upper)
        self.amount_upper = max(upper, self.amount_lower)

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> ExternalItem:
        config = parse_config(ExternalItemConfig, raw)
        lower, upper = config.bounds()
        return cls(config.item_id, lower, upper, config.probability)

    def roll(self, bundle: LootBundle, looting_bonus: float, ctx: RollContext) -> None:
        # looting_bonus: sans effet sur la quantite de cette variante
        amount = ctx.roller.roll_int(self.amount_lower, self.amount_upper)
        if ctx.items is None:
            raise MissingReferenceError(self.item_id)
        item = ctx.items.resolve(self.item_id)
        if item is None:
            raise MissingReferenceError(self.item_id)
        item.amount = amount
        bundle.add_item(item)
        LOG.debug("loot: %s x%s", self.item_id, amount)

    # ---------- Edition ----------
    def modify_amount(self, delta: int, both: bool) -> bool:
        if both:
            self.amount_lower = max(0, self.amount_lower + delta)
        self.amount_upper += delta
        # la borne haute ne descend jamais sous la borne basse
        if self.amount_upper < self.amount_lower:
            self.amount_upper = self.amount_lower
        return True

    def reset_amount(self) -> bool:
        self.amount_lower = DEFAULT_AMOUNT
        self.amount_upper = DEFAULT_AMOUNT
        return True

    # ---------- Affichage ----------
    def amount_text(self) -> str:
        if self.amount_lower == self.amount_upper:
            return str(self.amount_lower)
        return f"{self.amount_lower}-{self.amount_upper}"

    def describe(self) -> str:
        return f"{self.amount_text()} {self.item_id} @ {self.probability_text()}%"

    def render_info(self) -> DisplayRecord:
        return DisplayRecord(
            icon="ENCHANTING_TABLE",
            title="External Item",
            details=(
                f"Item ID: {self.item_id}",
                f"Probability: {self.probability_text()}",
                f"Amount: {self.amount_text()}",
            ),
        )

    def serialize(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "Probability": self.probability,
            "ItemID": self.item_id,
        }
        if self.amount_lower == self.amount_upper:
            if self.amount_lower != DEFAULT_AMOUNT:
                out["Amount"] = self.amount_lower
        else:
            out["AmountLower"] = self.amount_lower
            out["AmountUpper"] = self.amount_upper
        return out

    def _identity(self) -> tuple:
        return (self.item_id, self.amount_lower, self.amount_upper)
