from __future__ import annotations

from typing import Any, Mapping

from lootcraft import settings
from lootcraft.core.bundle import LootBundle
from lootcraft.core.display import DisplayRecord, translate_color_codes

from .base import LootEntry, RollContext
from .schemas import MessageConfig, parse_config


class Message(LootEntry):
    """Texte d'ambiance envoye au destinataire du loot."""

    kind = "Message"
    FIELDS = ("Probability", "Message")

    def __init__(
        self,
        text: str,
        probability: float = 100.0,
        *,
        translate: bool = True,
        marker: str | None = None,
    ) -> None:
        super().__init__(probability)
        if translate:
            text = translate_color_codes(text, marker or settings.color_marker())
        self.text = text

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> Message:
        config = parse_config(MessageConfig, raw)
        # deja traduit lors de la creation initiale
        return cls(config.message, config.probability, translate=False)

    def roll(self, bundle: LootBundle, looting_bonus: float, ctx: RollContext) -> None:
        bundle.add_message(self.text)

    def describe(self) -> str:
        return f"{self.text} @ {self.probability_text()}%"

    def render_info(self) -> DisplayRecord:
        return DisplayRecord(
            icon="MAP",
            title="Message",
            details=(self.text, f"Probability: {self.probability_text()}"),
        )

    def serialize(self) -> dict[str, Any]:
        return {
            "Probability": self.probability,
            "Message": self.text,
        }

    def _identity(self) -> tuple:
        return (self.text,)
