"""Contrat commun a toutes les entrees de loot."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import Any, ClassVar, Mapping

from lootcraft.core.bundle import LootBundle
from lootcraft.core.data.item_catalog import ItemProvider
from lootcraft.core.display import DisplayRecord, format_probability
from lootcraft.core.editing import ClickKind, Tool
from lootcraft.core.roller import ProbabilityRoller


@dataclass(frozen=True)
class RollContext:
    roller: ProbabilityRoller
    items: ItemProvider | None = None


def clamp_probability(value: float) -> float:
    num = float(value)
    if math.isnan(num):
        return 0.0
    return max(0.0, min(100.0, num))


class LootEntry(ABC):
    """
    Une entree d'une table de loot.

    Le test de probabilite est fait par la table: `roll` suppose que l'entree a deja touche.
    L'egalite ne tient compte que du contenu, jamais de la probabilite.
    """

    kind: ClassVar[str] = ""
    FIELDS: ClassVar[tuple[str, ...]] = ("Probability",)

    def __init__(self, probability: float = 100.0) -> None:
        self._probability = clamp_probability(probability)

    @property
    def probability(self) -> float:
        return self._probability

    @probability.setter
    def probability(self, value: float) -> None:
        self._probability = clamp_probability(value)

    def set_probability(self, value: float) -> None:
        self.probability = value

    def probability_text(self) -> str:
        return format_probability(self._probability)

    @classmethod
    @abstractmethod
    def from_config(cls, raw: Mapping[str, Any]) -> LootEntry:
        """Construit l'entree depuis sa configuration; leve ConfigFieldError."""

    @abstractmethod
    def roll(self, bundle: LootBundle, looting_bonus: float, ctx: RollContext) -> None:
        """Ajoute la contribution de l'entree au bundle."""

    @abstractmethod
    def describe(self) -> str:
        pass

    @abstractmethod
    def render_info(self) -> DisplayRecord:
        pass

    @abstractmethod
    def serialize(self) -> dict[str, Any]:
        pass

    @abstractmethod
    def _identity(self) -> tuple:
        pass

    # ---------- Edition interactive ----------
    # Chaque operation renvoie True si l'affichage de l'entree doit etre rafraichi.
    def on_toggle(self, click: ClickKind) -> bool:
        return False

    def on_tool_click(self, tool: Tool, click: ClickKind) -> bool:
        return False

    def modify_amount(self, delta: int, both: bool) -> bool:
        return False

    def reset_amount(self) -> bool:
        return False

    # ---------- Valeur ----------
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self._identity()))

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"
