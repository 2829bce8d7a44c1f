from __future__ import annotations

import random


class ProbabilityRoller:
    """
    Tirages de loot sur une source aleatoire injectable.

    Les probabilites sont exprimees en pourcentage: 0 ne touche jamais,
    100 touche toujours.
    """

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self.rng = rng or random.Random(seed)

    def roll_percent(self) -> float:
        return self.rng.random() * 100.0

    def check_hit(self, probability: float) -> bool:
        if probability <= 0:
            return False
        if probability >= 100:
            return True
        return self.roll_percent() < probability

    def roll_int(self, lower: int, upper: int) -> int:
        if lower == upper:
            return lower
        if lower > upper:
            raise ValueError(f"Bornes invalides: {lower} > {upper}")
        return self.rng.randint(lower, upper)
