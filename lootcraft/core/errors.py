from __future__ import annotations


class LootError(RuntimeError):
    pass


class DataError(LootError):
    """Donnees invalides (catalogue d'items, payload mal forme, etc.)."""


class ConfigFieldError(LootError):
    """Champ de configuration manquant ou invalide pendant le chargement d'une entree."""

    def __init__(self, field: str, reason: str = "") -> None:
        self.field = field
        self.reason = reason
        message = f"champ '{field}' invalide"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MissingReferenceError(LootError):
    """Reference d'item externe introuvable au moment du tirage."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"item introuvable: {reference}")


class InvariantViolation(LootError):
    pass
