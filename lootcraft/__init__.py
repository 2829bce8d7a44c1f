from .core import LootBundle, ProbabilityRoller
from .loot import (
    ExternalItem,
    LoadContext,
    LootEntry,
    LootRegistry,
    LootTable,
    Message,
    RollContext,
    build_default_registry,
    load_table,
)

__all__ = [
    "LootBundle",
    "ProbabilityRoller",
    "ExternalItem",
    "LoadContext",
    "LootEntry",
    "LootRegistry",
    "LootTable",
    "Message",
    "RollContext",
    "build_default_registry",
    "load_table",
]
