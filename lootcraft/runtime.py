from __future__ import annotations

from dataclasses import dataclass
from threading import Lock

from lootcraft import settings
from lootcraft.core.data.item_catalog import ItemCatalog, ItemProvider
from lootcraft.core.roller import ProbabilityRoller
from lootcraft.loot.base import RollContext
from lootcraft.loot.registry import LootRegistry, build_default_registry


@dataclass(frozen=True)
class LootServices:
    roller: ProbabilityRoller
    items: ItemProvider
    registry: LootRegistry

    def roll_context(self) -> RollContext:
        return RollContext(roller=self.roller, items=self.items)


def build_loot_services(
    *,
    seed: int | None = None,
    items: ItemProvider | None = None,
    registry: LootRegistry | None = None,
) -> LootServices:
    rng_seed = seed if seed is not None else settings.rng_seed()
    return LootServices(
        roller=ProbabilityRoller(seed=rng_seed),
        items=items if items is not None else ItemCatalog(),
        registry=registry if isinstance(registry, LootRegistry) else build_default_registry(),
    )


_services_lock = Lock()
_services: LootServices | None = None


def get_loot_services() -> LootServices:
    global _services
    if isinstance(_services, LootServices):
        return _services

    with _services_lock:
        if not isinstance(_services, LootServices):
            _services = build_loot_services()
    return _services


def set_loot_services(services: LootServices | None) -> None:
    global _services
    with _services_lock:
        _services = services


def reset_loot_services() -> None:
    global _services
    with _services_lock:
        _services = None
