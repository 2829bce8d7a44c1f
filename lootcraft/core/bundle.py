from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LootBundle:
    messages: list[str] = field(default_factory=list)
    items: list[Any] = field(default_factory=list)

    def add_message(self, text: str) -> None:
        self.messages.append(text)

    def add_item(self, item: Any) -> None:
        self.items.append(item)

    def is_empty(self) -> bool:
        return not self.messages and not self.items
