"""Actions envoyees par l'outil d'edition des tables de loot."""

from enum import Enum, auto


class ClickKind(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    DOUBLE_CLICK = auto()


class Tool(Enum):
    NAVIGATE_AND_MOVE = auto()
    MODIFY_PROBABILITY_AND_TOGGLE = auto()
    MODIFY_AMOUNT = auto()
