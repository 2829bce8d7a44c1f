from .bundle import LootBundle
from .display import DisplayRecord, format_probability, translate_color_codes
from .editing import ClickKind, Tool
from .errors import (
    ConfigFieldError,
    DataError,
    InvariantViolation,
    LootError,
    MissingReferenceError,
)
from .roller import ProbabilityRoller

__all__ = [
    "LootBundle",
    "DisplayRecord",
    "format_probability",
    "translate_color_codes",
    "ClickKind",
    "Tool",
    "LootError",
    "DataError",
    "ConfigFieldError",
    "MissingReferenceError",
    "InvariantViolation",
    "ProbabilityRoller",
]
