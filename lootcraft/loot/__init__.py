from .base import LootEntry, RollContext
from .codec import EntryResult, FieldFailure, Loaded, decode_entry, encode_entry, report_failure
from .context import LoadContext
from .external_item import ExternalItem
from .message import Message
from .registry import LootRegistry, build_default_registry
from .table import LootTable, load_table

__all__ = [
    "LootEntry",
    "RollContext",
    "EntryResult",
    "FieldFailure",
    "Loaded",
    "decode_entry",
    "encode_entry",
    "report_failure",
    "LoadContext",
    "ExternalItem",
    "Message",
    "LootRegistry",
    "build_default_registry",
    "LootTable",
    "load_table",
]
