import logging

import pytest

from lootcraft.core.errors import ConfigFieldError
from lootcraft.loot.base import LootEntry
from lootcraft.loot.codec import FieldFailure, Loaded, decode_entry, encode_entry, report_failure
from lootcraft.loot.context import LoadContext
from lootcraft.loot.external_item import ExternalItem
from lootcraft.loot.message import Message
from lootcraft.loot.registry import LootRegistry, build_default_registry
from lootcraft.loot.schemas import ExternalItemConfig, parse_config
from lootcraft.loot.table import load_table


REGISTRY = build_default_registry()


@pytest.mark.parametrize(
    "entry",
    [
        Message("Bonne chance !", 42.5),
        Message("§aDeja colore", 100.0),
        ExternalItem("gem"),
        ExternalItem("gem", 0, 0, 3.0),
        ExternalItem("gem", 4, 4, 10.0),
        ExternalItem("gem", 2, 7, 33.3),
    ],
)
def test_decode_encoded_entry_gives_back_same_entry(entry) -> None:
    payload = encode_entry(entry, REGISTRY)
    result = decode_entry(payload, REGISTRY)

    assert isinstance(result, Loaded)
    assert result.entry == entry
    assert result.entry.probability == entry.probability
    assert encode_entry(result.entry, REGISTRY) == payload


def test_encode_puts_type_tag_then_probability() -> None:
    payload = encode_entry(ExternalItem("gem", 2, 3, 5.0), REGISTRY)
    assert list(payload) == ["==", "Probability", "ItemID", "AmountLower", "AmountUpper"]
    assert payload["=="] == "ExternalItem"


def test_decode_accepts_integer_probability() -> None:
    result = decode_entry({"==": "Message", "Probability": 50, "Message": "x"}, REGISTRY)
    assert isinstance(result, Loaded)
    assert result.entry.probability == 50.0
    assert result.entry.describe() == "x @ 50%"


def test_decode_clamps_out_of_range_probability() -> None:
    result = decode_entry({"==": "Message", "Probability": 180.0, "Message": "x"}, REGISTRY)
    assert isinstance(result, Loaded)
    assert result.entry.probability == 100.0


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"==": "Message", "Probability": "beaucoup", "Message": "x"}, "Probability"),
        ({"==": "Message", "Probability": "42", "Message": "x"}, "Probability"),
        ({"==": "Message", "Message": "x"}, "Probability"),
        ({"==": "Message", "Probability": 5.0}, "Message"),
        ({"==": "Message", "Probability": 5.0, "Message": 12}, "Message"),
        ({"==": "ExternalItem", "Probability": 5.0}, "ItemID"),
        ({"==": "ExternalItem", "Probability": 5.0, "ItemID": ""}, "ItemID"),
        ({"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "Amount": "3"}, "Amount"),
        ({"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "AmountLower": 2}, "AmountUpper"),
        ({"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "AmountLower": 5, "AmountUpper": 2}, "AmountUpper"),
        ({"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "AmountLower": -1, "AmountUpper": 2}, "AmountLower"),
    ],
)
def test_decode_reports_failing_field(raw, field) -> None:
    result = decode_entry(raw, REGISTRY)
    assert isinstance(result, FieldFailure)
    assert result.field == field


def test_first_failing_field_wins() -> None:
    result = decode_entry({"==": "ExternalItem", "Probability": "x", "ItemID": 3}, REGISTRY)
    assert isinstance(result, FieldFailure)
    assert result.field == "Probability"


def test_combined_amount_is_preferred_over_split_form() -> None:
    raw = {"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "Amount": 3, "AmountLower": "x", "AmountUpper": 9}
    result = decode_entry(raw, REGISTRY)
    assert isinstance(result, Loaded)
    assert (result.entry.amount_lower, result.entry.amount_upper) == (3, 3)


def test_upper_bound_alone_is_ignored() -> None:
    result = decode_entry({"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "AmountUpper": 4}, REGISTRY)
    assert isinstance(result, Loaded)
    assert result.entry == ExternalItem("gem")


def test_legacy_type_tag_is_accepted() -> None:
    result = decode_entry({"==": "MythicMobsItem", "Probability": 5, "ItemID": "gem", "Amount": 2}, REGISTRY)
    assert isinstance(result, Loaded)
    assert result.entry == ExternalItem("gem", 2, 2)
    assert encode_entry(result.entry, REGISTRY)["=="] == "ExternalItem"


def test_explicit_kind_overrides_missing_tag() -> None:
    result = decode_entry({"Probability": 5.0, "Message": "x"}, REGISTRY, kind="Message")
    assert isinstance(result, Loaded)
    assert result.entry == Message("x")


@pytest.mark.parametrize(
    "raw",
    [
        {"Probability": 5.0, "Message": "x"},
        {"==": "Commande", "Probability": 5.0},
        ["Message", 5.0],
        None,
    ],
)
def test_unknown_or_missing_type_fails_on_type_key(raw) -> None:
    result = decode_entry(raw, REGISTRY)
    assert isinstance(result, FieldFailure)
    assert result.field == "=="


def test_report_failure_logs_field_table_and_last_entry(caplog) -> None:
    context = LoadContext(current_table="coffre_boss", last_table="coffre_gobelin", last_entry="Salut @ 100%")
    failure = FieldFailure(kind="Message", field="Probability", reason="nombre attendu")

    with caplog.at_level(logging.ERROR, logger="lootcraft.loot.codec"):
        report_failure(failure, context)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.loot_field == "Probability"
    assert record.loot_table == "coffre_boss"
    assert record.loot_last_table == "coffre_gobelin"
    assert record.loot_last_entry == "Salut @ 100%"
    assert "Probability" in record.getMessage()


def test_report_failure_without_context_uses_unknown(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="lootcraft.loot.codec"):
        report_failure(FieldFailure(kind="?", field="=="))

    record = caplog.records[0]
    assert record.loot_table == "unknown"
    assert record.loot_last_entry == "unknown"


@pytest.mark.parametrize(
    "entry",
    [Message("x", 5.0), ExternalItem("gem"), ExternalItem("gem", 3, 3), ExternalItem("gem", 1, 4)],
)
def test_serialized_fields_follow_declared_order(entry) -> None:
    keys = list(entry.serialize())
    assert keys[0] == "Probability"
    positions = [type(entry).FIELDS.index(key) for key in keys]
    assert positions == sorted(positions)


def test_missing_upper_bound_is_reported_under_config_key() -> None:
    with pytest.raises(ConfigFieldError) as excinfo:
        parse_config(ExternalItemConfig, {"Probability": 5.0, "ItemID": "gem", "AmountLower": 2})
    assert excinfo.value.field == "AmountUpper"


def test_missing_upper_bound_diagnostic_names_config_key(caplog) -> None:
    rows = [{"==": "ExternalItem", "Probability": 5.0, "ItemID": "gem", "AmountLower": 2}]
    with caplog.at_level(logging.ERROR, logger="lootcraft.loot.codec"):
        table = load_table("coffre", rows, REGISTRY)

    assert len(table) == 0
    records = [r for r in caplog.records if r.name == "lootcraft.loot.codec"]
    assert records[0].loot_field == "AmountUpper"
    assert "amount_upper" not in records[0].getMessage()


def test_registry_refuses_variant_without_config_parser() -> None:
    class _NoParser(LootEntry):
        kind = "NoParser"

        def roll(self, bundle, looting_bonus, ctx) -> None:
            bundle.add_message("x")

        def describe(self) -> str:
            return "x"

        def render_info(self):
            return None

        def serialize(self) -> dict:
            return {"Probability": self.probability}

        def _identity(self) -> tuple:
            return ()

    registry = LootRegistry()
    with pytest.raises(TypeError):
        registry.register(_NoParser)

    result = decode_entry({"==": "NoParser", "Probability": 5.0}, registry)
    assert isinstance(result, FieldFailure)
    assert result.field == "=="
