from __future__ import annotations

import math
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator, model_validator

from lootcraft.core.errors import ConfigFieldError


TYPE_KEY = "=="

ConfigModel = TypeVar("ConfigModel", bound=BaseModel)


class EntryConfig(BaseModel):
    # Les champs sont declares dans l'ordre de lecture: la premiere erreur
    # rapportee par pydantic est celle du premier champ lu.
    model_config = ConfigDict(strict=True, extra="ignore")

    probability: float = Field(..., alias="Probability")

    @field_validator("probability")
    @classmethod
    def _v_probability(cls, value: float) -> float:
        num = float(value)
        if math.isnan(num):
            raise ValueError("probabilite NaN")
        return num


class MessageConfig(EntryConfig):
    message: str = Field(..., alias="Message")


class ExternalItemConfig(EntryConfig):
    item_id: str = Field(..., alias="ItemID", min_length=1)
    amount: Optional[int] = Field(None, alias="Amount", ge=0)
    amount_lower: Optional[int] = Field(None, alias="AmountLower", ge=0)
    amount_upper: Optional[int] = Field(None, alias="AmountUpper", ge=0, validate_default=True)

    @model_validator(mode="before")
    @classmethod
    def _prefer_combined_amount(cls, data: Any) -> Any:
        # "Amount" l'emporte: la forme separee n'est alors meme pas lue.
        if isinstance(data, Mapping) and "Amount" in data:
            return {k: v for k, v in data.items() if k not in ("AmountLower", "AmountUpper")}
        return data

    @field_validator("amount_upper")
    @classmethod
    def _v_amount_upper(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        lower = info.data.get("amount_lower")
        if lower is None:
            return value
        if value is None:
            raise ValueError("AmountUpper requis avec AmountLower")
        if value < lower:
            raise ValueError(f"AmountUpper ({value}) < AmountLower ({lower})")
        return value

    def bounds(self) -> tuple[int, int]:
        if self.amount is not None:
            return self.amount, self.amount
        if self.amount_lower is not None and self.amount_upper is not None:
            return self.amount_lower, self.amount_upper
        return 1, 1


def _first_error(model: type[BaseModel], exc: ValidationError) -> tuple[str, str]:
    errors = exc.errors()
    if not errors:
        return "?", str(exc)
    first = errors[0]
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else "?"
    # une valeur par defaut invalide est rapportee sous le nom python, pas sous la cle de config
    info = model.model_fields.get(field)
    if info is not None and info.alias:
        field = info.alias
    return field, str(first.get("msg") or "")


def parse_config(model: type[ConfigModel], raw: Mapping[str, Any]) -> ConfigModel:
    """Valide `raw` avec `model`; toute erreur devient un ConfigFieldError sur le premier champ fautif."""
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        field, reason = _first_error(model, exc)
        raise ConfigFieldError(field, reason) from exc
