from __future__ import annotations

from dataclasses import dataclass
import math
import re


COLOR_CHAR = "§"
_COLOR_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"


@dataclass(frozen=True)
class DisplayRecord:
    icon: str
    title: str
    details: tuple[str, ...] = ()


def format_probability(probability: float) -> str:
    value = float(probability)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def translate_color_codes(text: str, marker: str = "&") -> str:
    """
    Remplace `<marker><code>` par le code couleur d'affichage.

    ex: "&aBravo" -> "§aBravo". Un marker sans code valide derriere est conserve tel quel.
    """
    if not marker:
        return text
    pattern = re.compile(re.escape(marker) + f"([{_COLOR_CODES}])")
    return pattern.sub(lambda m: COLOR_CHAR + m.group(1).lower(), text)
