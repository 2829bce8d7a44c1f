import os
from pathlib import Path

from dotenv import load_dotenv


# Charge automatiquement un fichier .env a la racine du projet
# (sans ecraser les variables deja exportees dans le shell).
PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(PROJECT_ROOT / ".env", override=False)

DEFAULT_COLOR_MARKER = "&"


def rng_seed() -> int | None:
    raw = os.getenv("LOOTCRAFT_RNG_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def color_marker() -> str:
    return os.getenv("LOOTCRAFT_COLOR_MARKER", DEFAULT_COLOR_MARKER) or DEFAULT_COLOR_MARKER
