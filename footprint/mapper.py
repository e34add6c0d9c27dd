# footprint/mapper.py — minimal mapper that normalizes loose answers
import logging
import re
from typing import Any, Dict, Mapping, Optional

from .schemas import FootprintInput

log = logging.getLogger(__name__)

YES_NO = {
    "y": "yes", "yeah": "yes", "yep": "yes", "true": "yes", "1": "yes", "on": "yes",
    "n": "no", "nope": "no", "false": "no", "0": "no", "off": "no",
}
VALUE_ALIASES: Dict[str, Dict[str, str]] = {
    "transport_mode": {
        "cars": "car", "driving": "car", "drive": "car",
        "motorbike": "bike", "motorcycle": "bike", "scooter": "bike",
        "buses": "bus",
        "train": "metro", "subway": "metro", "tube": "metro", "tram": "metro",
        "cycle": "bicycle", "cycling": "bicycle", "bicycles": "bicycle",
        "walking": "walk", "foot": "walk", "on foot": "walk",
    },
    "ac_usage": {
        "none": "never", "no": "never",
        "sometimes": "occasionally", "rarely": "occasionally", "occasional": "occasionally",
        "always": "daily", "everyday": "daily", "every day": "daily",
    },
    "carpool": YES_NO,
    "renewable_energy": YES_NO,
    "local_food": YES_NO,
    "recycle": YES_NO,
}

FIELD_ALIASES = {
    "travel": "travel_km_per_day", "km": "travel_km_per_day", "distance": "travel_km_per_day",
    "mode": "transport_mode", "transport": "transport_mode",
    "electricity": "electricity_units", "units": "electricity_units", "kwh": "electricity_units",
    "ac": "ac_usage", "aircon": "ac_usage",
    "renewable": "renewable_energy", "renewables": "renewable_energy",
    "meat": "meat_meals_per_week", "meatmeals": "meat_meals_per_week",
    "dairy": "dairy_liters_per_day", "milk": "dairy_liters_per_day",
    "local": "local_food",
    "waste": "waste_kg_per_week",
    "recycling": "recycle",
    "water": "water_usage_liters",
    "shopping": "shopping_freq",
    "orders": "online_orders", "online": "online_orders",
}


def _squash(key: str) -> str:
    return re.sub(r"[^a-z0-9]", "", (key or "").lower())


# snake_case and camelCase names both squash to the same key
_FIELDS = {_squash(name): name for name in FootprintInput.model_fields}


def canonical_field(key: str) -> Optional[str]:
    k = _squash(key)
    return _FIELDS.get(k) or FIELD_ALIASES.get(k)


def canonical_value(field: str, raw: Any) -> Any:
    aliases = VALUE_ALIASES.get(field)
    if aliases is None or not isinstance(raw, str):
        return raw
    v = raw.strip().lower()
    return aliases.get(v, v)


def map_to_fields(answers: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename loose keys to model fields and canonicalize enum spellings.

    Keys that match no field are dropped.
    """
    out: Dict[str, Any] = {}
    for key, raw in answers.items():
        field = canonical_field(key)
        if not field:
            log.debug("[map] unknown field %r skipped", key)
            continue
        out[field] = canonical_value(field, raw)
    return out
