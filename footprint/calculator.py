# footprint/calculator.py
from __future__ import annotations
import logging
import math
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from . import factors as ef
from .schemas import Breakdown, FootprintInput, InvalidInput

log = logging.getLogger(__name__)


def round1(value: float) -> float:
    """Round to one decimal, halves going up (34.05 -> 34.1, -0.05 -> 0.0).

    Values too large to scale (or inf/nan) come back unchanged.
    """
    scaled = value * 10
    if not math.isfinite(scaled):
        return value
    whole = math.floor(scaled)
    # floor(scaled + 0.5) would turn 0.49999999999999994 into 1
    return (whole + (scaled - whole >= 0.5)) / 10


def ensure_input(data: Union[FootprintInput, Mapping[str, Any]]) -> FootprintInput:
    if isinstance(data, FootprintInput):
        return data
    try:
        return FootprintInput.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidInput.from_validation_error(e) from e


def raw_categories(data: FootprintInput) -> Dict[str, float]:
    """Unrounded monthly kg CO2 per category."""
    # operation order is fixed: reference totals depend on it to the last bit
    daily_transport = data.travel_km_per_day * ef.TRANSPORT_KG_PER_KM[data.transport_mode]
    transportation = daily_transport * ef.DAYS_PER_MONTH * ef.CARPOOL_FACTOR[data.carpool]

    base_electricity = data.electricity_units * ef.ELECTRICITY_KG_PER_UNIT
    ac = ef.AC_KG_PER_MONTH[data.ac_usage]
    electricity = (base_electricity + ac) * ef.RENEWABLE_FACTOR[data.renewable_energy]

    meat = data.meat_meals_per_week * ef.MEAT_KG_PER_MEAL * ef.WEEKS_PER_MONTH
    dairy = data.dairy_liters_per_day * ef.DAIRY_KG_PER_LITER * ef.DAYS_PER_MONTH
    diet = (meat + dairy) * ef.LOCAL_FOOD_FACTOR[data.local_food]

    waste_kg = data.waste_kg_per_week * ef.WASTE_KG_PER_KG * ef.WEEKS_PER_MONTH
    water = data.water_usage_liters * ef.WATER_KG_PER_LITER * ef.DAYS_PER_MONTH
    waste = (waste_kg + water) * ef.RECYCLE_FACTOR[data.recycle]

    lifestyle = data.shopping_freq * ef.SHOPPING_KG_PER_TRIP + data.online_orders * ef.ONLINE_ORDER_KG

    return {
        "transportation": transportation,
        "electricity": electricity,
        "diet": diet,
        "waste": waste,
        "lifestyle": lifestyle,
    }


def compute_footprint(data: Union[FootprintInput, Mapping[str, Any]]) -> Breakdown:
    data = ensure_input(data)
    raw = raw_categories(data)
    total = (raw["transportation"] + raw["electricity"] + raw["diet"]
             + raw["waste"] + raw["lifestyle"])

    # total is the raw sum rounded once, not the sum of rounded categories
    out = {k: round1(v) for k, v in raw.items()}
    out["total"] = round1(total)
    log.debug("[calc] %s", out)
    return Breakdown(**out)
