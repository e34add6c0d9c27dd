# footprint/factors.py — emission factors, reference averages, form defaults
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class TransportMode(str, Enum):
    CAR = "car"
    BIKE = "bike"  # motorbike
    BUS = "bus"
    METRO = "metro"
    BICYCLE = "bicycle"
    WALK = "walk"


class YesNo(str, Enum):
    YES = "yes"
    NO = "no"


class AcUsage(str, Enum):
    NEVER = "never"
    OCCASIONALLY = "occasionally"
    DAILY = "daily"


class Category(str, Enum):
    # declaration order doubles as the ranking tie-break
    TRANSPORTATION = "transportation"
    ELECTRICITY = "electricity"
    DIET = "diet"
    WASTE = "waste"
    LIFESTYLE = "lifestyle"


CATEGORIES: Tuple[Category, ...] = tuple(Category)

# ------------------ Emission factors (EPA / CarbonFootprint.com / FAO) ------------------
TRANSPORT_KG_PER_KM: Mapping[TransportMode, float] = MappingProxyType({
    TransportMode.CAR: 0.21,
    TransportMode.BIKE: 0.05,
    TransportMode.BUS: 0.08,
    TransportMode.METRO: 0.04,
    TransportMode.BICYCLE: 0,
    TransportMode.WALK: 0,
})
CARPOOL_FACTOR: Mapping[YesNo, float] = MappingProxyType({YesNo.YES: 0.5, YesNo.NO: 1})

ELECTRICITY_KG_PER_UNIT = 0.5
AC_KG_PER_MONTH: Mapping[AcUsage, float] = MappingProxyType({
    AcUsage.NEVER: 0,
    AcUsage.OCCASIONALLY: 50,
    AcUsage.DAILY: 150,
})
RENEWABLE_FACTOR: Mapping[YesNo, float] = MappingProxyType({YesNo.YES: 0.7, YesNo.NO: 1})

MEAT_KG_PER_MEAL = 3.5
DAIRY_KG_PER_LITER = 2.5
LOCAL_FOOD_FACTOR: Mapping[YesNo, float] = MappingProxyType({YesNo.YES: 0.85, YesNo.NO: 1})

WASTE_KG_PER_KG = 0.5
WATER_KG_PER_LITER = 0.0003
RECYCLE_FACTOR: Mapping[YesNo, float] = MappingProxyType({YesNo.YES: 0.7, YesNo.NO: 1})

SHOPPING_KG_PER_TRIP = 5
ONLINE_ORDER_KG = 6  # packaging + delivery

DAYS_PER_MONTH = 30
WEEKS_PER_MONTH = 4.3

# one tree offsets roughly this much per month
KG_PER_TREE = 25

# ------------------ Reference averages (kg CO2 per month) ------------------
OVERALL_AVERAGE = 850
CATEGORY_AVERAGES: Mapping[Category, float] = MappingProxyType({
    Category.TRANSPORTATION: 180,
    Category.ELECTRICITY: 250,
    Category.DIET: 220,
    Category.WASTE: 100,
    Category.LIFESTYLE: 100,
})

CATEGORY_LABELS: Mapping[Category, str] = MappingProxyType({
    Category.TRANSPORTATION: "Transportation",
    Category.ELECTRICITY: "Electricity",
    Category.DIET: "Diet",
    Category.WASTE: "Waste & Water",
    Category.LIFESTYLE: "Lifestyle",
})

# ------------------ Input form ------------------
FORM_DEFAULTS: Mapping[str, object] = MappingProxyType({
    "travel_km_per_day": 30,
    "transport_mode": "car",
    "carpool": "no",
    "electricity_units": 300,
    "ac_usage": "occasionally",
    "renewable_energy": "no",
    "meat_meals_per_week": 7,
    "dairy_liters_per_day": 1,
    "local_food": "no",
    "waste_kg_per_week": 15,
    "recycle": "no",
    "water_usage_liters": 200,
    "shopping_freq": 5,
    "online_orders": 10,
})

# slider bounds of the form; the engine never enforces these
FORM_RANGES: Mapping[str, Tuple[float, float]] = MappingProxyType({
    "travel_km_per_day": (0, 100),
    "electricity_units": (0, 1000),
    "meat_meals_per_week": (0, 21),
    "dairy_liters_per_day": (0, 3),
    "waste_kg_per_week": (0, 50),
    "water_usage_liters": (0, 1000),
    "shopping_freq": (0, 20),
    "online_orders": (0, 30),
})
