# footprint/schemas.py
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from typing import List, Tuple, Union

from .factors import AcUsage, Category, CATEGORIES, TransportMode, YesNo


class InvalidInput(ValueError):
    """Raised when an input record cannot be validated.

    `errors` holds one "field: message" line per offending field.
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("invalid input: " + "; ".join(self.errors))

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInput":
        lines = []
        for err in exc.errors():
            field = ".".join(str(p) for p in err.get("loc", ())) or "input"
            lines.append(f"{field}: {err.get('msg')}")
        return cls(lines)


class FootprintInput(BaseModel):
    # form payloads use camelCase, python callers snake_case
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    travel_km_per_day: float
    transport_mode: TransportMode
    carpool: YesNo
    electricity_units: float
    ac_usage: AcUsage
    renewable_energy: YesNo
    meat_meals_per_week: float
    dairy_liters_per_day: float
    local_food: YesNo
    waste_kg_per_week: float
    recycle: YesNo
    water_usage_liters: float
    shopping_freq: int
    online_orders: int


class Breakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    transportation: float
    electricity: float
    diet: float
    waste: float
    lifestyle: float
    total: float

    def by_category(self) -> List[Tuple[Category, float]]:
        return [(c, getattr(self, c.value)) for c in CATEGORIES]


class CategoryComparison(BaseModel):
    category: Category
    label: str
    value: float
    average: float
    share: float  # percent of the total


class FootprintReport(BaseModel):
    breakdown: Breakdown
    suggestions: List[str]
    average: float
    percent_vs_average: float
    below_average: bool
    comparisons: List[CategoryComparison]
    trees_needed: Union[int, float]  # inf/nan when the total is
