# footprint/suggestions.py — rule-based tips for the two heaviest categories
from __future__ import annotations
import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from .calculator import ensure_input
from .factors import AcUsage, Category, KG_PER_TREE, TransportMode, YesNo
from .schemas import Breakdown, FootprintInput

log = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

Rule = Tuple[Callable[[FootprintInput], bool], str]
# a slot is an if / else-if chain: the first matching rule wins, the rest are skipped
Slot = Tuple[Rule, ...]

ACTIVE_MODES = {TransportMode.BICYCLE, TransportMode.WALK}

RULES: Dict[Category, Tuple[Slot, ...]] = {
    Category.TRANSPORTATION: (
        (
            (lambda d: d.transport_mode == TransportMode.CAR and d.carpool == YesNo.NO,
             "🚗 TOP PRIORITY: Carpooling can cut your transport emissions in half!"),
            (lambda d: d.transport_mode == TransportMode.CAR,
             "🚌 Consider using public transport 2-3 times per week to reduce emissions by up to 40%"),
        ),
        (
            (lambda d: d.transport_mode not in ACTIVE_MODES and d.travel_km_per_day < 10,
             "🚴 Try cycling or walking for short distances under 10km"),
        ),
    ),
    Category.ELECTRICITY: (
        (
            (lambda d: d.renewable_energy == YesNo.NO,
             "⚡ TOP PRIORITY: Switch to renewable energy plans to reduce electricity emissions by 30%"),
        ),
        (
            (lambda d: d.ac_usage == AcUsage.DAILY,
             "❄️ Use AC efficiently: set to 24°C and use fans to save 20-30% energy"),
            (lambda d: d.ac_usage == AcUsage.OCCASIONALLY and d.electricity_units > 400,
             "💡 Replace old appliances with energy-efficient models to save up to 40% energy"),
        ),
        (
            (lambda d: d.electricity_units > 500,
             "🔌 Unplug devices when not in use - phantom load accounts for 10% of home energy"),
        ),
    ),
    Category.DIET: (
        (
            (lambda d: d.meat_meals_per_week > 10,
             "🌱 TOP PRIORITY: Try Meatless Mondays - reducing meat by just 2 meals/week saves ~30kg CO2/month"),
            (lambda d: 5 < d.meat_meals_per_week <= 10,
             "🥗 Great job on reducing meat! Try one more plant-based day per week"),
        ),
        (
            (lambda d: d.local_food == YesNo.NO,
             "🥬 Choose local, seasonal produce to reduce food transportation emissions by 15%"),
        ),
        (
            (lambda d: d.dairy_liters_per_day > 1.5,
             "🥛 Consider plant-based milk alternatives to reduce dairy emissions"),
        ),
    ),
    Category.WASTE: (
        (
            (lambda d: d.recycle == YesNo.NO,
             "♻️ TOP PRIORITY: Start recycling! It can reduce waste emissions by 30%"),
        ),
        (
            (lambda d: d.waste_kg_per_week > 20,
             "🗑️ Reduce single-use plastics and start composting to cut waste by 50%"),
            (lambda d: d.waste_kg_per_week > 15 and d.recycle == YesNo.YES,
             "🍂 Compost food waste to further reduce landfill emissions"),
        ),
        (
            (lambda d: d.water_usage_liters > 300,
             "💧 Install low-flow fixtures to reduce water usage by 30%"),
        ),
    ),
    Category.LIFESTYLE: (
        (
            (lambda d: d.online_orders > 15,
             "📦 TOP PRIORITY: Bundle online orders to reduce delivery emissions by 40%"),
        ),
        (
            (lambda d: d.shopping_freq > 10,
             "👕 Buy quality over quantity - fast fashion contributes 10% of global emissions"),
            (lambda d: d.shopping_freq > 5,
             "🛍️ Consider second-hand shopping for clothes and furniture"),
        ),
    ),
}


def rank_categories(breakdown: Breakdown) -> List[Category]:
    # sorted() is stable, so ties keep declaration order
    ranked = sorted(breakdown.by_category(), key=lambda cv: cv[1], reverse=True)
    return [c for c, _ in ranked]


def trees_needed(total: float) -> Union[int, float]:
    trees = total / KG_PER_TREE
    if not math.isfinite(trees):
        return trees
    return math.ceil(trees)


def tree_message(total: float) -> str:
    return f"🌳 Plant {trees_needed(total)} trees this month to offset your carbon footprint"


def category_tips(category: Category, data: FootprintInput) -> List[str]:
    lines: List[str] = []
    for slot in RULES[category]:
        for predicate, message in slot:
            if predicate(data):
                lines.append(message)
                break
    return lines


def generate_suggestions(
    breakdown: Breakdown, data: Union[FootprintInput, Mapping[str, Any]]
) -> List[str]:
    data = ensure_input(data)
    ranked = rank_categories(breakdown)
    focus = set(ranked[:2])
    log.debug("[tips] focus categories: %s", [c.value for c in ranked[:2]])

    lines: List[str] = []
    for category in RULES:
        if category in focus:
            lines.extend(category_tips(category, data))

    lines.append(tree_message(breakdown.total))

    # dict keeps first-seen order
    unique = list(dict.fromkeys(lines))
    return unique[:MAX_SUGGESTIONS]
