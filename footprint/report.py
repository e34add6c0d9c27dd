# footprint/report.py — dashboard numbers: breakdown, tips and comparison to averages
from __future__ import annotations
from typing import Any, List, Mapping, Union

from .calculator import compute_footprint, ensure_input
from .factors import CATEGORY_AVERAGES, CATEGORY_LABELS, OVERALL_AVERAGE
from .schemas import Breakdown, CategoryComparison, FootprintInput, FootprintReport
from .suggestions import generate_suggestions, trees_needed


def percent_vs_average(total: float, average: float = OVERALL_AVERAGE) -> float:
    return (total - average) / average * 100


def compare_categories(breakdown: Breakdown) -> List[CategoryComparison]:
    rows: List[CategoryComparison] = []
    for category, value in breakdown.by_category():
        share = value / breakdown.total * 100 if breakdown.total else 0.0
        rows.append(CategoryComparison(
            category=category,
            label=CATEGORY_LABELS[category],
            value=value,
            average=CATEGORY_AVERAGES[category],
            share=share,
        ))
    return rows


def build_report(data: Union[FootprintInput, Mapping[str, Any]]) -> FootprintReport:
    data = ensure_input(data)
    breakdown = compute_footprint(data)
    diff = percent_vs_average(breakdown.total)
    return FootprintReport(
        breakdown=breakdown,
        suggestions=generate_suggestions(breakdown, data),
        average=OVERALL_AVERAGE,
        percent_vs_average=diff,
        below_average=diff < 0,
        comparisons=compare_categories(breakdown),
        trees_needed=trees_needed(breakdown.total),
    )


def average_message(report: FootprintReport) -> str:
    if report.below_average:
        return f"You're {abs(report.percent_vs_average):.1f}% below average!"
    return f"You're {report.percent_vs_average:.1f}% above average"


def render_text(report: FootprintReport) -> List[str]:
    lines = [f"Total: {report.breakdown.total} kg CO2e per month", average_message(report)]
    lines += [
        f"• {row.label}: {row.value} kg ({row.share:.0f}%, avg {row.average:g})"
        for row in report.comparisons
    ]
    lines.append(f"Average footprint: {report.average:g} kg CO2e per month")
    if report.suggestions:
        lines.append("Tips:")
        lines += report.suggestions
    return lines
