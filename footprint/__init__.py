# footprint — monthly carbon footprint estimator
from .calculator import compute_footprint
from .factors import CATEGORY_AVERAGES, OVERALL_AVERAGE
from .schemas import Breakdown, FootprintInput, InvalidInput
from .suggestions import generate_suggestions

__version__ = "0.1.0"

__all__ = [
    "Breakdown",
    "CATEGORY_AVERAGES",
    "FootprintInput",
    "InvalidInput",
    "OVERALL_AVERAGE",
    "compute_footprint",
    "generate_suggestions",
]
