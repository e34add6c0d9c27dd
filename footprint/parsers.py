# footprint/parsers.py — free-text answers → validated input record
import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from .factors import FORM_DEFAULTS, FORM_RANGES
from .mapper import canonical_field, map_to_fields
from .schemas import FootprintInput, InvalidInput

log = logging.getLogger(__name__)


def _split(body: str) -> List[str]:
    # split on commas, semicolons or newlines
    return [p for p in re.split(r"[,;\n]", body) if p and p.strip()]

# "mode=car", "meat meals: 7"
KEYVAL_RE = re.compile(r"^\s*(?P<key>[^:=]+?)\s*[:=]\s*(?P<value>.+?)\s*$")


def _split_words(part: str):
    # "meat meals 7", "ac every day": longest known key wins
    words = part.split()
    for i in range(len(words) - 1, 0, -1):
        field = canonical_field(" ".join(words[:i]))
        if field:
            return field, " ".join(words[i:])
    return None, None


def parse_text(body: Optional[str]) -> Dict[str, str]:
    """Parse comma/newline separated answers into {field: raw value}.

    Parts that don't look like an answer, or name no known field, are skipped.
    Later answers for the same field win.
    """
    answers: Dict[str, str] = {}
    if not body:
        return answers
    for part in _split(body):
        m = KEYVAL_RE.match(part)
        if m:
            field, value = canonical_field(m.group("key")), m.group("value")
        else:
            field, value = _split_words(part)
        if not field:
            log.debug("[parse] skipped %r", part)
            continue
        answers[field] = value
    return answers


def build_input(answers: Optional[Mapping[str, Any]] = None, use_defaults: bool = True) -> FootprintInput:
    """Merge answers over the form defaults and validate.

    Raises InvalidInput listing every bad or missing field.
    """
    data: Dict[str, Any] = dict(FORM_DEFAULTS) if use_defaults else {}
    data.update(map_to_fields(answers or {}))
    try:
        return FootprintInput.model_validate(data)
    except ValidationError as e:
        raise InvalidInput.from_validation_error(e) from e


def clamp_to_form(data: FootprintInput) -> FootprintInput:
    """Copy of `data` with numbers clamped to the form's slider ranges."""
    updates = {}
    for field, (lo, hi) in FORM_RANGES.items():
        value = getattr(data, field)
        clamped = min(max(value, lo), hi)
        if clamped != value:
            updates[field] = type(value)(clamped)
    return data.model_copy(update=updates) if updates else data
