import pytest

from footprint.factors import FORM_DEFAULTS
from footprint.schemas import FootprintInput


@pytest.fixture
def make_input():
    """Factory for validated inputs: form defaults plus overrides."""
    def _make(**overrides):
        return FootprintInput.model_validate({**FORM_DEFAULTS, **overrides})
    return _make


@pytest.fixture
def default_input(make_input):
    return make_input()
