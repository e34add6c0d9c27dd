import pytest

from footprint.factors import AcUsage, TransportMode, YesNo
from footprint.mapper import canonical_field, canonical_value, map_to_fields
from footprint.parsers import build_input, clamp_to_form, parse_text
from footprint.schemas import InvalidInput


@pytest.mark.parametrize("key,field", [
    ("travel", "travel_km_per_day"),
    ("travelKmPerDay", "travel_km_per_day"),
    ("travel km per day", "travel_km_per_day"),
    ("meat meals", "meat_meals_per_week"),
    ("Online Orders", "online_orders"),
    ("online_orders", "online_orders"),
    ("AC", "ac_usage"),
    ("favourite colour", None),
])
def test_canonical_field(key, field):
    assert canonical_field(key) == field


def test_canonical_value():
    assert canonical_value("transport_mode", " Cycling ") == "bicycle"
    assert canonical_value("transport_mode", "train") == "metro"
    assert canonical_value("ac_usage", "every day") == "daily"
    assert canonical_value("recycle", "Y") == "yes"
    assert canonical_value("recycle", "maybe") == "maybe"
    assert canonical_value("travel_km_per_day", "12") == "12"


def test_map_to_fields_drops_unknown_keys():
    assert map_to_fields({"mode": "tube", "colour": "blue"}) == {"transport_mode": "metro"}


def test_parse_text():
    answers = parse_text("travel 12, mode bus, meat meals 3, recycle yes")
    assert answers == {
        "travel_km_per_day": "12",
        "transport_mode": "bus",
        "meat_meals_per_week": "3",
        "recycle": "yes",
    }


def test_parse_text_separators_and_multiword_values():
    answers = parse_text("ac: every day\nmode=on foot; water 250")
    assert answers == {
        "ac_usage": "every day",
        "transport_mode": "on foot",
        "water_usage_liters": "250",
    }


def test_parse_text_skips_noise():
    assert parse_text("hello, favourite colour blue, ,") == {}
    assert parse_text("") == {}
    assert parse_text(None) == {}


def test_parse_text_last_answer_wins():
    assert parse_text("travel 5, travel 9") == {"travel_km_per_day": "9"}


def test_build_input_from_text():
    data = build_input(parse_text("mode cycling, ac sometimes, renewable y, orders 3"))
    assert data.transport_mode is TransportMode.BICYCLE
    assert data.ac_usage is AcUsage.OCCASIONALLY
    assert data.renewable_energy is YesNo.YES
    assert data.online_orders == 3
    # untouched fields keep the form defaults
    assert data.travel_km_per_day == 30
    assert data.carpool is YesNo.NO


def test_build_input_rejects_unknown_enum():
    with pytest.raises(InvalidInput) as exc:
        build_input({"mode": "plane"})
    assert len(exc.value.errors) == 1


def test_build_input_rejects_non_numeric():
    with pytest.raises(InvalidInput):
        build_input({"travel": "far"})


def test_build_input_without_defaults_lists_every_missing_field():
    with pytest.raises(InvalidInput) as exc:
        build_input({"travel": 3}, use_defaults=False)
    assert len(exc.value.errors) == 13


def test_clamp_to_form():
    data = build_input({"travel": 150, "orders": -3, "dairy": 2})
    clamped = clamp_to_form(data)
    assert clamped.travel_km_per_day == 100
    assert clamped.online_orders == 0
    assert clamped.dairy_liters_per_day == 2
    assert isinstance(clamped.online_orders, int)


def test_clamp_leaves_valid_input_alone():
    data = build_input()
    assert clamp_to_form(data) is data
