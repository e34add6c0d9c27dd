import math

import pytest

from footprint.calculator import compute_footprint, raw_categories, round1
from footprint.factors import TransportMode
from footprint.schemas import Breakdown, InvalidInput

FORM_PAYLOAD = {
    "travelKmPerDay": 30, "transportMode": "car", "carpool": "no",
    "electricityUnits": 300, "acUsage": "occasionally", "renewableEnergy": "no",
    "meatMealsPerWeek": 7, "dairyLitersPerDay": 1, "localFood": "no",
    "wasteKgPerWeek": 15, "recycle": "no", "waterUsageLiters": 200,
    "shoppingFreq": 5, "onlineOrders": 10,
}


def test_default_scenario(default_input):
    b = compute_footprint(default_input)
    assert b == Breakdown(
        transportation=189.0,
        electricity=200.0,
        diet=180.4,
        waste=34.1,
        lifestyle=85.0,
        total=688.4,
    )


def test_accepts_camel_case_payload():
    b = compute_footprint(FORM_PAYLOAD)
    assert b.total == 688.4
    assert b.diet == 180.4


def test_total_is_raw_sum_rounded_once(make_input):
    data = make_input(travel_km_per_day=17, transport_mode="bus", meat_meals_per_week=9,
                      water_usage_liters=730, local_food="yes", recycle="yes")
    raw = raw_categories(data)
    b = compute_footprint(data)
    assert b.total == round1(sum(raw.values()))
    for name, value in raw.items():
        assert getattr(b, name) == round1(value)


def test_round_half_up():
    assert round1(34.05) == 34.1
    assert round1(0.25) == 0.3
    assert round1(1.04) == 1.0
    assert round1(-0.05) == 0.0


def test_round_just_below_half_goes_down():
    # 0.049999999999999996 * 10 is 0.49999999999999994, not a half
    assert round1(0.049999999999999996) == 0.0


def test_round_passes_through_values_too_large_to_scale():
    assert round1(1e308) == 1e308
    assert round1(math.inf) == math.inf
    assert math.isnan(round1(math.nan))


def test_deterministic(make_input):
    data = make_input(travel_km_per_day=42.5, ac_usage="daily", dairy_liters_per_day=2.2)
    assert compute_footprint(data) == compute_footprint(data)


def test_carpool_halves_car_transport(make_input):
    assert compute_footprint(make_input(carpool="yes")).transportation == 94.5


@pytest.mark.parametrize("mode", ["car", "bike", "bus", "metro"])
def test_transport_grows_with_distance(make_input, mode):
    short = compute_footprint(make_input(transport_mode=mode, travel_km_per_day=10))
    longer = compute_footprint(make_input(transport_mode=mode, travel_km_per_day=11))
    assert longer.transportation > short.transportation


@pytest.mark.parametrize("mode", [TransportMode.BICYCLE, TransportMode.WALK])
def test_active_travel_emits_nothing(make_input, mode):
    b = compute_footprint(make_input(transport_mode=mode, travel_km_per_day=80))
    assert b.transportation == 0.0


def test_renewable_discount_applies_to_ac(make_input):
    b = compute_footprint(make_input(ac_usage="daily", renewable_energy="yes"))
    assert b.electricity == 210.0


def test_lifestyle_has_no_modifiers(make_input):
    b = compute_footprint(make_input(shopping_freq=20, online_orders=30))
    assert b.lifestyle == 280.0


def test_negative_numbers_propagate(make_input):
    b = compute_footprint(make_input(travel_km_per_day=-10))
    assert b.transportation == -63.0


def test_unknown_mode_is_rejected():
    with pytest.raises(InvalidInput) as exc:
        compute_footprint({**FORM_PAYLOAD, "transportMode": "plane"})
    assert any("transport" in line for line in exc.value.errors)


def test_breakdown_is_frozen(default_input):
    b = compute_footprint(default_input)
    with pytest.raises(Exception):
        b.total = 0


def test_huge_numbers_propagate(make_input):
    b = compute_footprint(make_input(electricity_units=1e308))
    assert b.electricity == 1e308 * 0.5
    assert b.total == b.electricity


def test_infinite_travel_propagates(make_input):
    b = compute_footprint(make_input(travel_km_per_day=math.inf))
    assert b.transportation == math.inf
    assert b.total == math.inf
