import pytest

from dataclasses import replace
from datetime import date, datetime

from models import CarRental, CostResult
from computations import (
    PRODUCT_LABELS,
    breakdown_lines,
    car_length_discount,
    car_rental_cost,
    count_nights,
    entertainment_cost,
    hotel_cost,
    hotel_length_multiplier,
    is_major_city,
    has_resort_fee,
    seasonal_rate,
    trip_totals,
)


# ---------- Car rental ----------

@pytest.mark.parametrize("base_price", [42.0, 50.0, 58.0])
def test_weekly_economy_rental_matches_formula(base_price):
    rental = CarRental("Test", base_price, {"economy": 1.0, "suv": 1.5})
    cost = car_rental_cost(rental, "economy", 7, 0)

    discounted = 5.95 * base_price
    subtotal = discounted + 150.5
    expected = subtotal + subtotal * 0.0825 + 7 * base_price * 0.115
    assert cost.cash_price == pytest.approx(round(expected, 2), abs=0.01)
    assert cost.details.daily_rate == base_price
    assert cost.details.base_rental == pytest.approx(7 * base_price)
    assert cost.details.discount == 0.15
    assert cost.details.total_fees == pytest.approx(150.5)


def test_enterprise_weekly_economy_total(tables):
    cost = car_rental_cost(tables.find_car_rental("Enterprise"), "economy", 7, 0)
    assert cost.cash_price == pytest.approx(525.21)
    assert cost.points_savings == 0


def test_car_category_multiplier_and_unknown_category(tables):
    hertz = tables.find_car_rental("Hertz")
    suv = car_rental_cost(hertz, "suv", 1, 0)
    unknown = car_rental_cost(hertz, "convertible", 1, 0)
    empty = car_rental_cost(hertz, "", 1, 0)
    assert suv.details.daily_rate == pytest.approx(55.0 * 1.6)
    assert unknown.details.daily_rate == 55.0
    assert empty == unknown


@pytest.mark.parametrize("days,discount", [(1, 0.0), (2, 0.0), (3, 0.10), (6, 0.10), (7, 0.15), (30, 0.15)])
def test_car_length_discount_tiers(days, discount):
    assert car_length_discount(days) == discount


def test_rental_tax_uses_undiscounted_base():
    rental = CarRental("Test", 100.0, {"economy": 1.0})
    cost = car_rental_cost(rental, "economy", 10, 0)
    assert cost.details.taxes["rental_tax"] == pytest.approx(1000 * 0.115)
    assert cost.details.taxes["sales_tax"] == pytest.approx((850 + 150 + 45.5) * 0.0825)


def test_car_points_value_and_cap(tables):
    avis = tables.find_car_rental("Avis")
    small = car_rental_cost(avis, "midsize", 4, 5000)
    assert small.points_savings == pytest.approx(40.0)

    capped = car_rental_cost(avis, "midsize", 4, 10_000_000)
    assert capped.points_savings == pytest.approx(capped.cash_price * 0.5, abs=0.01)


def test_car_cash_price_rounded_to_cents(tables):
    cost = car_rental_cost(tables.find_car_rental("Hertz"), "midsize", 2, 1234)
    assert round(cost.cash_price, 2) == cost.cash_price
    assert round(cost.points_savings, 2) == cost.points_savings


@pytest.mark.parametrize("days", [0, -3])
def test_car_non_positive_days_is_zero(tables, days):
    cost = car_rental_cost(tables.find_car_rental("Hertz"), "economy", days, 50000)
    assert cost == CostResult()
    assert cost.details is None


def test_car_missing_company_is_zero():
    cost = car_rental_cost(None, "economy", 5, 50000)
    assert cost.cash_price == 0
    assert cost.points_savings == 0


@pytest.mark.parametrize("points", [0, 1, 999, 12345, 250000])
@pytest.mark.parametrize("days", [1, 3, 7, 14])
def test_car_savings_never_exceed_caps(tables, points, days):
    cost = car_rental_cost(tables.find_car_rental("National"), "luxury", days, points)
    # savings are rounded to cents after capping
    assert cost.points_savings <= cost.cash_price * 0.5 + 0.005
    assert cost.points_savings <= points * 0.008 + 0.005
    assert cost.cash_price >= 0


# ---------- Hotel ----------

def test_june_three_nights_plain_property(plain_hotel):
    cost = hotel_cost(plain_hotel, "2025-06-10", "2025-06-13", 1, "")
    d = cost.details
    assert d.season == "Peak Season"
    assert d.seasonal_multiplier == 1.4
    assert d.length_multiplier == 0.95
    assert d.room_cost == pytest.approx(399.0)
    assert d.fees == {"service_fee": 30.0, "amenity_fee": 45.0}
    assert "resort_fee" not in d.fees
    assert "destination_fee" not in d.fees
    assert "city_tax" not in d.taxes
    assert cost.cash_price == pytest.approx(399.0 + 75.0 + 399.0 * 0.19)


def test_rooms_multiply_room_cost_and_fees(plain_hotel):
    one = hotel_cost(plain_hotel, "2025-06-10", "2025-06-13", 1, "")
    three = hotel_cost(plain_hotel, "2025-06-10", "2025-06-13", 3, "")
    assert three.details.room_cost == pytest.approx(one.details.room_cost * 3)
    assert three.details.total_fees == pytest.approx(75.0 * 3)
    assert three.cash_price == pytest.approx(one.cash_price * 3)


def test_major_city_resort_adds_fees_and_city_tax(resort_hotel):
    cost = hotel_cost(resort_hotel, "2025-09-01", "2025-09-02", 2, "0")
    d = cost.details
    assert d.season == "Standard Season"
    assert d.seasonal_multiplier == 1.0
    assert d.is_major_city and d.has_resort_fee
    assert d.room_cost == pytest.approx(200.0)
    assert d.fees["resort_fee"] == 70.0
    assert d.fees["destination_fee"] == 40.0
    assert d.total_fees == pytest.approx(160.0)
    assert d.taxes["city_tax"] == pytest.approx(4.0)
    assert cost.cash_price == pytest.approx(402.0)


def test_hotel_cash_price_not_rounded(plain_hotel):
    prop = replace(plain_hotel, base_price=123.45)
    cost = hotel_cost(prop, "2025-01-05", "2025-01-06", 1, "")
    expected = 123.45 * 0.8 + 25 + 123.45 * 0.8 * 0.145 + 123.45 * 0.8 * 0.035 + 123.45 * 0.8 * 0.01
    assert cost.cash_price == pytest.approx(expected, rel=1e-12)
    assert round(cost.cash_price, 2) != cost.cash_price


@pytest.mark.parametrize("month,season,rate", [
    (0, "Off-Peak Season", 0.8), (1, "Off-Peak Season", 0.8),
    (2, "Shoulder Season", 1.2), (4, "Shoulder Season", 1.2),
    (5, "Peak Season", 1.4), (7, "Peak Season", 1.4),
    (8, "Standard Season", 1.0), (9, "Standard Season", 1.0), (10, "Standard Season", 1.0),
    (11, "Off-Peak Season", 0.8),
])
def test_seasonal_rate_by_month(month, season, rate):
    assert seasonal_rate(month) == (season, rate)


@pytest.mark.parametrize("nights,multiplier", [
    (1, 1.0), (2, 0.95), (3, 0.95), (4, 0.9), (6, 0.9), (7, 0.85), (21, 0.85),
])
def test_hotel_length_tiers(nights, multiplier):
    assert hotel_length_multiplier(nights) == multiplier


@pytest.mark.parametrize("check_out,nights,multiplier", [
    ("2025-10-03", 2, 0.95), ("2025-10-05", 4, 0.9), ("2025-10-08", 7, 0.85),
])
def test_hotel_tier_boundaries_through_engine(plain_hotel, check_out, nights, multiplier):
    cost = hotel_cost(plain_hotel, "2025-10-01", check_out, 1, "")
    assert cost.details.nights == nights
    assert cost.details.length_multiplier == multiplier
    assert cost.details.room_cost == pytest.approx(100.0 * multiplier * nights)


def test_count_nights():
    assert count_nights("2025-03-01", "2025-03-04") == 3
    assert count_nights(date(2024, 2, 28), date(2024, 3, 1)) == 2
    assert count_nights(datetime(2025, 3, 1, 15), datetime(2025, 3, 2, 11)) == 1
    assert count_nights("", "2025-03-04") == 0
    assert count_nights("2025-03-04", None) == 0
    assert count_nights("not a date", "2025-03-04") == 0


@pytest.mark.parametrize("check_in,check_out", [
    ("2025-06-10", "2025-06-10"),
    ("2025-06-10", "2025-06-08"),
    ("", "2025-06-08"),
    ("2025-06-10", ""),
])
def test_hotel_non_positive_or_missing_dates_is_zero(plain_hotel, check_in, check_out):
    cost = hotel_cost(plain_hotel, check_in, check_out, 1, "50000")
    assert cost == CostResult()


def test_hotel_missing_property_is_zero():
    assert hotel_cost(None, "2025-06-10", "2025-06-13", 1, "50000") == CostResult()


@pytest.mark.parametrize("points,expected", [
    ("", 0.0), ("abc", 0.0), (None, 0.0), ("1_000", 0.0), ("inf", 0.0), ("20000", 100.0), (20000, 100.0),
])
def test_hotel_points_parsing(plain_hotel, points, expected):
    cost = hotel_cost(plain_hotel, "2025-06-10", "2025-06-13", 1, points)
    assert cost.points_savings == pytest.approx(expected)


@pytest.mark.parametrize("points", ["0", "1000", "90000", "10000000"])
def test_hotel_savings_never_exceed_caps(resort_hotel, points):
    cost = hotel_cost(resort_hotel, "2025-07-01", "2025-07-05", 2, points)
    assert cost.points_savings <= cost.cash_price * 0.8
    assert cost.points_savings <= float(points) * 0.005


def test_hotel_savings_capped_at_80_percent(plain_hotel):
    cost = hotel_cost(plain_hotel, "2025-06-10", "2025-06-13", 1, "10000000")
    assert cost.points_savings == pytest.approx(cost.cash_price * 0.8)


def test_major_city_is_exact_match():
    assert is_major_city("Las Vegas")
    assert not is_major_city("las vegas")
    assert not is_major_city("New York City")
    assert not is_major_city("")
    assert not is_major_city(None)


def test_resort_fee_amenities():
    assert has_resort_fee(["WiFi", "Spa Services"])
    assert has_resort_fee(("Pool",))
    assert not has_resort_fee(["WiFi", "Pool Table"])


def test_pricing_is_idempotent(tables, plain_hotel, show):
    hertz = tables.find_car_rental("Hertz")
    assert car_rental_cost(hertz, "suv", 5, 7777) == car_rental_cost(hertz, "suv", 5, 7777)
    a = hotel_cost(plain_hotel, "2025-12-20", "2025-12-27", 2, "33333")
    b = hotel_cost(plain_hotel, "2025-12-20", "2025-12-27", 2, "33333")
    assert a == b
    assert a.cash_price.hex() == b.cash_price.hex()
    assert entertainment_cost(show, 3, 4000) == entertainment_cost(show, 3, 4000)


# ---------- Entertainment ----------

def test_entertainment_cash_and_capped_savings(show):
    cost = entertainment_cost(show, 2, 100000)
    assert cost.cash_price == 378.0
    assert cost.points_savings == 189.0
    assert cost.details.quantity == 2


def test_entertainment_points_value(show):
    cost = entertainment_cost(show, 1, 10000)
    assert cost.points_savings == pytest.approx(50.0)


@pytest.mark.parametrize("points", [0, 1000, 10 ** 9])
def test_ineligible_entertainment_never_saves(ballgame, points):
    cost = entertainment_cost(ballgame, 4, points)
    assert cost.cash_price == 300.0
    assert cost.points_savings == 0


@pytest.mark.parametrize("quantity", [0, -1])
def test_entertainment_non_positive_quantity_is_zero(show, quantity):
    assert entertainment_cost(show, quantity, 1000) == CostResult()


def test_entertainment_missing_item_is_zero():
    assert entertainment_cost(None, 2, 1000) == CostResult()


# ---------- Trip ----------

def test_trip_totals():
    totals = trip_totals([
        CostResult(100.0, 20.0),
        CostResult(50.5, 0.0),
        CostResult(),
    ])
    assert totals.cash_total == pytest.approx(150.5)
    assert totals.points_total == pytest.approx(20.0)
    assert totals.final_total == pytest.approx(130.5)


# ---------- Breakdown lines ----------

def test_entertainment_breakdown_lines(show):
    assert breakdown_lines(entertainment_cost(show, 2, 10000)) == [
        ("Tickets (2 @ 189.00)", 378.0),
        ("Total cost", 378.0),
        ("Points value", -50.0),
        ("Final cost", 328.0),
    ]


def test_breakdown_lines_label_every_product():
    assert set(PRODUCT_LABELS) == {"hotel", "car_rental", "entertainment"}
    assert breakdown_lines(entertainment_cost(None, 2, 1000)) == []
