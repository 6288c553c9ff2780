import csv

import pytest
from openpyxl import load_workbook

from models import CostResult
from computations import breakdown_lines
from csv_handler import (
    export_estimate_to_csv,
    export_properties_to_csv,
    import_properties_from_csv,
)
from estimators import TripEstimate
from excel_export import export_excel


@pytest.fixture
def trip(tables):
    t = TripEstimate(tables, points=5000)
    t.hotel.update("property", "MIACICI")
    t.hotel.update("check_in", "2025-03-01")
    t.hotel.update("check_out", "2025-03-05")
    t.hotel.update("points", "30000")
    t.car_rental.update("company", "Avis")
    t.car_rental.update("category", "suv")
    t.car_rental.update("days", 3)
    return t


def test_breakdown_lines_add_up_to_cash_price(trip):
    for product in ("hotel", "car_rental"):
        result = trip.results[product]
        lines = breakdown_lines(result)
        items = [amount for _, amount in lines[:-3]]
        assert sum(items) == pytest.approx(result.cash_price, abs=0.01)
        assert lines[-3] == ("Total cost", result.cash_price)
        assert lines[-1] == ("Final cost", result.final_cost)


def test_breakdown_lines_empty_for_incomplete_result():
    assert breakdown_lines(CostResult()) == []


def test_car_breakdown_shows_discount(trip):
    labels = [label for label, _ in breakdown_lines(trip.results["car_rental"])]
    assert "Length discount (10%)" in labels
    assert "Airport Fee" in labels
    assert "Rental Tax" in labels


def test_export_estimate_csv(trip, tmp_path):
    path = tmp_path / "estimate.csv"
    export_estimate_to_csv(trip.results, str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    products = {r["product"] for r in rows}
    assert products == {"Hotel", "Car Rental", "Trip"}
    trip_rows = {r["item"]: float(r["amount"]) for r in rows if r["product"] == "Trip"}
    totals = trip.totals()
    assert trip_rows["Total cost"] == pytest.approx(totals.cash_total, abs=0.005)
    assert trip_rows["Final cost"] == pytest.approx(totals.final_total, abs=0.005)


def test_properties_csv_round_trip(tables, tmp_path):
    path = tmp_path / "hotel_properties.csv"
    props = list(tables.hotel_properties.values())
    export_properties_to_csv(props, str(path))
    assert import_properties_from_csv(str(path)) == props


def test_export_excel(trip, tmp_path):
    path = tmp_path / "estimate.xlsx"
    export_excel(trip.results, str(path))

    wb = load_workbook(path)
    assert wb.sheetnames == ["Hotel", "Car Rental", "Summary"]

    ws = wb["Summary"]
    assert [c.value for c in ws[1]] == ["Product", "Total Cost", "Points Value", "Final Cost"]
    last = [c.value for c in ws[ws.max_row]]
    totals = trip.totals()
    assert last[0] == "TOTALS"
    assert last[1] == pytest.approx(totals.cash_total)
    assert last[2] == pytest.approx(totals.points_total)

    hotel = wb["Hotel"]
    assert hotel.cell(hotel.max_row, 1).value == "Final cost"
    assert hotel.cell(hotel.max_row, 2).value == pytest.approx(trip.results["hotel"].final_cost)
