"""
Pricing calculations for Travel Cost Estimator
"""
from __future__ import annotations
import math
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from models import (
    CarRental,
    CarRentalBreakdown,
    CostResult,
    Entertainment,
    EntertainmentBreakdown,
    HotelBreakdown,
    HotelProperty,
    TripTotals,
    ZERO_COST,
)
from utils import parse_points, round_currency, to_datetime

DateLike = Union[str, date, datetime, None]

# ---------- Car rental ----------
CAR_INSURANCE_PER_DAY = 15.0
CAR_AIRPORT_FEE = 25.0
CAR_VEHICLE_LICENSE_FEE = 8.50
CAR_FACILITY_FEE = 12.0
CAR_SALES_TAX = 0.0825  # on discounted subtotal
CAR_RENTAL_TAX = 0.115  # on undiscounted base rental
CAR_POINT_VALUE = 0.008
CAR_POINTS_CAP = 0.5

# ---------- Hotel ----------
HOTEL_FEES = {
    "resort_fee": 35.0,
    "parking_fee": 25.0,  # shown to the guest, never charged in the estimate
    "service_fee": 10.0,
    "amenity_fee": 15.0,
    "destination_fee": 20.0,
}

TAX_RATES = {
    "room_tax": 0.145,
    "occupancy_tax": 0.035,
    "city_tax": 0.02,
    "tourism_levy": 0.01,
}

SEASONAL_RATES = {
    "peak": 1.4,
    "shoulder": 1.2,
    "off_peak": 0.8,
}

MAJOR_CITIES = frozenset({"New York", "Los Angeles", "Chicago", "Miami", "Las Vegas"})
RESORT_AMENITIES = ("Pool", "Spa Services")
HOTEL_POINT_VALUE = 0.005
HOTEL_POINTS_CAP = 0.8

# ---------- Entertainment ----------
ENTERTAINMENT_POINT_VALUE = 0.005


def car_length_discount(days: int) -> float:
    """Discount rate on the base rental for the rental length"""
    if days >= 7:
        return 0.15
    if days >= 3:
        return 0.10
    return 0.0


def car_rental_cost(
    rental: Optional[CarRental],
    category: str,
    days: int,
    points: Union[float, str, None],
) -> CostResult:
    """Estimated car rental price and points value"""
    if rental is None or days <= 0:
        return ZERO_COST

    multiplier = rental.categories.get(category) or 1
    daily_rate = rental.base_price * multiplier
    base_rental = daily_rate * days

    fees = {
        "insurance": CAR_INSURANCE_PER_DAY * days,
        "airport_fee": CAR_AIRPORT_FEE,
        "vehicle_license_fee": CAR_VEHICLE_LICENSE_FEE,
        "facility_fee": CAR_FACILITY_FEE,
    }
    total_fees = sum(fees.values())

    discount = car_length_discount(days)
    discounted_base = base_rental * (1 - discount)
    subtotal = discounted_base + total_fees

    taxes = {
        "sales_tax": subtotal * CAR_SALES_TAX,
        "rental_tax": base_rental * CAR_RENTAL_TAX,
    }

    cash_price = round_currency(subtotal + sum(taxes.values()))
    savings = min(parse_points(points) * CAR_POINT_VALUE, cash_price * CAR_POINTS_CAP)

    return CostResult(
        cash_price=cash_price,
        points_savings=round_currency(savings),
        details=CarRentalBreakdown(
            daily_rate=daily_rate,
            days=days,
            base_rental=base_rental,
            discount=discount,
            discount_amount=base_rental - discounted_base,
            fees=fees,
            subtotal=subtotal,
            taxes=taxes,
        ),
    )


def count_nights(check_in: DateLike, check_out: DateLike) -> int:
    """Nights between check-in and check-out, partial days rounded up; 0 if a date is missing"""
    start = to_datetime(check_in)
    end = to_datetime(check_out)
    if start is None or end is None:
        return 0
    return math.ceil((end - start).total_seconds() / 86400)


def seasonal_rate(month: int) -> Tuple[str, float]:
    """
    Season name and price multiplier for a 0-indexed check-in month.
    Sep-Nov fall through to the standard rate.
    """
    if 5 <= month <= 7:
        return "Peak Season", SEASONAL_RATES["peak"]
    if 2 <= month <= 4:
        return "Shoulder Season", SEASONAL_RATES["shoulder"]
    if month >= 11 or month <= 1:
        return "Off-Peak Season", SEASONAL_RATES["off_peak"]
    return "Standard Season", 1.0


def hotel_length_multiplier(nights: int) -> float:
    """Room cost multiplier for longer stays"""
    if nights >= 7:
        return 0.85
    if nights >= 4:
        return 0.9
    if nights >= 2:
        return 0.95
    return 1.0


def is_major_city(city: Optional[str]) -> bool:
    """Whether the city carries the city tax"""
    return bool(city) and city in MAJOR_CITIES


def has_resort_fee(amenities: Iterable[str]) -> bool:
    """Whether any amenity makes the property charge a resort fee"""
    return any(a in RESORT_AMENITIES for a in amenities)


def hotel_points_savings(points: Union[str, float, None], cash_price: float) -> float:
    """Points value, capped at a share of the cash price"""
    return min(parse_points(points) * HOTEL_POINT_VALUE, cash_price * HOTEL_POINTS_CAP)


def hotel_cost(
    prop: Optional[HotelProperty],
    check_in: DateLike,
    check_out: DateLike,
    rooms: int,
    points: Union[str, float, None],
) -> CostResult:
    """
    Estimated hotel price and points value.
    Fees are per night per room; taxes apply to the room cost only.
    The cash price is left unrounded, display formatting rounds it.
    """
    if prop is None:
        return ZERO_COST
    nights = count_nights(check_in, check_out)
    if nights <= 0:
        return ZERO_COST

    season, seasonal = seasonal_rate(to_datetime(check_in).month - 1)
    length = hotel_length_multiplier(nights)
    room_cost = prop.base_price * seasonal * length * nights * rooms

    major_city = is_major_city(prop.city)
    resort = has_resort_fee(prop.amenities)

    per_night = {
        "service_fee": HOTEL_FEES["service_fee"],
        "amenity_fee": HOTEL_FEES["amenity_fee"],
    }
    if resort:
        per_night["resort_fee"] = HOTEL_FEES["resort_fee"]
    if major_city:
        per_night["destination_fee"] = HOTEL_FEES["destination_fee"]
    fees = {name: amount * nights * rooms for name, amount in per_night.items()}
    total_fees = sum(per_night.values()) * nights * rooms

    taxes = {
        "room_tax": room_cost * TAX_RATES["room_tax"],
        "occupancy_tax": room_cost * TAX_RATES["occupancy_tax"],
    }
    if major_city:
        taxes["city_tax"] = room_cost * TAX_RATES["city_tax"]
    taxes["tourism_levy"] = room_cost * TAX_RATES["tourism_levy"]

    cash_price = room_cost + total_fees
    for amount in taxes.values():
        cash_price += amount

    return CostResult(
        cash_price=cash_price,
        points_savings=hotel_points_savings(points, cash_price),
        details=HotelBreakdown(
            base_rate=prop.base_price,
            nights=nights,
            rooms=rooms,
            season=season,
            seasonal_multiplier=seasonal,
            length_multiplier=length,
            room_cost=room_cost,
            is_major_city=major_city,
            has_resort_fee=resort,
            fees=fees,
            taxes=taxes,
        ),
    )


def entertainment_cost(
    item: Optional[Entertainment],
    quantity: int,
    points: Union[float, str, None],
) -> CostResult:
    """Estimated ticket price; items not eligible for points never get savings"""
    if item is None or quantity <= 0:
        return ZERO_COST

    cash_price = round_currency(item.base_price * quantity)
    if item.points_eligible:
        cap = cash_price * max(0.0, item.max_points_discount)
        savings = round_currency(min(parse_points(points) * ENTERTAINMENT_POINT_VALUE, cap))
    else:
        savings = 0.0

    return CostResult(
        cash_price=cash_price,
        points_savings=savings,
        details=EntertainmentBreakdown(
            unit_price=item.base_price,
            quantity=quantity,
            points_eligible=item.points_eligible,
            max_points_discount=item.max_points_discount,
        ),
    )


def trip_totals(results: Sequence[CostResult]) -> TripTotals:
    """Combine the latest result of every product"""
    return TripTotals(
        cash_total=sum(r.cash_price for r in results),
        points_total=sum(r.points_savings for r in results),
    )


# ---------- Presentation ----------

PRODUCT_LABELS = {
    "hotel": "Hotel",
    "car_rental": "Car Rental",
    "entertainment": "Entertainment",
}


def _label(name: str) -> str:
    return name.replace("_", " ").title()


def breakdown_lines(result: CostResult) -> List[Tuple[str, float]]:
    """
    Flatten a result into (label, amount) lines, ending with the totals.
    Incomplete results produce no lines.
    """
    d = result.details
    if d is None:
        return []

    lines: List[Tuple[str, float]] = []
    if isinstance(d, CarRentalBreakdown):
        lines.append((f"Base rental ({d.days} days @ {d.daily_rate:.2f})", d.base_rental))
        if d.discount > 0:
            lines.append((f"Length discount ({d.discount:.0%})", -d.discount_amount))
        lines += [(_label(k), v) for k, v in d.fees.items()]
        lines += [(_label(k), v) for k, v in d.taxes.items()]
    elif isinstance(d, HotelBreakdown):
        lines.append((
            f"Room cost ({d.nights} nights x {d.rooms} rooms, {d.season} x{d.seasonal_multiplier:g}, "
            f"length x{d.length_multiplier:g})",
            d.room_cost,
        ))
        lines += [(_label(k), v) for k, v in d.fees.items()]
        lines += [(_label(k), v) for k, v in d.taxes.items()]
    elif isinstance(d, EntertainmentBreakdown):
        lines.append((f"Tickets ({d.quantity} @ {d.unit_price:.2f})", d.unit_price * d.quantity))

    lines.append(("Total cost", result.cash_price))
    lines.append(("Points value", -result.points_savings))
    lines.append(("Final cost", result.final_cost))
    return lines
