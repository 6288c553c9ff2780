"""
Data models for Travel Cost Estimator
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Union


CAR_CATEGORIES = ("economy", "midsize", "luxury", "suv")
ENTERTAINMENT_CATEGORIES = ("Show", "Concert", "Excursion", "Sports", "Other")


@dataclass(frozen=True)
class CarRental:
    """Rental company with a daily base price and category multipliers"""
    company: str
    base_price: float
    categories: Mapping[str, float]  # category -> multiplier


@dataclass(frozen=True)
class HotelBrand:
    """Hotel brand"""
    id: str
    name: str
    category: str
    base_price: float
    points_per_dollar: float


@dataclass(frozen=True)
class HotelProperty:
    """Single hotel property belonging to a brand"""
    id: str
    brand_id: str
    name: str
    region: str
    address: str
    city: str
    country: str
    base_price: float  # per night, per room
    amenities: Tuple[str, ...] = ()
    images: Tuple[str, ...] = ()
    state: str = ""


@dataclass(frozen=True)
class Entertainment:
    """Show, concert, excursion or other bookable item"""
    id: str
    name: str
    category: str
    base_price: float
    location: str
    points_eligible: bool
    max_points_discount: float  # fraction of the cash price, e.g. 0.25
    description: str = ""
    booking_url: Optional[str] = None


@dataclass
class CarRentalSelection:
    """Car rental form state"""
    company: str = ""
    category: str = ""
    days: int = 0


@dataclass
class HotelSelection:
    """Hotel form state; points is kept as entered"""
    brand: str = ""
    property: str = ""
    check_in: str = ""  # YYYY-MM-DD
    check_out: str = ""  # YYYY-MM-DD
    rooms: int = 1
    points: str = ""


@dataclass
class EntertainmentSelection:
    """Entertainment form state"""
    item: str = ""
    quantity: int = 0


@dataclass(frozen=True)
class CarRentalBreakdown:
    """Itemised car rental price"""
    daily_rate: float
    days: int
    base_rental: float
    discount: float  # rate, e.g. 0.15
    discount_amount: float
    fees: Dict[str, float]
    subtotal: float
    taxes: Dict[str, float]

    @property
    def total_fees(self) -> float:
        return sum(self.fees.values())

    @property
    def total_taxes(self) -> float:
        return sum(self.taxes.values())


@dataclass(frozen=True)
class HotelBreakdown:
    """Itemised hotel price"""
    base_rate: float
    nights: int
    rooms: int
    season: str
    seasonal_multiplier: float
    length_multiplier: float
    room_cost: float
    is_major_city: bool
    has_resort_fee: bool
    fees: Dict[str, float]  # totals over nights and rooms
    taxes: Dict[str, float]

    @property
    def total_fees(self) -> float:
        return sum(self.fees.values())

    @property
    def total_taxes(self) -> float:
        return sum(self.taxes.values())


@dataclass(frozen=True)
class EntertainmentBreakdown:
    """Itemised entertainment price"""
    unit_price: float
    quantity: int
    points_eligible: bool
    max_points_discount: float


Breakdown = Union[CarRentalBreakdown, HotelBreakdown, EntertainmentBreakdown]


@dataclass(frozen=True)
class CostResult:
    """Estimated cash price and points value; details only set for complete input"""
    cash_price: float = 0.0
    points_savings: float = 0.0
    details: Optional[Breakdown] = None

    @property
    def final_cost(self) -> float:
        return self.cash_price - self.points_savings

    @property
    def is_complete(self) -> bool:
        return self.details is not None


ZERO_COST = CostResult()


@dataclass(frozen=True)
class TripTotals:
    """Combined cost across all selected products"""
    cash_total: float
    points_total: float

    @property
    def final_total(self) -> float:
        return self.cash_total - self.points_total
