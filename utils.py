"""
Utility functions for Travel Cost Estimator
"""
from __future__ import annotations
import math
import os
import re
from datetime import date, datetime
from typing import Mapping, Optional, Union

from models import HotelBrand, HotelProperty

HILTON_HOTELS_URL = "https://www.hilton.com/en/hotels"

_WHITESPACE = re.compile(r"\s+")
_DECIMAL = re.compile(r"[+-]?(Infinity|(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)", re.ASCII)
_RADIX = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD date string"""
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()


def to_datetime(value: Union[str, date, datetime, None]) -> Optional[datetime]:
    """Coerce a form value to a datetime, None when missing or unparseable"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        d = parse_date(value)
    except ValueError:
        return None
    return datetime(d.year, d.month, d.day)


def safe_int(x, default: Optional[int] = 0) -> Optional[int]:
    """Convert value to int safely, returning default on error"""
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return default


def parse_points(points: Union[str, float, int, None]) -> float:
    """
    Points balance as entered by the user.
    Only plain numeric literals are read (decimal, exponent, 0x/0o/0b, Infinity);
    blank, NaN and anything else count as zero.
    """
    if isinstance(points, str):
        text = points.strip()
        if _RADIX.fullmatch(text):
            return float(int(text, 0))
        if not _DECIMAL.fullmatch(text):
            return 0.0
        value = float(text)
    elif isinstance(points, (int, float)):
        value = float(points)
    else:
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def round_currency(value: float) -> float:
    """Round to cents, halves rounding up"""
    return math.floor(value * 100 + 0.5) / 100


def format_money(value: float) -> str:
    """Dollar amount with thousands separators and two decimals"""
    return f"${value:,.2f}"


def app_dir() -> str:
    """
    Get application data directory: ~/Library/Application Support/TravelCostEstimator
    (or $TRAVEL_ESTIMATOR_HOME). Creates directory if it doesn't exist.
    """
    path = os.environ.get("TRAVEL_ESTIMATOR_HOME")
    if not path:
        base = os.path.expanduser("~/Library/Application Support")
        path = os.path.join(base, "TravelCostEstimator")
    os.makedirs(path, exist_ok=True)
    return path


# ---------- External links ----------

def slugify(name: str) -> str:
    """Lowercase and replace whitespace runs with a hyphen"""
    return _WHITESPACE.sub("-", name.lower())


def hotel_url(prop: Optional[HotelProperty], brands: Mapping[str, HotelBrand]) -> str:
    """Public hotel page for a property, '#' if it can't be built"""
    if prop is None:
        return "#"
    brand = brands.get(prop.brand_id)
    if brand is None:
        return "#"

    brand_slug = slugify(brand.name)
    state = f"{prop.state.lower()}-" if prop.state else ""
    location_slug = f"{prop.city.lower()}-{state}{prop.country.lower()}"
    return f"{HILTON_HOTELS_URL}/{brand_slug}/{location_slug}/{prop.id.lower()}/"


def amenity_url(prop: Optional[HotelProperty], brands: Mapping[str, HotelBrand], amenity: str) -> str:
    """Anchor into the property's amenities page"""
    base = hotel_url(prop, brands)
    if base == "#":
        return "#"
    return f"{base}amenities/#{slugify(amenity)}"
