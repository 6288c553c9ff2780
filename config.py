"""
Configuration and reference-table loading for Travel Cost Estimator
"""
from __future__ import annotations
import json
import logging
import os
from types import MappingProxyType
from typing import Callable, List, Optional, Sequence, TypeVar

from models import CarRental, Entertainment, HotelBrand, HotelProperty
from reference_data import (
    CAR_RENTALS,
    ENTERTAINMENT,
    HOTEL_BRANDS,
    HOTEL_PROPERTIES,
    ReferenceTables,
)
from csv_handler import import_properties_from_csv
from utils import app_dir

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ReferenceDataError(ValueError):
    """Raised when a reference-table file can't be turned into records"""


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging; level falls back to $TRAVEL_ESTIMATOR_LOG_LEVEL, then WARNING"""
    level = (level or os.environ.get("TRAVEL_ESTIMATOR_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)


def car_rental_from_dict(d: dict) -> CarRental:
    """Build a CarRental from its JSON record"""
    categories = d.get("categories", {})
    if not isinstance(categories, dict):
        raise TypeError(f"categories must be an object, got {type(categories).__name__}")
    return CarRental(
        company=d["company"],
        base_price=float(d["base_price"]),
        categories=MappingProxyType({k: float(v) for k, v in categories.items()}),
    )


def hotel_brand_from_dict(d: dict) -> HotelBrand:
    """Build a HotelBrand from its JSON record"""
    return HotelBrand(
        id=d["id"],
        name=d["name"],
        category=d.get("category", ""),
        base_price=float(d.get("base_price", 0.0)),
        points_per_dollar=float(d.get("points_per_dollar", 0.0)),
    )


def hotel_property_from_dict(d: dict) -> HotelProperty:
    """Build a HotelProperty from its JSON record"""
    return HotelProperty(
        id=d["id"],
        brand_id=d["brand_id"],
        name=d["name"],
        region=d.get("region", ""),
        address=d.get("address", ""),
        city=d["city"],
        country=d.get("country", ""),
        base_price=float(d["base_price"]),
        amenities=tuple(d.get("amenities", ())),
        images=tuple(d.get("images", ())),
        state=d.get("state") or "",
    )


def entertainment_from_dict(d: dict) -> Entertainment:
    """Build an Entertainment item from its JSON record"""
    return Entertainment(
        id=d["id"],
        name=d["name"],
        category=d.get("category", "Other"),
        base_price=float(d["base_price"]),
        location=d.get("location", ""),
        points_eligible=bool(d.get("points_eligible", False)),
        max_points_discount=float(d.get("max_points_discount", 0.0)),
        description=d.get("description", ""),
        booking_url=d.get("booking_url"),
    )


def load_records(path: str, key: str, factory: Callable[[dict], T]) -> List[T]:
    """Load a list of records stored under `key` in a JSON file"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return []
    except json.JSONDecodeError as ex:
        raise ReferenceDataError(f"{path}: invalid JSON ({ex})") from ex
    if not isinstance(data, dict):
        raise ReferenceDataError(f"{path}: expected an object with a '{key}' list")

    records = data.get(key, [])
    if not isinstance(records, list):
        raise ReferenceDataError(f"{path}: '{key}' must be a list, got {type(records).__name__}")

    out = []
    for i, d in enumerate(records):
        try:
            out.append(factory(d))
        except (AttributeError, KeyError, TypeError, ValueError) as ex:
            raise ReferenceDataError(f"{path}: bad {key} record #{i}: {ex!r}") from ex
    return out


def load_car_rentals(path: str) -> List[CarRental]:
    """Load car rental companies from JSON file"""
    return load_records(path, "car_rentals", car_rental_from_dict)


def load_hotel_brands(path: str) -> List[HotelBrand]:
    """Load hotel brands from JSON file"""
    return load_records(path, "hotel_brands", hotel_brand_from_dict)


def load_hotel_properties(path: str) -> List[HotelProperty]:
    """Load hotel properties from JSON file, or from the CSV file next to it"""
    props = load_records(path, "hotel_properties", hotel_property_from_dict)
    if props:
        return props
    csv_path = os.path.splitext(path)[0] + ".csv"
    if not os.path.exists(csv_path):
        return []
    try:
        return import_properties_from_csv(csv_path)
    except (KeyError, ValueError) as ex:
        raise ReferenceDataError(f"{csv_path}: {ex!r}") from ex


def load_entertainment(path: str) -> List[Entertainment]:
    """Load entertainment catalog from JSON file"""
    return load_records(path, "entertainment", entertainment_from_dict)


def _or_default(name: str, loaded: Sequence[T], default: Sequence[T]) -> Sequence[T]:
    """Loaded records if any, otherwise the built-in table"""
    if loaded:
        logger.info("Using %d %s from the data directory", len(loaded), name)
        return loaded
    logger.info("Using built-in %s table", name)
    return default


def load_reference_tables(base: Optional[str] = None) -> ReferenceTables:
    """Build the read-only tables, preferring override files in the data directory"""
    base = base or app_dir()
    return ReferenceTables.build(
        car_rentals=_or_default(
            "car rentals", load_car_rentals(os.path.join(base, "car_rentals.json")), CAR_RENTALS),
        hotel_brands=_or_default(
            "hotel brands", load_hotel_brands(os.path.join(base, "hotel_brands.json")), HOTEL_BRANDS),
        hotel_properties=_or_default(
            "hotel properties", load_hotel_properties(os.path.join(base, "hotel_properties.json")),
            HOTEL_PROPERTIES),
        entertainment=_or_default(
            "entertainment items", load_entertainment(os.path.join(base, "entertainment.json")),
            ENTERTAINMENT),
    )
