"""
Static reference tables for Travel Cost Estimator
"""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar

from models import CarRental, Entertainment, HotelBrand, HotelProperty

T = TypeVar("T")


def _categories(economy: float, midsize: float, luxury: float, suv: float) -> Mapping[str, float]:
    return MappingProxyType({"economy": economy, "midsize": midsize, "luxury": luxury, "suv": suv})


CAR_RENTALS: Tuple[CarRental, ...] = (
    CarRental("Hertz", 55.0, _categories(1.0, 1.25, 2.2, 1.6)),
    CarRental("Enterprise", 50.0, _categories(1.0, 1.2, 2.0, 1.5)),
    CarRental("Avis", 52.0, _categories(1.0, 1.3, 2.1, 1.55)),
    CarRental("National", 58.0, _categories(1.0, 1.2, 1.9, 1.5)),
    CarRental("Budget", 42.0, _categories(1.0, 1.15, 1.8, 1.45)),
)

HOTEL_BRANDS: Tuple[HotelBrand, ...] = (
    HotelBrand("WA", "Waldorf Astoria", "Luxury", 650.0, 10),
    HotelBrand("CH", "Conrad", "Luxury", 450.0, 10),
    HotelBrand("LX", "LXR Hotels & Resorts", "Luxury", 500.0, 10),
    HotelBrand("HI", "Hilton Hotels & Resorts", "Full Service", 250.0, 10),
    HotelBrand("QQ", "Curio Collection", "Full Service", 280.0, 10),
    HotelBrand("DT", "DoubleTree by Hilton", "Full Service", 180.0, 10),
    HotelBrand("ES", "Embassy Suites", "All Suites", 200.0, 10),
    HotelBrand("HW", "Homewood Suites", "All Suites", 160.0, 10),
    HotelBrand("GI", "Hilton Garden Inn", "Focused Service", 150.0, 10),
    HotelBrand("HP", "Hampton by Hilton", "Focused Service", 130.0, 10),
)

HOTEL_PROPERTIES: Tuple[HotelProperty, ...] = (
    HotelProperty(
        "NYCWAWA", "WA", "Waldorf Astoria New York", "North America",
        "301 Park Avenue", "New York", "USA", 795.0,
        ("WiFi", "Restaurant", "Valet Parking", "Spa Services", "Fitness Center"),
        ("https://images.example.com/hotels/nycwawa/lobby.jpg",), state="NY",
    ),
    HotelProperty(
        "LAXWAWA", "WA", "Waldorf Astoria Beverly Hills", "North America",
        "9850 Wilshire Boulevard", "Los Angeles", "USA", 895.0,
        ("WiFi", "Pool", "Restaurant", "Valet Parking", "Spa Services"),
        ("https://images.example.com/hotels/laxwawa/pool.jpg",), state="CA",
    ),
    HotelProperty(
        "MIACICI", "CH", "Conrad Miami", "North America",
        "1395 Brickell Avenue", "Miami", "USA", 389.0,
        ("WiFi", "Pool", "Restaurant", "Fitness Center"),
        ("https://images.example.com/hotels/miacici/exterior.jpg",), state="FL",
    ),
    HotelProperty(
        "CHICHHH", "HI", "Hilton Chicago", "North America",
        "720 South Michigan Avenue", "Chicago", "USA", 229.0,
        ("WiFi", "Restaurant", "Fitness Center"),
        ("https://images.example.com/hotels/chichhh/facade.jpg",), state="IL",
    ),
    HotelProperty(
        "LASHHHH", "HI", "Hilton Grand Vacations Club on the Las Vegas Strip", "North America",
        "2650 Las Vegas Boulevard South", "Las Vegas", "USA", 199.0,
        ("WiFi", "Pool", "Fitness Center"),
        ("https://images.example.com/hotels/lashhhh/strip.jpg",), state="NV",
    ),
    HotelProperty(
        "AUSDTDT", "DT", "DoubleTree by Hilton Austin", "North America",
        "6505 North Interstate 35", "Austin", "USA", 169.0,
        ("WiFi", "Restaurant", "Fitness Center"),
        ("https://images.example.com/hotels/ausdtdt/lobby.jpg",), state="TX",
    ),
    HotelProperty(
        "DENESES", "ES", "Embassy Suites by Hilton Denver Downtown", "North America",
        "1420 Stout Street", "Denver", "USA", 209.0,
        ("WiFi", "Pool", "Restaurant", "Fitness Center"),
        ("https://images.example.com/hotels/deneses/atrium.jpg",), state="CO",
    ),
    HotelProperty(
        "BOSGIGI", "GI", "Hilton Garden Inn Boston Logan Airport", "North America",
        "100 Boardman Street", "Boston", "USA", 179.0,
        ("WiFi", "Restaurant", "Fitness Center"),
        ("https://images.example.com/hotels/bosgigi/exterior.jpg",), state="MA",
    ),
    HotelProperty(
        "LONCHCI", "CH", "Conrad London St. James", "Europe",
        "22-28 Broadway", "London", "United Kingdom", 420.0,
        ("WiFi", "Restaurant", "Fitness Center"),
        ("https://images.example.com/hotels/lonchci/room.jpg",),
    ),
    HotelProperty(
        "ROMLXLX", "LX", "Roma Via Veneto, LXR Hotels & Resorts", "Europe",
        "Via Vittorio Veneto 62", "Rome", "Italy", 560.0,
        ("WiFi", "Pool", "Restaurant", "Spa Services", "Fitness Center"),
        ("https://images.example.com/hotels/romlxlx/terrace.jpg",),
    ),
    HotelProperty(
        "TYOHPHP", "HP", "Hampton by Hilton Tokyo Shibuya", "Asia Pacific",
        "3-1 Shibuya", "Tokyo", "Japan", 140.0,
        ("WiFi", "Fitness Center"),
        ("https://images.example.com/hotels/tyohphp/room.jpg",),
    ),
)

ENTERTAINMENT: Tuple[Entertainment, ...] = (
    Entertainment(
        "broadway-hamilton", "Hamilton", "Show", 189.0, "New York",
        True, 0.5, "Broadway musical at the Richard Rodgers Theatre",
        "https://www.hamiltonmusical.com/new-york/",
    ),
    Entertainment(
        "vegas-cirque-o", "Cirque du Soleil: O", "Show", 145.0, "Las Vegas",
        True, 0.3, "Aquatic show at the Bellagio",
    ),
    Entertainment(
        "hollywood-bowl", "Hollywood Bowl Summer Concert", "Concert", 95.0, "Los Angeles",
        True, 0.25, "Evening concert under the stars",
    ),
    Entertainment(
        "miami-everglades", "Everglades Airboat Tour", "Excursion", 65.0, "Miami",
        True, 0.4, "Guided airboat ride with wildlife viewing",
    ),
    Entertainment(
        "chicago-cubs", "Chicago Cubs at Wrigley Field", "Sports", 75.0, "Chicago",
        False, 0.0, "Regular season MLB game",
    ),
    Entertainment(
        "rome-colosseum", "Colosseum Underground Tour", "Excursion", 85.0, "Rome",
        False, 0.0, "Skip-the-line guided tour",
    ),
)


def _keyed(items: Iterable[T], key) -> Mapping[str, T]:
    return MappingProxyType({key(item): item for item in items})


def group_by(items: Iterable[T], key) -> Dict[str, List[T]]:
    """Group items by key, keeping first-seen order"""
    out: Dict[str, List[T]] = {}
    for item in items:
        out.setdefault(key(item), []).append(item)
    return out


@dataclass(frozen=True)
class ReferenceTables:
    """Read-only lookup tables keyed by stable identifier"""
    car_rentals: Mapping[str, CarRental]
    hotel_brands: Mapping[str, HotelBrand]
    hotel_properties: Mapping[str, HotelProperty]
    entertainment: Mapping[str, Entertainment]

    @classmethod
    def build(
        cls,
        car_rentals: Iterable[CarRental] = CAR_RENTALS,
        hotel_brands: Iterable[HotelBrand] = HOTEL_BRANDS,
        hotel_properties: Iterable[HotelProperty] = HOTEL_PROPERTIES,
        entertainment: Iterable[Entertainment] = ENTERTAINMENT,
    ) -> "ReferenceTables":
        return cls(
            car_rentals=_keyed(car_rentals, lambda r: r.company),
            hotel_brands=_keyed(hotel_brands, lambda b: b.id),
            hotel_properties=_keyed(hotel_properties, lambda p: p.id),
            entertainment=_keyed(entertainment, lambda e: e.id),
        )

    def find_car_rental(self, company: Optional[str]) -> Optional[CarRental]:
        return self.car_rentals.get(company) if company else None

    def find_property(self, property_id: Optional[str]) -> Optional[HotelProperty]:
        return self.hotel_properties.get(property_id) if property_id else None

    def find_entertainment(self, item_id: Optional[str]) -> Optional[Entertainment]:
        return self.entertainment.get(item_id) if item_id else None

    def properties_for_brand(self, brand_id: Optional[str]) -> List[HotelProperty]:
        """Properties of one brand, or all of them when no brand is chosen"""
        props = list(self.hotel_properties.values())
        if not brand_id:
            return props
        return [p for p in props if p.brand_id == brand_id]

    def brands_by_category(self) -> Dict[str, List[HotelBrand]]:
        return group_by(self.hotel_brands.values(), lambda b: b.category)

    def properties_by_region(self, brand_id: Optional[str] = None) -> Dict[str, List[HotelProperty]]:
        return group_by(self.properties_for_brand(brand_id), lambda p: p.region)


DEFAULT_TABLES = ReferenceTables.build()
