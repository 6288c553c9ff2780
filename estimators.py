"""
Selector state for Travel Cost Estimator

Each estimator owns one product's form fields. Every change recomputes the
price and hands the new CostResult to the on_cost_update callback.
"""
from __future__ import annotations
import logging
from dataclasses import fields
from typing import Callable, Dict, List, Optional, Union

from models import (
    CarRentalSelection,
    CostResult,
    Entertainment,
    EntertainmentSelection,
    HotelProperty,
    HotelSelection,
    TripTotals,
    ZERO_COST,
)
from computations import car_rental_cost, entertainment_cost, hotel_cost, trip_totals
from reference_data import DEFAULT_TABLES, ReferenceTables
from utils import amenity_url, hotel_url, safe_int

logger = logging.getLogger(__name__)

CostCallback = Callable[[CostResult], None]

PRODUCTS = ("hotel", "car_rental", "entertainment")


class BaseEstimator:
    """Form state plus reactive recomputation"""

    product = ""
    int_fields: tuple = ()

    def __init__(
        self,
        selection,
        tables: ReferenceTables = DEFAULT_TABLES,
        on_cost_update: Optional[CostCallback] = None,
    ):
        self.selection = selection
        self.tables = tables
        self.on_cost_update = on_cost_update
        self.result: CostResult = ZERO_COST

    def update(self, field: str, value) -> CostResult:
        """Set one form field and recompute"""
        names = {f.name for f in fields(self.selection)}
        if field not in names:
            raise KeyError(f"{self.product} has no field '{field}'")
        if field in self.int_fields:
            value = safe_int(value, 0)
        setattr(self.selection, field, value)
        return self.recompute()

    def compute(self) -> CostResult:
        raise NotImplementedError

    def recompute(self) -> CostResult:
        """Recompute the price and notify the callback once"""
        self.result = self.compute()
        logger.debug("%s recomputed: cash=%.2f points=%.2f",
                     self.product, self.result.cash_price, self.result.points_savings)
        if self.on_cost_update is not None:
            self.on_cost_update(self.result)
        return self.result


class CarRentalEstimator(BaseEstimator):
    """Car rental selector; points come from the shared balance"""

    product = "car_rental"
    int_fields = ("days",)

    def __init__(
        self,
        tables: ReferenceTables = DEFAULT_TABLES,
        on_cost_update: Optional[CostCallback] = None,
        points: float = 0.0,
        selection: Optional[CarRentalSelection] = None,
    ):
        super().__init__(selection or CarRentalSelection(), tables, on_cost_update)
        self.points = points

    def set_points(self, points: Union[float, str]) -> CostResult:
        self.points = points
        return self.recompute()

    def compute(self) -> CostResult:
        s = self.selection
        if not s.company:
            return ZERO_COST
        rental = self.tables.find_car_rental(s.company)
        return car_rental_cost(rental, s.category, s.days, self.points)


class HotelEstimator(BaseEstimator):
    """Hotel selector; carries its own points field as typed by the user"""

    product = "hotel"
    int_fields = ("rooms",)

    def __init__(
        self,
        tables: ReferenceTables = DEFAULT_TABLES,
        on_cost_update: Optional[CostCallback] = None,
        selection: Optional[HotelSelection] = None,
    ):
        super().__init__(selection or HotelSelection(), tables, on_cost_update)

    def set_points(self, points: Union[float, str]) -> CostResult:
        return self.update("points", "" if points is None else str(points))

    def selected_property(self) -> Optional[HotelProperty]:
        return self.tables.find_property(self.selection.property)

    def available_properties(self) -> List[HotelProperty]:
        """Properties offered for the chosen brand"""
        return self.tables.properties_for_brand(self.selection.brand)

    def hotel_url(self) -> str:
        return hotel_url(self.selected_property(), self.tables.hotel_brands)

    def amenity_url(self, amenity: str) -> str:
        return amenity_url(self.selected_property(), self.tables.hotel_brands, amenity)

    def compute(self) -> CostResult:
        s = self.selection
        return hotel_cost(self.selected_property(), s.check_in, s.check_out, s.rooms, s.points)


class EntertainmentEstimator(BaseEstimator):
    """Entertainment selector"""

    product = "entertainment"
    int_fields = ("quantity",)

    def __init__(
        self,
        tables: ReferenceTables = DEFAULT_TABLES,
        on_cost_update: Optional[CostCallback] = None,
        points: float = 0.0,
        selection: Optional[EntertainmentSelection] = None,
    ):
        super().__init__(selection or EntertainmentSelection(), tables, on_cost_update)
        self.points = points

    def set_points(self, points: Union[float, str]) -> CostResult:
        self.points = points
        return self.recompute()

    def selected_item(self) -> Optional[Entertainment]:
        return self.tables.find_entertainment(self.selection.item)

    def compute(self) -> CostResult:
        return entertainment_cost(self.selected_item(), self.selection.quantity, self.points)


class TripEstimate:
    """Latest result per product; wires itself as every estimator's callback"""

    def __init__(self, tables: ReferenceTables = DEFAULT_TABLES, points: float = 0.0):
        self.tables = tables
        self.results: Dict[str, CostResult] = {p: ZERO_COST for p in PRODUCTS}
        self.listeners: List[Callable[["TripEstimate"], None]] = []
        self.hotel = HotelEstimator(tables, self._callback("hotel"))
        self.car_rental = CarRentalEstimator(tables, self._callback("car_rental"), points)
        self.entertainment = EntertainmentEstimator(tables, self._callback("entertainment"), points)

    def _callback(self, product: str) -> CostCallback:
        def on_cost_update(cost: CostResult) -> None:
            self.results[product] = cost
            for listener in self.listeners:
                listener(self)
        return on_cost_update

    def estimators(self) -> Dict[str, BaseEstimator]:
        return {
            "hotel": self.hotel,
            "car_rental": self.car_rental,
            "entertainment": self.entertainment,
        }

    def set_points(self, points: Union[float, str]) -> None:
        """Shared points balance used by the car rental and entertainment selectors"""
        self.car_rental.set_points(points)
        self.entertainment.set_points(points)

    def totals(self) -> TripTotals:
        return trip_totals(list(self.results.values()))
