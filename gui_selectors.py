"""
Selector frames for Travel Cost Estimator GUI
"""
from __future__ import annotations
import webbrowser
from typing import Dict, List, Optional

try:
    import tkinter as tk
    from tkinter import ttk
except ModuleNotFoundError:
    tk = None
    ttk = None

from models import CAR_CATEGORIES, CostResult, ENTERTAINMENT_CATEGORIES
from computations import HOTEL_FEES, TAX_RATES, breakdown_lines
from estimators import CarRentalEstimator, EntertainmentEstimator, HotelEstimator
from utils import format_money


class CostPanel(ttk.Frame):
    """Rate details on the left, total / points / final on the right"""

    def __init__(self, master):
        super().__init__(master, padding=8)
        self.columnconfigure(0, weight=1)

        self.lines = ttk.Frame(self)
        self.lines.grid(row=0, column=0, sticky="nsew")

        totals = ttk.Frame(self)
        totals.grid(row=0, column=1, sticky="ne", padx=(16, 0))
        self.total_var = tk.StringVar()
        self.points_var = tk.StringVar()
        self.final_var = tk.StringVar()
        for i, (title, var, note) in enumerate([
            ("Total Cost", self.total_var, "All taxes & fees included"),
            ("Points Value", self.points_var, "Using Hilton Points"),
            ("Final Cost", self.final_var, "After points savings"),
        ]):
            ttk.Label(totals, text=title).grid(row=0, column=i, padx=10)
            ttk.Label(totals, textvariable=var, font=("TkDefaultFont", 14, "bold")).grid(row=1, column=i, padx=10)
            ttk.Label(totals, text=note, foreground="#6b6b6b").grid(row=2, column=i, padx=10)

    def show(self, cost: CostResult, extra: Optional[List[str]] = None):
        """Render a result; incomplete results hide the panel"""
        for w in self.lines.winfo_children():
            w.destroy()
        if not cost.is_complete:
            self.grid_remove()
            return
        self.grid()

        ttk.Label(self.lines, text="Rate Details", font=("TkDefaultFont", 10, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 4))
        r = 1
        for item, amount in breakdown_lines(cost)[:-3]:
            ttk.Label(self.lines, text=item).grid(row=r, column=0, sticky="w")
            ttk.Label(self.lines, text=format_money(amount)).grid(row=r, column=1, sticky="e", padx=(12, 0))
            r += 1
        for text in extra or []:
            ttk.Label(self.lines, text=text, foreground="#6b6b6b").grid(row=r, column=0, columnspan=2, sticky="w")
            r += 1

        self.total_var.set(format_money(cost.cash_price))
        self.points_var.set(format_money(cost.points_savings))
        self.final_var.set(format_money(cost.final_cost))


class HotelSelector(ttk.Frame):
    """Hotel form: brand, property, dates, rooms and points"""

    def __init__(self, master, estimator: HotelEstimator):
        super().__init__(master, padding=8)
        self.estimator = estimator
        self.tables = estimator.tables
        s = estimator.selection

        self.brand_labels: Dict[str, str] = {"All Brands": ""}
        for category, brands in self.tables.brands_by_category().items():
            for b in brands:
                self.brand_labels[f"{category} / {b.name}"] = b.id
        self.property_labels: Dict[str, str] = {}

        self.v_brand = tk.StringVar(value="All Brands")
        self.v_property = tk.StringVar(value="")
        self.v_check_in = tk.StringVar(value=s.check_in)
        self.v_check_out = tk.StringVar(value=s.check_out)
        self.v_rooms = tk.StringVar(value=str(s.rooms))
        self.v_points = tk.StringVar(value=s.points)

        frm = ttk.Frame(self)
        frm.grid(row=0, column=0, sticky="ew")

        r = 0
        ttk.Label(frm, text="Hilton Brand").grid(row=r, column=0, sticky="w", pady=2)
        ttk.Combobox(frm, textvariable=self.v_brand, values=list(self.brand_labels),
                     width=40, state="readonly").grid(row=r, column=1, sticky="w")
        r += 1

        ttk.Label(frm, text="Select Property").grid(row=r, column=0, sticky="w", pady=2)
        self.property_box = ttk.Combobox(frm, textvariable=self.v_property, width=60, state="readonly")
        self.property_box.grid(row=r, column=1, sticky="w")
        r += 1

        ttk.Label(frm, text="Check-in (YYYY-MM-DD)").grid(row=r, column=0, sticky="w", pady=2)
        ttk.Entry(frm, textvariable=self.v_check_in, width=14).grid(row=r, column=1, sticky="w")
        r += 1

        ttk.Label(frm, text="Check-out (YYYY-MM-DD)").grid(row=r, column=0, sticky="w", pady=2)
        ttk.Entry(frm, textvariable=self.v_check_out, width=14).grid(row=r, column=1, sticky="w")
        r += 1

        ttk.Label(frm, text="Number of Rooms").grid(row=r, column=0, sticky="w", pady=2)
        ttk.Spinbox(frm, from_=1, to=20, textvariable=self.v_rooms, width=6).grid(row=r, column=1, sticky="w")
        r += 1

        ttk.Label(frm, text="Hilton Honors Points").grid(row=r, column=0, sticky="w", pady=2)
        ttk.Entry(frm, textvariable=self.v_points, width=14).grid(row=r, column=1, sticky="w")
        r += 1

        self.info = ttk.Frame(self)
        self.info.grid(row=1, column=0, sticky="ew", pady=(10, 0))
        self.panel = CostPanel(self)
        self.panel.grid(row=2, column=0, sticky="nsew")

        self._refresh_properties()
        self.v_brand.trace_add("write", lambda *_: self._on_brand())
        self.v_property.trace_add("write", lambda *_: self._on_change(
            "property", self.property_labels.get(self.v_property.get(), "")))
        self.v_check_in.trace_add("write", lambda *_: self._on_change("check_in", self.v_check_in.get().strip()))
        self.v_check_out.trace_add("write", lambda *_: self._on_change("check_out", self.v_check_out.get().strip()))
        self.v_rooms.trace_add("write", lambda *_: self._on_change("rooms", self.v_rooms.get()))
        self.v_points.trace_add("write", lambda *_: self._on_change("points", self.v_points.get().strip()))
        self.render()

    def _refresh_properties(self):
        """Property choices for the current brand, grouped by region"""
        brand_id = self.brand_labels.get(self.v_brand.get(), "")
        self.property_labels = {}
        for region, props in self.tables.properties_by_region(brand_id).items():
            for p in props:
                where = p.state or p.country
                self.property_labels[f"{region} / {p.name} - {p.city}, {where}"] = p.id
        self.property_box.configure(values=list(self.property_labels))

    def _on_brand(self):
        self.estimator.selection.brand = self.brand_labels.get(self.v_brand.get(), "")
        self._refresh_properties()
        if self.v_property.get() not in self.property_labels:
            self.v_property.set("")

    def _on_change(self, field: str, value):
        self.estimator.update(field, value)
        self.render()

    def render(self):
        """Redraw property info and the cost panel"""
        for w in self.info.winfo_children():
            w.destroy()
        prop = self.estimator.selected_property()
        if prop is None:
            self.panel.show(self.estimator.result)
            return

        where = ", ".join(x for x in (prop.address, prop.city, prop.state, prop.country) if x)
        ttk.Label(self.info, text=prop.name, font=("TkDefaultFont", 12, "bold")).grid(row=0, column=0, sticky="w")
        ttk.Label(self.info, text=where).grid(row=1, column=0, sticky="w")
        ttk.Label(self.info, text=f"Base Rate (per night): {format_money(prop.base_price)}").grid(
            row=2, column=0, sticky="w")
        url = self.estimator.hotel_url()
        ttk.Button(self.info, text="Visit Hotel Website",
                   command=lambda: webbrowser.open(url)).grid(row=0, column=1, rowspan=2, padx=12)

        amen = ttk.Frame(self.info)
        amen.grid(row=3, column=0, columnspan=2, sticky="w", pady=(6, 0))
        for i, a in enumerate(prop.amenities):
            link = self.estimator.amenity_url(a)
            ttk.Button(amen, text=a, command=lambda u=link: webbrowser.open(u)).grid(
                row=i // 3, column=i % 3, padx=2, pady=2, sticky="w")

        extra = [
            f"Room Tax {TAX_RATES['room_tax']:.1%}, Occupancy Tax {TAX_RATES['occupancy_tax']:.1%}",
            f"Parking (not included): {format_money(HOTEL_FEES['parking_fee'])} per night",
        ]
        self.panel.show(self.estimator.result, extra)


class CarRentalSelector(ttk.Frame):
    """Car rental form: company, category and days"""

    def __init__(self, master, estimator: CarRentalEstimator):
        super().__init__(master, padding=8)
        self.estimator = estimator
        s = estimator.selection

        self.v_company = tk.StringVar(value=s.company)
        self.v_category = tk.StringVar(value=s.category)
        self.v_days = tk.StringVar(value=str(s.days))

        frm = ttk.Frame(self)
        frm.grid(row=0, column=0, sticky="ew")
        ttk.Label(frm, text="Rental Company").grid(row=0, column=0, sticky="w", pady=2)
        ttk.Combobox(frm, textvariable=self.v_company, values=list(estimator.tables.car_rentals),
                     width=20, state="readonly").grid(row=0, column=1, sticky="w")
        ttk.Label(frm, text="Car Category").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Combobox(frm, textvariable=self.v_category, values=list(CAR_CATEGORIES),
                     width=20, state="readonly").grid(row=1, column=1, sticky="w")
        ttk.Label(frm, text="Rental Days").grid(row=2, column=0, sticky="w", pady=2)
        ttk.Spinbox(frm, from_=0, to=60, textvariable=self.v_days, width=6).grid(row=2, column=1, sticky="w")

        self.panel = CostPanel(self)
        self.panel.grid(row=1, column=0, sticky="nsew", pady=(10, 0))

        self.v_company.trace_add("write", lambda *_: self._on_change("company", self.v_company.get()))
        self.v_category.trace_add("write", lambda *_: self._on_change("category", self.v_category.get()))
        self.v_days.trace_add("write", lambda *_: self._on_change("days", self.v_days.get()))
        self.render()

    def _on_change(self, field: str, value):
        self.estimator.update(field, value)
        self.render()

    def render(self):
        s = self.estimator.selection
        # breakdown only once every field is filled in
        if s.company and s.category and s.days > 0:
            self.panel.show(self.estimator.result)
        else:
            self.panel.show(CostResult())


class EntertainmentSelector(ttk.Frame):
    """Entertainment form: item and ticket count"""

    def __init__(self, master, estimator: EntertainmentEstimator):
        super().__init__(master, padding=8)
        self.estimator = estimator
        self.item_labels: Dict[str, str] = {}
        for category in ENTERTAINMENT_CATEGORIES:
            for e in estimator.tables.entertainment.values():
                if e.category == category:
                    self.item_labels[f"{category} / {e.name} ({e.location})"] = e.id

        self.v_item = tk.StringVar(value="")
        self.v_quantity = tk.StringVar(value=str(estimator.selection.quantity))

        frm = ttk.Frame(self)
        frm.grid(row=0, column=0, sticky="ew")
        ttk.Label(frm, text="Experience").grid(row=0, column=0, sticky="w", pady=2)
        ttk.Combobox(frm, textvariable=self.v_item, values=list(self.item_labels),
                     width=50, state="readonly").grid(row=0, column=1, sticky="w")
        ttk.Label(frm, text="Tickets").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Spinbox(frm, from_=0, to=20, textvariable=self.v_quantity, width=6).grid(row=1, column=1, sticky="w")

        self.desc_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.desc_var, wraplength=600).grid(row=1, column=0, sticky="w", pady=(8, 0))
        self.panel = CostPanel(self)
        self.panel.grid(row=2, column=0, sticky="nsew", pady=(10, 0))

        self.v_item.trace_add("write", lambda *_: self._on_change(
            "item", self.item_labels.get(self.v_item.get(), "")))
        self.v_quantity.trace_add("write", lambda *_: self._on_change("quantity", self.v_quantity.get()))
        self.render()

    def _on_change(self, field: str, value):
        self.estimator.update(field, value)
        self.render()

    def render(self):
        item = self.estimator.selected_item()
        if item is None:
            self.desc_var.set("")
            self.panel.show(self.estimator.result)
            return
        note = "" if item.points_eligible else "  (not eligible for points)"
        self.desc_var.set(f"{item.description}{note}")
        self.panel.show(self.estimator.result)
