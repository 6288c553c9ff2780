"""
Main application window for Travel Cost Estimator GUI
"""
from __future__ import annotations
import logging

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None

from config import load_reference_tables
from computations import PRODUCT_LABELS
from csv_handler import export_estimate_to_csv, export_properties_to_csv
from estimators import TripEstimate
from excel_export import export_excel
from gui_selectors import CarRentalSelector, EntertainmentSelector, HotelSelector
from reference_data import ReferenceTables
from utils import format_money, parse_points

logger = logging.getLogger(__name__)


class TravelEstimatorApp(ttk.Frame):
    """Main application window"""

    def __init__(self, master: tk.Tk, tables: ReferenceTables = None):
        super().__init__(master, padding=8)
        self.master = master
        self.master.title("Travel Cost Estimator")
        self.master.geometry("1100x700")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        self.tables = tables or load_reference_tables()
        self.trip = TripEstimate(self.tables)
        self.trip.listeners.append(lambda _trip: self.refresh_summary())

        self._build_menu()
        self._build_ui()
        self.refresh_summary()

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label="Export Estimate CSV…", command=self.export_csv_dialog)
        filem.add_command(label="Export Estimate Excel…", command=self.export_excel_dialog)
        filem.add_separator()
        filem.add_command(label="Export Hotel Catalog CSV…", command=self.export_properties_dialog)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)
        self.master.config(menu=menubar)

    # ---------- UI ----------
    def _build_ui(self):
        """Build points bar and product tabs"""
        top = ttk.Frame(self)
        top.grid(row=0, column=0, sticky="ew")
        ttk.Label(top, text="Points balance (car rental & entertainment)").pack(side="left")
        self.points_var = tk.StringVar(value="0")
        ttk.Entry(top, textvariable=self.points_var, width=12).pack(side="left", padx=4)
        self.points_var.trace_add("write", lambda *_: self.trip.set_points(parse_points(self.points_var.get())))

        nb = ttk.Notebook(self)
        nb.grid(row=1, column=0, sticky="nsew", pady=(8, 0))
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self.tab_hotel = HotelSelector(nb, self.trip.hotel)
        self.tab_car = CarRentalSelector(nb, self.trip.car_rental)
        self.tab_entertainment = EntertainmentSelector(nb, self.trip.entertainment)
        self.tab_summary = ttk.Frame(nb, padding=8)

        nb.add(self.tab_hotel, text="Hotel")
        nb.add(self.tab_car, text="Car Rental")
        nb.add(self.tab_entertainment, text="Entertainment")
        nb.add(self.tab_summary, text="Summary")

        self._build_summary_tab()

    def _build_summary_tab(self):
        """Build trip summary tab"""
        self.tab_summary.columnconfigure(0, weight=1)
        cols = ("product", "total", "points", "final")
        self.sum_tree = ttk.Treeview(self.tab_summary, columns=cols, show="headings", height=6)
        for c, w in zip(cols, [160, 140, 140, 140]):
            self.sum_tree.heading(c, text=c)
            self.sum_tree.column(c, width=w, anchor="w")
        self.sum_tree.grid(row=0, column=0, sticky="nsew")
        self.tab_summary.rowconfigure(0, weight=1)

        self.totals_var = tk.StringVar(value="")
        ttk.Label(self.tab_summary, textvariable=self.totals_var,
                  font=("TkDefaultFont", 12, "bold")).grid(row=1, column=0, sticky="w", pady=(8, 0))

    # ---------- Refresh ----------
    def refresh_summary(self):
        """Refresh trip summary table"""
        if not hasattr(self, "sum_tree"):
            return
        for iid in self.sum_tree.get_children():
            self.sum_tree.delete(iid)
        for product, r in self.trip.results.items():
            self.sum_tree.insert("", "end", values=(
                PRODUCT_LABELS[product],
                format_money(r.cash_price),
                format_money(r.points_savings),
                format_money(r.final_cost),
            ))
        t = self.trip.totals()
        self.totals_var.set(
            f"Trip total {format_money(t.cash_total)}   Points value {format_money(t.points_total)}   "
            f"Final {format_money(t.final_total)}"
        )

    # ---------- Export ----------
    def export_csv_dialog(self):
        """Export current estimate to CSV file"""
        fp = filedialog.asksaveasfilename(
            title="Export Estimate to CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return
        try:
            export_estimate_to_csv(self.trip.results, fp)
            messagebox.showinfo("Export CSV", f"Exported: {fp}")
        except OSError as ex:
            logger.exception("CSV export failed")
            messagebox.showerror("Export failed", str(ex))

    def export_excel_dialog(self):
        """Export current estimate to Excel file"""
        fp = filedialog.asksaveasfilename(
            title="Export Excel",
            defaultextension=".xlsx",
            filetypes=[("Excel Workbook", "*.xlsx")]
        )
        if not fp:
            return
        try:
            export_excel(self.trip.results, fp)
            messagebox.showinfo("Export", f"Exported: {fp}")
        except OSError as ex:
            logger.exception("Excel export failed")
            messagebox.showerror("Export failed", str(ex))

    def export_properties_dialog(self):
        """Export the hotel property table, e.g. as a starting point for an override file"""
        fp = filedialog.asksaveasfilename(
            title="Export Hotel Catalog",
            defaultextension=".csv",
            initialfile="hotel_properties.csv",
            filetypes=[("CSV files", "*.csv")]
        )
        if not fp:
            return
        try:
            export_properties_to_csv(list(self.tables.hotel_properties.values()), fp)
            messagebox.showinfo("Export", f"Exported {len(self.tables.hotel_properties)} properties to:\n{fp}")
        except OSError as ex:
            logger.exception("Catalog export failed")
            messagebox.showerror("Export failed", str(ex))
