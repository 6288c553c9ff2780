"""
Travel Cost Estimator GUI
- Pick a hotel property, a car rental and entertainment, plus a points balance.
- See the estimated cash price (rates, fees, taxes) and the points value for each, and the trip total.

Run:
  python travel_estimator_gui.py

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import configure_logging, load_reference_tables
from main_app import TravelEstimatorApp


def main():
    """Main entry point for the application"""
    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    configure_logging()
    tables = load_reference_tables()
    root = tk.Tk()
    app = TravelEstimatorApp(root, tables)
    root.mainloop()


if __name__ == "__main__":
    main()
