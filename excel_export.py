"""
Excel export functionality for Travel Cost Estimator
"""
from __future__ import annotations
from typing import Dict

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from models import CostResult
from computations import PRODUCT_LABELS, breakdown_lines, trip_totals


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="104C97")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=70):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            v = cell.value
            if v is None:
                continue
            max_len = max(max_len, len(str(v)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def export_excel(results: Dict[str, CostResult], filepath: str) -> None:
    """
    Export trip estimate to Excel file with multiple sheets:
    - One sheet per product that has a complete estimate
    - Summary sheet
    """
    wb = Workbook()
    # remove default sheet
    wb.remove(wb.active)

    for product, result in results.items():
        lines = breakdown_lines(result)
        if not lines:
            continue
        ws = wb.create_sheet(PRODUCT_LABELS.get(product, product))
        ws.append(["Item", "Amount"])
        _style_header(ws, 1)
        ws.freeze_panes = "A2"
        for item, amount in lines:
            ws.append([item, amount])
        # the last three lines are total / points / final
        for r in range(ws.max_row - 2, ws.max_row + 1):
            ws.cell(r, 1).font = Font(bold=True)
            ws.cell(r, 1).fill = PatternFill("solid", fgColor="D9E1F2")
        for r in range(2, ws.max_row + 1):
            ws.cell(r, 2).number_format = "0.00"
        _autosize_columns(ws)

    # Summary sheet
    ws = wb.create_sheet("Summary")
    ws.append(["Product", "Total Cost", "Points Value", "Final Cost"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for product, result in results.items():
        ws.append([
            PRODUCT_LABELS.get(product, product),
            result.cash_price,
            result.points_savings,
            result.final_cost,
        ])
    totals = trip_totals(list(results.values()))
    ws.append(["TOTALS", totals.cash_total, totals.points_total, totals.final_total])
    ws.cell(ws.max_row, 1).font = Font(bold=True)
    for r in range(2, ws.max_row + 1):
        for c in range(2, 5):
            ws.cell(r, c).number_format = "0.00"
    _autosize_columns(ws)

    wb.save(filepath)
