"""
CSV export and import functionality for Travel Cost Estimator
"""
from __future__ import annotations
import csv
from typing import Dict, List

from models import CostResult, HotelProperty
from computations import PRODUCT_LABELS, breakdown_lines

PROPERTY_COLUMNS = [
    'id', 'brand_id', 'name', 'region', 'address', 'city', 'state', 'country',
    'base_price', 'amenities', 'images',
]


def export_estimate_to_csv(results: Dict[str, CostResult], filepath: str) -> None:
    """
    Export breakdown lines of every product to CSV file
    CSV columns: product, item, amount
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['product', 'item', 'amount'])

        cash = points = 0.0
        for product, result in results.items():
            for item, amount in breakdown_lines(result):
                writer.writerow([PRODUCT_LABELS.get(product, product), item, f"{amount:.2f}"])
            cash += result.cash_price
            points += result.points_savings

        writer.writerow(['Trip', 'Total cost', f"{cash:.2f}"])
        writer.writerow(['Trip', 'Points value', f"{-points:.2f}"])
        writer.writerow(['Trip', 'Final cost', f"{cash - points:.2f}"])


def export_properties_to_csv(properties: List[HotelProperty], filepath: str) -> None:
    """Export hotel properties; amenities and images are ';'-joined"""
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(PROPERTY_COLUMNS)
        for p in properties:
            writer.writerow([
                p.id, p.brand_id, p.name, p.region, p.address, p.city, p.state, p.country,
                p.base_price, ';'.join(p.amenities), ';'.join(p.images),
            ])


def import_properties_from_csv(filepath: str) -> List[HotelProperty]:
    """
    Import hotel properties from CSV file
    Returns list of HotelProperty objects
    """
    properties = []

    with open(filepath, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)

        for row in reader:
            amenities = tuple(a.strip() for a in (row.get('amenities') or '').split(';') if a.strip())
            images = tuple(i.strip() for i in (row.get('images') or '').split(';') if i.strip())

            prop = HotelProperty(
                id=row['id'],
                brand_id=row['brand_id'],
                name=row['name'],
                region=row.get('region', ''),
                address=row.get('address', ''),
                city=row['city'],
                country=row.get('country', ''),
                base_price=float(row['base_price']),
                amenities=amenities,
                images=images,
                state=row.get('state') or '',
            )
            properties.append(prop)

    return properties
