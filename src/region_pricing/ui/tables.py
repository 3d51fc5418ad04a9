"""
Display tables for the pricing UI.
"""
import pandas as pd

COLUMN_LABELS = {
    'productName': 'Product Name',
    'country': 'Country',
    'costPerMonth': 'Cost per Calendar Month',
    'atmFee': 'ATM Fee in Other Currencies',
    'cardReplacementCost': 'Card Replacement Cost',
    'contractLength': 'Contract Length',
}


def pricing_table(pricing_data: dict) -> pd.DataFrame:
    """Flatten the first region's rows into the display table."""
    country = next(iter(pricing_data), None)
    rows = pricing_data.get(country) or []
    table = pd.DataFrame([
        {
            'productName': row['productName'],
            'country': country,
            'costPerMonth': row['costPerMonth'],
            'atmFee': row['atmFee'],
            'cardReplacementCost': row['cardReplacementCost'],
            'contractLength': row.get('contractLength') or '',
        }
        for row in rows
    ], columns=list(COLUMN_LABELS))
    return table.rename(columns=COLUMN_LABELS)
