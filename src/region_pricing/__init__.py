"""
Region Pricing Package

Resolves the price list for a customer's product in their home region.
Looks up active price-book entries keyed on product, region, currency and
contract length, for one case reference or a batch of customer UUIDs.
"""

__version__ = "1.0.0"
