"""
Shipment tracking lookups by taxpayer identifier.
"""

__version__ = "1.0.0"
