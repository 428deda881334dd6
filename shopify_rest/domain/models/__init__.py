"""
Domain models for Shopify REST resources.
"""

from .inventory_level import InventoryLevel, InventoryLevelParam

__all__ = ["InventoryLevel", "InventoryLevelParam"]
