"""
Shopify REST clients organized by resource.

``Client`` executes requests; each resource binding validates its own
parameters and builds requests for its endpoints.
"""

from .base_client import Client
from .inventory_client import InventoryLevelResource
from .resource import ShopifyResource

__all__ = [
    "Client",
    "ShopifyResource",
    "InventoryLevelResource",
]
