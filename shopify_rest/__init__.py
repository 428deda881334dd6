"""
shopify-rest: typed bindings over the Shopify REST Admin API.
"""

from shopify_rest.db.request import Request
from shopify_rest.db.response import Response
from shopify_rest.db.session import Session
from shopify_rest.db.shopify_clients import Client, InventoryLevelResource, ShopifyResource
from shopify_rest.domain.models import InventoryLevel, InventoryLevelParam

__version__ = "0.1.0"

__all__ = [
    "Client",
    "InventoryLevel",
    "InventoryLevelParam",
    "InventoryLevelResource",
    "Request",
    "Response",
    "Session",
    "ShopifyResource",
]
