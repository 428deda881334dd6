"""
Inventory level domain model.

An inventory level is the quantity of one inventory item stocked at one
location. It has no id of its own; the pair (inventory_item_id, location_id)
identifies it.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class InventoryLevel(BaseModel):
    """
    Inventory level as returned by the Shopify REST API.

    Attributes:
        available: Available quantity (None when the item is not tracked)
        inventory_item_id: Inventory item the level belongs to
        location_id: Location where the item is stocked
        updated_at: ISO 8601 timestamp of the last change
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    available: Optional[int] = None
    inventory_item_id: Optional[int] = None
    location_id: Optional[int] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InventoryLevel":
        """Build an inventory level from a decoded JSON object."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the API's JSON shape."""
        return self.model_dump()


class InventoryLevelParam(str, Enum):
    """Parameter names accepted by the inventory level endpoints."""

    INVENTORY_ITEM_IDS = "inventory_item_ids"
    LOCATION_IDS = "location_ids"
    PAGE_INFO = "page_info"
    LIMIT = "limit"
    UPDATED_AT_MIN = "updated_at_min"
    INVENTORY_ITEM_ID = "inventory_item_id"
    LOCATION_ID = "location_id"
    AVAILABLE = "available"
    AVAILABLE_ADJUSTMENT = "available_adjustment"
    RELOCATE_IF_NECESSARY = "relocate_if_necessary"
    DISCONNECT_IF_NECESSARY = "disconnect_if_necessary"
