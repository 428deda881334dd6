"""
Shopify REST binding for inventory levels.

This module validates the parameters of each inventory level operation and
dispatches the request through the shared client. Missing parameters never
reach the network: they short-circuit to a 422 ``Response``.
"""

import logging
from typing import Any, Mapping, Optional

from shopify_rest.db.response import Response
from shopify_rest.db.session import Session
from shopify_rest.domain.models import InventoryLevel

from .resource import ShopifyResource

logger = logging.getLogger(__name__)

MISSING_ALL_PARAMS_MSG = "InventoryLevel.all/2 needs an inventory_item_ids or locations_ids parameter."
MISSING_ADJUSTMENT_PARAMS_MSG = (
    "InventoryLevel.adjust/2 needs an inventory_item_id, location_id, and available_adjustment parameter."
)
MISSING_CONNECT_PARAMS_MSG = "InventoryLevel.connect/2 needs an inventory_item_id, and a location_id parameter."
MISSING_DELETE_PARAMS_MSG = "InventoryLevel.delete/2 needs an inventory_item_id, and a location_id parameter."

ALL_FILTER_KEYS = ("inventory_item_ids", "location_ids", "page_info")
ADJUST_REQUIRED_KEYS = ("inventory_item_id", "location_id", "available_adjustment")
CONNECT_REQUIRED_KEYS = ("inventory_item_id", "location_id")
SET_REQUIRED_KEYS = ("inventory_item_id", "location_id", "available")
DELETE_REQUIRED_KEYS = ("inventory_item_id", "location_id")


class InventoryLevelResource(ShopifyResource):
    """
    Operations over ``/inventory_levels``.

    Every operation returns a ``Response``; check ``response.success`` rather
    than catching exceptions.

    Example:
        resource = InventoryLevelResource()
        response = await resource.all(session, {"inventory_item_ids": [123]})
        if response.success:
            levels = response.data
    """

    singular = "inventory_level"
    plural = "inventory_levels"
    model = InventoryLevel

    async def all(self, session: Session, params: Optional[Mapping[Any, Any]] = None) -> Response:
        """
        List inventory levels.

        Args:
            session: Shop session
            params: Must contain ``inventory_item_ids``, ``location_ids`` or
                ``page_info``. When paginating, ``page_info`` encodes the
                filters and Shopify rejects the others alongside it.

        Returns:
            Response: ``data`` is a list of ``InventoryLevel``
        """
        params = self.normalize_params(params)

        if not any(key in params for key in ALL_FILTER_KEYS):
            return self.unprocessable_entity(MISSING_ALL_PARAMS_MSG, list(ALL_FILTER_KEYS), self.all_url())

        return await self.request("GET", session, self.all_url(), params, self.plural_resource())

    async def adjust(self, session: Session, params: Optional[Mapping[Any, Any]] = None) -> Response:
        """
        Adjust the available quantity of an inventory item at a location.

        Args:
            session: Shop session
            params: ``inventory_item_id``, ``location_id`` and
                ``available_adjustment`` (positive or negative delta)

        Returns:
            Response: ``data`` is the updated ``InventoryLevel``
        """
        return await self._post_action("adjust", session, params, ADJUST_REQUIRED_KEYS, MISSING_ADJUSTMENT_PARAMS_MSG)

    async def connect(self, session: Session, params: Optional[Mapping[Any, Any]] = None) -> Response:
        """
        Connect an inventory item to a location.

        Args:
            session: Shop session
            params: ``inventory_item_id`` and ``location_id``; optionally
                ``relocate_if_necessary``

        Returns:
            Response: ``data`` is the new ``InventoryLevel``
        """
        return await self._post_action("connect", session, params, CONNECT_REQUIRED_KEYS, MISSING_CONNECT_PARAMS_MSG)

    async def set(self, session: Session, params: Optional[Mapping[Any, Any]] = None) -> Response:
        """
        Set the available quantity of an inventory item at a location.

        Args:
            session: Shop session
            params: ``inventory_item_id``, ``location_id`` and ``available``;
                optionally ``disconnect_if_necessary``

        Returns:
            Response: ``data`` is the updated ``InventoryLevel``
        """
        # Shares the connect message; callers match on it.
        return await self._post_action("set", session, params, SET_REQUIRED_KEYS, MISSING_CONNECT_PARAMS_MSG)

    async def delete(self, session: Session, params: Optional[Mapping[Any, Any]] = None) -> Response:
        """
        Delete an inventory level, disconnecting the item from the location.

        Args:
            session: Shop session
            params: ``inventory_item_id`` and ``location_id``

        Returns:
            Response: ``data`` is an empty ``InventoryLevel``
        """
        params = self.normalize_params(params)

        if missing := self.missing_keys(params, DELETE_REQUIRED_KEYS):
            return self.unprocessable_entity(MISSING_DELETE_PARAMS_MSG, missing, self.all_url())

        return await self.request("DELETE", session, self.all_url(), params, self.singular_resource())

    async def _post_action(
        self,
        action: str,
        session: Session,
        params: Optional[Mapping[Any, Any]],
        required: tuple,
        message: str,
    ) -> Response:
        params = self.normalize_params(params)
        path = self.action_url(action)

        if missing := self.missing_keys(params, required):
            return self.unprocessable_entity(message, missing, path)

        return await self.request("POST", session, path, params, self.singular_resource())
