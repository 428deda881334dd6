"""Fixtures compartidos para los tests del cliente REST."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from shopify_rest.db.response import Response
from shopify_rest.db.session import Session
from shopify_rest.domain.models import InventoryLevel


@pytest.fixture
def session():
    """Sesión de una tienda de prueba."""
    return Session(
        shop_domain="test-shop.myshopify.com",
        access_token="shpat_test_token",
        api_version="2025-04",
        timeout=10,
    )


@pytest.fixture
def inventory_level_payload():
    """Inventory level tal como lo devuelve la API REST."""
    return {
        "inventory_item_id": 808950810,
        "location_id": 655441491,
        "available": 42,
        "updated_at": "2025-01-15T10:30:00-05:00",
        "admin_graphql_api_id": "gid://shopify/InventoryLevel/655441491?inventory_item_id=808950810",
    }


@pytest.fixture
def mock_client(inventory_level_payload):
    """Cliente HTTP falso: registra las llamadas y responde 200."""
    level = InventoryLevel.from_dict(inventory_level_payload)
    ok_single = Response(success=True, code=200, data=level)
    ok_many = Response(success=True, code=200, data=[level])

    client = MagicMock()
    client.get = AsyncMock(return_value=ok_many)
    client.post = AsyncMock(return_value=ok_single)
    client.put = AsyncMock(return_value=ok_single)
    client.delete = AsyncMock(return_value=Response(success=True, code=204, data=InventoryLevel()))
    return client
