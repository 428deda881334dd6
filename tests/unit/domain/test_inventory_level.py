"""Tests unitarios para el modelo InventoryLevel."""

import pytest
from pydantic import ValidationError

from shopify_rest.domain.models import InventoryLevel, InventoryLevelParam


class TestInventoryLevel:
    """Tests para InventoryLevel."""

    def test_from_dict_ignores_unknown_fields(self, inventory_level_payload):
        """Campos extra de la API se ignoran."""
        level = InventoryLevel.from_dict(inventory_level_payload)

        assert level.inventory_item_id == 808950810
        assert level.location_id == 655441491
        assert level.available == 42
        assert level.updated_at == "2025-01-15T10:30:00-05:00"
        assert not hasattr(level, "admin_graphql_api_id")

    def test_round_trip_preserves_all_fields(self, inventory_level_payload):
        """Decodificar y volver a serializar conserva los cuatro campos."""
        level = InventoryLevel.from_dict(inventory_level_payload)

        assert level.to_dict() == {
            "available": 42,
            "inventory_item_id": 808950810,
            "location_id": 655441491,
            "updated_at": "2025-01-15T10:30:00-05:00",
        }
        assert InventoryLevel.from_dict(level.to_dict()) == level

    def test_available_can_be_null(self):
        """available es nulo para items sin seguimiento."""
        level = InventoryLevel.from_dict({"inventory_item_id": 1, "location_id": 2, "available": None})

        assert level.available is None
        assert level.updated_at is None

    def test_empty_resource(self):
        """El recurso vacío tiene todos los campos en None."""
        assert InventoryLevel().to_dict() == {
            "available": None,
            "inventory_item_id": None,
            "location_id": None,
            "updated_at": None,
        }

    def test_is_immutable(self, inventory_level_payload):
        """Un InventoryLevel no se puede modificar."""
        level = InventoryLevel.from_dict(inventory_level_payload)

        with pytest.raises(ValidationError):
            level.available = 0


class TestInventoryLevelParam:
    """Tests para los nombres de parámetros."""

    def test_values_match_api_names(self):
        """Los valores coinciden con los nombres de la API."""
        assert InventoryLevelParam.INVENTORY_ITEM_IDS.value == "inventory_item_ids"
        assert InventoryLevelParam.AVAILABLE_ADJUSTMENT.value == "available_adjustment"
