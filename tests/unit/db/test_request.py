"""Tests unitarios para el constructor de requests."""

from shopify_rest.db.request import Request
from shopify_rest.domain.models import InventoryLevel


class TestRequest:
    """Tests para Request."""

    def test_new_builds_url_from_session(self, session):
        """La URL combina la base de la sesión y la ruta relativa."""
        request = Request.new(session, "/inventory_levels/set.json", {"available": 1})

        assert request.path == "inventory_levels/set.json"
        assert request.url == "https://test-shop.myshopify.com/admin/api/2025-04/inventory_levels/set.json"

    def test_new_copies_params(self, session):
        """Los parámetros se copian, no se comparten."""
        params = {"location_ids": [1]}
        request = Request.new(session, "inventory_levels.json", params, {"inventory_levels": [InventoryLevel]})
        params["page_info"] = "x"

        assert request.params == {"location_ids": [1]}
        assert request.resource == {"inventory_levels": [InventoryLevel]}

    def test_query_params_flattening(self, session):
        """Listas unidas por comas, booleanos en minúscula, None descartado."""
        request = Request.new(
            session,
            "inventory_levels.json",
            {
                "inventory_item_ids": [808950810, 39072856],
                "relocate_if_necessary": True,
                "updated_at_min": None,
                "limit": 50,
            },
        )

        assert request.query_params() == {
            "inventory_item_ids": "808950810,39072856",
            "relocate_if_necessary": "true",
            "limit": "50",
        }

    def test_repr_hides_token(self, session):
        """El repr no expone el access token."""
        request = Request.new(session, "inventory_levels.json")

        assert "shpat_test_token" not in repr(request)
