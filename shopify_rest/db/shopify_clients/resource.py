"""
Generic Shopify REST resource.

Resource bindings subclass ``ShopifyResource`` and set the singular and plural
names plus the model responses decode into. The base class provides URL
templates, parameter normalization, required-key checks, and the dispatch of
requests through the shared ``Client``.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel

from shopify_rest.db.request import Request, ResourceShape
from shopify_rest.db.response import Response
from shopify_rest.db.session import Session

from .base_client import Client

logger = logging.getLogger(__name__)


class ShopifyResource:
    """
    Base class for a binding over one Shopify REST entity.

    Subclasses must define ``singular``, ``plural`` and ``model``.
    """

    singular: str = ""
    plural: str = ""
    model: Type[BaseModel] = BaseModel

    def __init__(self, client: Optional[Client] = None):
        self.client = client or Client()

    def empty_resource(self) -> BaseModel:
        return self.model()

    def singular_resource(self) -> ResourceShape:
        return {self.singular: self.model}

    def plural_resource(self) -> ResourceShape:
        return {self.plural: [self.model]}

    def find_url(self, id: Any) -> str:
        return f"{self.plural}/{id}.json"

    def all_url(self) -> str:
        return f"{self.plural}.json"

    def action_url(self, action: str) -> str:
        return f"{self.plural}/{action}.json"

    @staticmethod
    def normalize_params(params: Optional[Mapping[Any, Any]]) -> Dict[str, Any]:
        """
        Return params keyed by plain strings.

        Enum keys (``InventoryLevelParam.LOCATION_ID``) map to their value, any
        other key to ``str(key)``. Pagination follow-ups always arrive string
        keyed, so both spellings must validate the same way.
        """
        normalized = {}
        for key, value in (params or {}).items():
            if isinstance(key, Enum):
                key = key.value
            normalized[str(key)] = value
        return normalized

    @staticmethod
    def missing_keys(params: Mapping[str, Any], required: Sequence[str]) -> List[str]:
        """Required keys absent from params, in declaration order. Values are not checked."""
        return [key for key in required if key not in params]

    def unprocessable_entity(
        self,
        message: str,
        missing: Optional[List[str]] = None,
        endpoint: Optional[str] = None,
    ) -> Response:
        logger.warning(f"{message} Missing: {missing or []}")
        return Response.unprocessable_entity(message, self.empty_resource(), missing=missing, endpoint=endpoint)

    async def request(
        self,
        method: str,
        session: Session,
        path: str,
        params: Mapping[str, Any],
        resource: ResourceShape,
    ) -> Response:
        """Build a ``Request`` and hand it to the client."""
        request = Request.new(session, path, params, resource)
        logger.debug(f"{method} {request.path} params={request.params}")

        if method == "GET":
            return await self.client.get(request)
        if method == "POST":
            return await self.client.post(request)
        if method == "PUT":
            return await self.client.put(request)
        if method == "DELETE":
            return await self.client.delete(request)
        raise ValueError(f"Unsupported HTTP method: {method}")

    def __repr__(self):
        return f"{self.__class__.__name__}(client={self.client!r})"
