"""
Request builder for the Shopify REST API.

A request is pure data: the session it targets, the path relative to the
versioned admin API, the parameters, and the resource shape the response
body should be decoded into. Nothing here performs I/O.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel

from shopify_rest.db.session import Session

# {"inventory_level": InventoryLevel} or {"inventory_levels": [InventoryLevel]}
ResourceShape = Dict[str, Union[Type[BaseModel], list]]


@dataclass(frozen=True)
class Request:
    """A request ready to be executed by the HTTP client."""

    session: Session
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    resource: ResourceShape = field(default_factory=dict)

    @classmethod
    def new(
        cls,
        session: Session,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        resource: Optional[ResourceShape] = None,
    ) -> "Request":
        return cls(
            session=session,
            path=path.lstrip("/"),
            params=dict(params or {}),
            resource=resource or {},
        )

    @property
    def url(self) -> str:
        return f"{self.session.base_url}{self.path}"

    def query_params(self) -> Dict[str, str]:
        """
        Flatten params into a query string mapping.

        Shopify expects list filters such as ``inventory_item_ids`` as comma
        separated values. ``None`` values are dropped.
        """
        query = {}
        for key, value in self.params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple, set)):
                query[key] = ",".join(str(v) for v in value)
            elif isinstance(value, bool):
                query[key] = "true" if value else "false"
            else:
                query[key] = str(value)
        return query

    def __repr__(self) -> str:
        return f"Request(path='{self.path}', params={self.params!r}, session={self.session!r})"
