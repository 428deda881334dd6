"""
Response envelope for the Shopify REST API.

Every operation returns a ``Response`` whose ``success`` flag tags it as a
success or a failure, so callers can branch without catching exceptions.
Successful bodies are decoded into the resource shape carried by the
request; failed ones keep the raw body untouched.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from shopify_rest.utils.error_handler import (
    ErrorCode,
    MissingParametersException,
    ShopifyAPIException,
    log_error,
)

Headers = List[Tuple[str, str]]


def empty_for(resource: Mapping[str, Any]) -> Any:
    """Empty value for a resource shape: ``[]`` for plurals, a blank model otherwise."""
    if not resource:
        return None
    model = next(iter(resource.values()))
    if isinstance(model, list):
        return []
    return model()


def decode_resource(payload: Mapping[str, Any], resource: Mapping[str, Any]) -> Any:
    """
    Decode a JSON payload against a resource shape.

    ``{"inventory_levels": [InventoryLevel]}`` decodes ``payload["inventory_levels"]``
    into a list of models, ``{"inventory_level": InventoryLevel}`` into one model.
    A missing root key yields the empty value for the shape.

    Raises:
        ValueError: The payload does not fit the shape
    """
    if not resource:
        return payload
    if not isinstance(payload, Mapping):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    key, model = next(iter(resource.items()))
    if key not in payload or payload[key] is None:
        return empty_for(resource)
    if isinstance(model, list):
        if not isinstance(payload[key], list):
            raise ValueError(f"expected a list under '{key}', got {type(payload[key]).__name__}")
        return [model[0].model_validate(item) for item in payload[key]]
    return model.model_validate(payload[key])


def parse_link_header(link_header: Optional[str]) -> Dict[str, Dict[str, str]]:
    """
    Parse a Shopify ``Link`` header.

    Returns a mapping from rel (``next``/``previous``) to the query params of
    the linked URL, e.g. ``{"next": {"page_info": "abc", "limit": "50"}}``.
    """
    links = {}
    if not link_header:
        return links

    # Format: <url>; rel="next", <url>; rel="previous"
    for part in link_header.split(","):
        pieces = part.split(";")
        if len(pieces) < 2:
            continue
        url_part = pieces[0].strip().strip("<>")
        rel = None
        for attr in pieces[1:]:
            name, _, value = attr.strip().partition("=")
            if name == "rel":
                rel = value.strip('"')
        if not rel:
            continue
        params = parse_qs(urlparse(url_part).query)
        links[rel] = {name: values[0] for name, values in params.items() if values}
    return links


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """
    Seconds to wait from a ``Retry-After`` header.

    The header holds either a number of seconds or an HTTP date. Anything
    unparseable yields None.
    """
    if not value:
        return None
    try:
        return max(int(float(value)), 0)
    except (ValueError, OverflowError):
        pass
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    return max(int((retry_at - datetime.now(timezone.utc)).total_seconds()), 0)


@dataclass(frozen=True)
class Response:
    """
    Uniform success/error wrapper returned by every resource operation.

    Attributes:
        success: True for 2xx responses with a decodable body
        code: HTTP status code (None when the request never got a response)
        headers: Response headers as (name, value) pairs
        body: Raw response body, or the error message for local failures
        data: Decoded resource, list of resources, or the empty resource
        missing_params: Required parameters that were absent (local validation only)
        endpoint: Path of the request that produced the response
    """

    success: bool
    code: Optional[int]
    headers: Headers = field(default_factory=list)
    body: str = ""
    data: Any = None
    missing_params: List[str] = field(default_factory=list)
    endpoint: Optional[str] = None

    @classmethod
    def new(
        cls,
        raw: Mapping[str, Any],
        resource: Mapping[str, Any],
        endpoint: Optional[str] = None,
    ) -> "Response":
        """
        Build a response from a raw ``{"body", "code", "headers"}`` mapping.

        Args:
            raw: Status code, headers and body text as received
            resource: Resource shape to decode a successful body into
            endpoint: Request path, kept for error reporting

        Returns:
            Response: Tagged success for 2xx with a decodable body, failure otherwise
        """
        code = raw.get("code")
        body = raw.get("body") or ""
        headers = list(raw.get("headers") or [])

        if code is None or not 200 <= code < 300:
            return cls(
                success=False,
                code=code,
                headers=headers,
                body=body,
                data=empty_for(resource),
                endpoint=endpoint,
            )

        if not body.strip():
            return cls(success=True, code=code, headers=headers, body=body, data=empty_for(resource), endpoint=endpoint)

        try:
            payload = json.loads(body)
            data = decode_resource(payload, resource)
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueError
            return cls.decode_error(e, code, headers, body, resource, endpoint)

        return cls(success=True, code=code, headers=headers, body=body, data=data, endpoint=endpoint)

    @classmethod
    def decode_error(
        cls,
        exc: Exception,
        code: Optional[int],
        headers: Headers,
        body: str,
        resource: Mapping[str, Any],
        endpoint: Optional[str] = None,
    ) -> "Response":
        """A response arrived but its body could not be decoded into the resource shape."""
        log_error(
            ShopifyAPIException(
                f"Could not decode response: {exc}",
                api_response_code=code,
                endpoint=endpoint,
                error_code=ErrorCode.SHOPIFY_DECODE_ERROR,
            ),
            {"body_preview": body[:200]},
        )
        return cls(
            success=False,
            code=code,
            headers=list(headers),
            body=body,
            data=empty_for(resource),
            endpoint=endpoint,
        )

    @classmethod
    def unprocessable_entity(
        cls,
        message: str,
        empty: Any,
        missing: Optional[List[str]] = None,
        endpoint: Optional[str] = None,
    ) -> "Response":
        """Local validation failure: code 422, no headers, the message as body."""
        return cls(
            success=False,
            code=422,
            headers=[],
            body=message,
            data=empty,
            missing_params=list(missing or []),
            endpoint=endpoint,
        )

    @classmethod
    def network_error(cls, exc: BaseException, empty: Any, endpoint: Optional[str] = None) -> "Response":
        """The request never produced an HTTP response."""
        return cls(
            success=False,
            code=None,
            headers=[],
            body=str(exc) or type(exc).__name__,
            data=empty,
            endpoint=endpoint,
        )

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None

    @property
    def links(self) -> Dict[str, Dict[str, str]]:
        return parse_link_header(self.header("Link"))

    @property
    def next_page_info(self) -> Optional[str]:
        return self.links.get("next", {}).get("page_info")

    @property
    def previous_page_info(self) -> Optional[str]:
        return self.links.get("previous", {}).get("page_info")

    def next_page_params(self) -> Optional[Dict[str, Any]]:
        """
        String-keyed params for fetching the next page, or None on the last page.

        Only ``page_info`` and ``limit`` are carried over; Shopify rejects any
        other filter alongside ``page_info``.
        """
        next_link = self.links.get("next")
        if not next_link or "page_info" not in next_link:
            return None
        params: Dict[str, Any] = {"page_info": next_link["page_info"]}
        if "limit" in next_link:
            params["limit"] = int(next_link["limit"])
        return params

    def raise_for_error(self) -> "Response":
        """
        Raise for failed responses, return self otherwise.

        Raises:
            MissingParametersException: For local parameter validation failures
            ShopifyAPIException: For API or network failures
        """
        if self.success:
            return self

        if self.missing_params:
            raise MissingParametersException(self.body, missing=self.missing_params)

        raise ShopifyAPIException(
            f"Shopify request failed with status {self.code}: {self.body}",
            api_response_code=self.code,
            endpoint=self.endpoint,
            rate_limited=self.code == 429,
            retry_after=parse_retry_after(self.header("Retry-After")),
        )
