"""
Base Shopify REST client.

This module executes ``Request`` objects over HTTP and wraps whatever comes
back in a ``Response``. It makes exactly one attempt per call: retries,
backoff and caching are left to the caller.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientTimeout

from shopify_rest.core.config import get_settings
from shopify_rest.core.logging_config import log_api_call
from shopify_rest.db.request import Request
from shopify_rest.db.response import Response, empty_for
from shopify_rest.utils.error_handler import ShopifyAPIException, log_error

logger = logging.getLogger(__name__)


class Client:
    """
    HTTP executor for Shopify REST requests.

    A fresh ``aiohttp.ClientSession`` is opened for every call and closed when
    the call returns, so one client can be shared freely between tasks.
    """

    def __init__(self, user_agent: Optional[str] = None):
        settings = get_settings()
        self.user_agent = user_agent or f"{settings.APP_NAME}/{settings.APP_VERSION}"

    async def get(self, request: Request) -> Response:
        return await self.execute("GET", request)

    async def post(self, request: Request) -> Response:
        return await self.execute("POST", request)

    async def put(self, request: Request) -> Response:
        return await self.execute("PUT", request)

    async def delete(self, request: Request) -> Response:
        return await self.execute("DELETE", request)

    async def execute(self, method: str, request: Request) -> Response:
        """
        Send a request and wrap the outcome.

        GET and DELETE send params as a query string, POST and PUT as a JSON body.

        Args:
            method: HTTP method
            request: Request to send

        Returns:
            Response: Decoded success, HTTP error, or network error. Never raises for
            transport failures or undecodable bodies.
        """
        kwargs: Dict[str, Any] = {}
        if method in ("GET", "DELETE"):
            kwargs["params"] = request.query_params()
        else:
            kwargs["json"] = request.params

        headers = request.session.headers()
        headers["User-Agent"] = self.user_agent
        timeout = ClientTimeout(total=request.session.timeout)

        started = time.monotonic()
        try:
            async with aiohttp.ClientSession(headers=headers, timeout=timeout) as http:
                async with http.request(method, request.url, **kwargs) as http_response:
                    status = http_response.status
                    response_headers = list(http_response.headers.items())
                    try:
                        body = await http_response.text()
                    except UnicodeDecodeError as e:
                        log_api_call(method, request.url, status, time.monotonic() - started)
                        return Response.decode_error(
                            e, status, response_headers, "", request.resource, endpoint=request.path
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log_api_call(method, request.url, None, time.monotonic() - started, error=str(e))
            log_error(
                ShopifyAPIException(f"Network error on {method} {request.path}: {e!r}", endpoint=request.path),
                {"method": method, "url": request.url},
            )
            return Response.network_error(e, empty_for(request.resource), endpoint=request.path)

        log_api_call(method, request.url, status, time.monotonic() - started)

        response = Response.new(
            {"code": status, "headers": response_headers, "body": body}, request.resource, endpoint=request.path
        )
        if status == 429:
            logger.warning(
                f"Rate limit exceeded on {method} {request.path} (Retry-After: {response.header('Retry-After')})"
            )
        elif status >= 400:
            logger.warning(f"Shopify returned {status} for {method} {request.path}")
        return response

    def __repr__(self):
        return f"Client(user_agent='{self.user_agent}')"
