"""
Shopify session.

A session carries what the request builder needs to reach one store:
the shop domain, the access token and the API version.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shopify_rest.core.config import Settings, get_settings
from shopify_rest.utils.error_handler import ValidationException


class Session(BaseModel):
    """Credentials and context for one shop. Read-only once built."""

    model_config = ConfigDict(frozen=True)

    shop_domain: str
    access_token: str
    api_version: str = Field(default_factory=lambda: get_settings().SHOPIFY_API_VERSION)
    timeout: float = Field(default_factory=lambda: get_settings().SHOPIFY_REQUEST_TIMEOUT)

    @field_validator("shop_domain")
    @classmethod
    def normalize_shop_domain(cls, v):
        v = v.strip()
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix) :]
        v = v.rstrip("/")
        if not v:
            raise ValidationException(
                "Shop domain cannot be empty",
                field="shop_domain",
                expected_format="my-shop.myshopify.com",
            )
        return v

    @field_validator("access_token")
    @classmethod
    def validate_access_token(cls, v):
        if not v or not v.strip():
            raise ValidationException("Access token cannot be empty", field="access_token")
        return v

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Session":
        """Build a session from the environment configuration."""
        settings = settings or get_settings()
        return cls(
            shop_domain=settings.SHOPIFY_SHOP_URL,
            access_token=settings.SHOPIFY_ACCESS_TOKEN,
            api_version=settings.SHOPIFY_API_VERSION,
            timeout=settings.SHOPIFY_REQUEST_TIMEOUT,
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.shop_domain}/admin/api/{self.api_version}/"

    def headers(self) -> Dict[str, str]:
        """Headers sent with every request for this shop."""
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def __repr__(self) -> str:
        # The access token stays out of logs
        return f"Session(shop_domain='{self.shop_domain}', api_version='{self.api_version}')"
