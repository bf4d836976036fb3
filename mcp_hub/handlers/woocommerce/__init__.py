from pydantic import BaseModel, Field, field_validator

DESCRIPTION = "Orders and customers from a WooCommerce store via its REST API."


class WooCommerceConnection(BaseModel):
    baseUrl: str = Field(..., description="Store URL, e.g. https://shop.example.com")
    consumerKey: str = Field(..., min_length=1)
    consumerSecret: str = Field(..., min_length=1)

    @field_validator("baseUrl")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("WooCommerce base URL is required.")
        return value.rstrip("/")
