# mcp_hub/handlers/klaviyo/get_cart_status.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field

from mcp_hub.connectors.factory import register_handler
from mcp_hub.handlers.connector_handler import ActionHandler, error_response, success_response
from mcp_hub.stores.memory_store import InMemoryStore
from mcp_hub.stores.seed_data import KLAVIYO_CARTS


class GetCartStatusArgs(BaseModel):
    email: EmailStr = Field(..., description="Profile email to look up")


class KlaviyoAuth(BaseModel):
    token: str = Field(..., min_length=1, description="Klaviyo private API key")


def _cart_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "productId": item.get("product_id"),
        "sku": item.get("sku"),
        "productName": item.get("product_name"),
        "quantity": item.get("quantity"),
        "unitPrice": item.get("unit_price"),
        "lineTotal": item.get("line_total"),
    }


@register_handler("klaviyo", "getCartStatus")
class KlaviyoGetCartStatusHandler(ActionHandler):
    """Handler para klaviyo.getCartStatus (simulado)."""

    description = "Retrieves the active cart of a Klaviyo profile identified by email."
    args_schema = GetCartStatusArgs
    connection_schema = KlaviyoAuth
    service_name = "Klaviyo"

    async def run(
        self,
        args: GetCartStatusArgs,
        auth: KlaviyoAuth,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        if store is None:
            return error_response("Cart store is not available.")

        profile = store.get(KLAVIYO_CARTS, args.email)
        if profile is None:
            return success_response(
                {"email": args.email, "cart": None},
                "Klaviyo profile not found (simulated).",
            )

        cart = profile.get("cart")
        if not cart or not cart.get("items"):
            return success_response(
                {"email": args.email, "cart": None},
                "Profile found, but no active cart or cart is empty.",
            )

        data = {
            "email": args.email,
            "cart": {
                "cartId": cart.get("cart_id"),
                "items": [_cart_item(item) for item in cart["items"]],
                "currency": cart.get("currency"),
                "totalAmount": cart.get("total_amount"),
                "cartUrl": cart.get("cart_url"),
                "lastUpdatedAt": cart.get("last_updated_at"),
            },
        }
        return success_response(data, "Cart status retrieved successfully.")
