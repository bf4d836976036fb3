# mcp_hub/handlers/shopify/get_customer_by_email.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr

from mcp_hub.connectors.factory import register_handler
from mcp_hub.core.config import settings
from mcp_hub.handlers.connector_handler import ActionHandler, error_response, success_response
from mcp_hub.stores.memory_store import InMemoryStore


class ShopifyCustomerArgs(BaseModel):
    email: EmailStr


@register_handler("shopify", "getCustomerByEmail")
class ShopifyGetCustomerByEmailHandler(ActionHandler):
    """
    Handler para shopify.getCustomerByEmail.
    Usa GET https://{store}/admin/api/{version}/customers/search.json.
    Las credenciales de la tienda vienen de la configuración, no del objeto auth.
    """

    description = "Looks up a Shopify customer by email and returns their profile, tags and order totals."
    args_schema = ShopifyCustomerArgs
    service_name = "Shopify"

    async def run(
        self,
        args: ShopifyCustomerArgs,
        auth: None,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        if not (settings.SHOPIFY_API_KEY and settings.SHOPIFY_API_PASSWORD and settings.SHOPIFY_STORE_DOMAIN):
            return error_response("Shopify API credentials or store domain are not configured.")

        url = (
            f"https://{settings.SHOPIFY_STORE_DOMAIN}/admin/api/"
            f"{settings.SHOPIFY_API_VERSION}/customers/search.json"
        )
        data = await self.request_json(
            "GET",
            url,
            params={"query": f"email:{args.email}"},
            auth=(settings.SHOPIFY_API_KEY, settings.SHOPIFY_API_PASSWORD),
            headers={"Content-Type": "application/json"},
        )

        customers = data.get("customers") or []
        if not customers:
            return success_response(None, "No customer found with that email.")

        customer = customers[0]
        return success_response(
            {
                "id": customer.get("id"),
                "firstName": customer.get("first_name"),
                "lastName": customer.get("last_name"),
                "email": customer.get("email"),
                "phone": customer.get("phone"),
                "addresses": customer.get("addresses"),
                "tags": customer.get("tags"),
                "totalSpent": customer.get("total_spent"),
                "numberOfOrders": customer.get("orders_count"),
            },
            "Customer retrieved successfully.",
        )
