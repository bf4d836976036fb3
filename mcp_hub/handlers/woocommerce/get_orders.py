# mcp_hub/handlers/woocommerce/get_orders.py

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, EmailStr, Field

from mcp_hub.connectors.factory import register_handler
from mcp_hub.exceptions.logging_utils import get_hub_logger
from mcp_hub.handlers.connector_handler import ActionHandler, success_response
from mcp_hub.handlers.woocommerce import WooCommerceConnection
from mcp_hub.stores.memory_store import InMemoryStore

logger = get_hub_logger(__name__)

# Con filtros activos se pide la página máxima
FILTERED_PAGE_SIZE = 100


class GetOrdersArgs(BaseModel):
    email: Optional[EmailStr] = Field(
        None,
        description="Not used for API filtering. Use 'customerId' for strict filtering or 'search' with an email.",
    )
    status: Optional[str] = Field(None, description="e.g. 'processing', 'completed', 'on-hold'")
    search: Optional[str] = Field(None, description="Order number or customer email")
    customerId: Optional[Union[int, str]] = Field(None, description="The WooCommerce customer ID.")


@register_handler("woocommerce", "getOrders")
class WooCommerceGetOrdersHandler(ActionHandler):
    """
    Handler para woocommerce.getOrders.
    Usa GET {baseUrl}/wp-json/wc/v3/orders con Basic auth (consumer key/secret).
    """

    description = (
        "Fetches orders from WooCommerce. For strict filtering by customer, use 'customerId'. "
        "The 'search' field can be used with an email string for a broader search. "
        "Supports filtering by 'status'."
    )
    args_schema = GetOrdersArgs
    connection_schema = WooCommerceConnection
    service_name = "WooCommerce"

    async def run(
        self,
        args: GetOrdersArgs,
        auth: WooCommerceConnection,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if args.status:
            params["status"] = args.status
        if args.search:
            params["search"] = args.search
        if args.customerId:
            params["customer"] = args.customerId
        if params:
            params["per_page"] = FILTERED_PAGE_SIZE

        url = f"{auth.baseUrl}/wp-json/wc/v3/orders"
        logger.debug("Fetching orders", url=url, params=params)

        orders = await self.request_json(
            "GET",
            url,
            params=params,
            auth=(auth.consumerKey, auth.consumerSecret),
            headers={"Content-Type": "application/json"},
        )
        orders = orders if isinstance(orders, list) else []

        return success_response({"orders": orders}, f"Retrieved {len(orders)} order(s).")
