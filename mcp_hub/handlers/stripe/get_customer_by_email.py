# mcp_hub/handlers/stripe/get_customer_by_email.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr

from mcp_hub.connectors.factory import register_handler
from mcp_hub.core.config import settings
from mcp_hub.handlers.connector_handler import ActionHandler, success_response
from mcp_hub.handlers.stripe import StripeConnection
from mcp_hub.stores.memory_store import InMemoryStore


class GetCustomerByEmailArgs(BaseModel):
    email: EmailStr


@register_handler("stripe", "getCustomerByEmail")
class StripeGetCustomerByEmailHandler(ActionHandler):
    """
    Handler para stripe.getCustomerByEmail.
    Usa el endpoint GET https://api.stripe.com/v1/customers?email=...&limit=1.
    """

    description = (
        "Fetches a customer from Stripe by their email address. "
        "Returns the first customer if multiple exist with the same email."
    )
    args_schema = GetCustomerByEmailArgs
    connection_schema = StripeConnection
    service_name = "Stripe"

    async def run(
        self,
        args: GetCustomerByEmailArgs,
        auth: StripeConnection,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        data = await self.request_json(
            "GET",
            f"{settings.STRIPE_API_BASE}/customers",
            params={"email": args.email, "limit": 1},
            headers={"Authorization": f"Bearer {auth.token}"},
        )

        customers = data.get("data") or []
        if not customers:
            return success_response(None, "No customer found with that email.")

        customer = customers[0]
        return success_response(
            {
                "id": customer.get("id"),
                "name": customer.get("name"),
                "email": customer.get("email"),
                "phone": customer.get("phone"),
                "created": customer.get("created"),
                "currency": customer.get("currency"),
                "livemode": customer.get("livemode"),
                "metadata": customer.get("metadata"),
            },
            "Customer retrieved successfully.",
        )
