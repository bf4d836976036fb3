# mcp_hub/handlers/stripe/get_invoices.py

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

from mcp_hub.connectors.factory import register_handler
from mcp_hub.core.config import settings
from mcp_hub.handlers.connector_handler import ActionHandler, success_response
from mcp_hub.handlers.stripe import StripeConnection
from mcp_hub.stores.memory_store import InMemoryStore


class GetInvoicesArgs(BaseModel):
    customerId: Optional[str] = Field(None, description="ID of the customer whose invoices to retrieve.")
    subscriptionId: Optional[str] = Field(None, description="ID of the subscription whose invoices to retrieve.")
    status: Optional[Literal["draft", "open", "paid", "uncollectible", "void"]] = Field(
        None, description="The status of the invoices to retrieve."
    )
    limit: Optional[int] = Field(None, gt=0, le=100, description="Number of invoices to return, 1 to 100.")
    starting_after: Optional[str] = Field(None, description="Pagination cursor.")
    ending_before: Optional[str] = Field(None, description="Pagination cursor.")


@register_handler("stripe", "getInvoices")
class StripeGetInvoicesHandler(ActionHandler):
    """
    Handler para stripe.getInvoices.
    Usa el endpoint GET https://api.stripe.com/v1/invoices.
    """

    description = (
        "Fetches a list of invoices from Stripe. Supports filtering by customer ID, "
        "subscription ID, status, and pagination."
    )
    args_schema = GetInvoicesArgs
    connection_schema = StripeConnection
    service_name = "Stripe"

    async def run(
        self,
        args: GetInvoicesArgs,
        auth: StripeConnection,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if args.customerId:
            params["customer"] = args.customerId
        if args.subscriptionId:
            params["subscription"] = args.subscriptionId
        if args.status:
            params["status"] = args.status
        if args.limit:
            params["limit"] = args.limit
        if args.starting_after:
            params["starting_after"] = args.starting_after
        if args.ending_before:
            params["ending_before"] = args.ending_before

        data = await self.request_json(
            "GET",
            f"{settings.STRIPE_API_BASE}/invoices",
            params=params,
            headers={"Authorization": f"Bearer {auth.token}"},
        )

        invoices = [
            {
                "id": invoice.get("id"),
                "number": invoice.get("number"),
                "status": invoice.get("status"),
                "customer": invoice.get("customer"),
                "currency": invoice.get("currency"),
                "amountDue": invoice.get("amount_due"),
                "amountPaid": invoice.get("amount_paid"),
                "total": invoice.get("total"),
                "created": invoice.get("created"),
                "dueDate": invoice.get("due_date"),
                "hostedInvoiceUrl": invoice.get("hosted_invoice_url"),
            }
            for invoice in data.get("data") or []
        ]
        return success_response(
            {"invoices": invoices, "hasMore": bool(data.get("has_more"))},
            f"Retrieved {len(invoices)} invoice(s).",
        )
