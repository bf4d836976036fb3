# mcp_hub/handlers/hubspot/create_ticket.py

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from mcp_hub.connectors.factory import register_handler
from mcp_hub.exceptions.logging_utils import get_hub_logger, mask_secret
from mcp_hub.handlers.connector_handler import ActionHandler, error_response, success_response
from mcp_hub.handlers.hubspot import PIPELINE_NAMES, STAGE_NAMES
from mcp_hub.stores.memory_store import InMemoryStore
from mcp_hub.stores.seed_data import HUBSPOT_TICKETS

logger = get_hub_logger(__name__)

# Contacto que el backend simulado no conoce
UNKNOWN_CONTACT_ID = "hub_contact_nonexistent"


class CreateTicketArgs(BaseModel):
    subject: str = Field(..., min_length=1)
    contactId: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class HubSpotAuth(BaseModel):
    token: str = Field(..., min_length=1, description="HubSpot API key")


@register_handler("hubspot", "createTicket")
class HubSpotCreateTicketHandler(ActionHandler):
    """
    Handler para hubspot.createTicket (simulado contra el store en memoria).
    """

    description = "Creates a support ticket in HubSpot associated with a contact. Returns the ticket ID and status."
    args_schema = CreateTicketArgs
    connection_schema = HubSpotAuth
    service_name = "HubSpot"

    async def run(
        self,
        args: CreateTicketArgs,
        auth: HubSpotAuth,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        if store is None:
            return error_response("Ticket store is not available.")

        logger.info("Creating ticket", contact_id=args.contactId, token=mask_secret(auth.token))

        if args.contactId == UNKNOWN_CONTACT_ID:
            return error_response("Associated contact not found (simulated). Cannot create ticket.")

        now = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        ticket = {
            "id": f"hub_ticket_mock_{uuid.uuid4().hex[:7]}",
            "properties": {
                "subject": args.subject,
                "content": args.description,
                "hs_pipeline": "0",
                "hs_pipeline_stage": "1",
                "createdate": now,
                "lastmodifieddate": now,
            },
            "associations": {
                "contacts": {"results": [{"id": args.contactId, "type": "ticket_to_contact"}]},
            },
        }
        store.put(HUBSPOT_TICKETS, ticket["id"], ticket)

        properties = ticket["properties"]
        return success_response(
            {
                "ticketId": ticket["id"],
                "subject": properties["subject"],
                "status": STAGE_NAMES.get(properties["hs_pipeline_stage"], properties["hs_pipeline_stage"]),
                "pipeline": PIPELINE_NAMES.get(properties["hs_pipeline"], properties["hs_pipeline"]),
                "createdAt": properties["createdate"],
            },
            "Ticket created successfully.",
        )
