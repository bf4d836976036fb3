# mcp_hub/handlers/hubspot/get_ticket_status.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from mcp_hub.connectors.factory import register_handler
from mcp_hub.handlers.connector_handler import ActionHandler, error_response, success_response
from mcp_hub.handlers.hubspot import PIPELINE_NAMES, STAGE_NAMES
from mcp_hub.stores.memory_store import InMemoryStore
from mcp_hub.stores.seed_data import HUBSPOT_TICKETS


class GetTicketStatusArgs(BaseModel):
    ticketId: str = Field(..., min_length=1)


class HubSpotOptionalAuth(BaseModel):
    token: Optional[str] = Field(None, description="HubSpot API key (unused by the simulated backend).")


@register_handler("hubspot", "getTicketStatus")
class HubSpotGetTicketStatusHandler(ActionHandler):
    """Handler para hubspot.getTicketStatus (simulado)."""

    description = "Retrieves the current status, pipeline and last update of a HubSpot ticket."
    args_schema = GetTicketStatusArgs
    connection_schema = HubSpotOptionalAuth
    service_name = "HubSpot"

    async def run(
        self,
        args: GetTicketStatusArgs,
        auth: HubSpotOptionalAuth,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        if store is None:
            return error_response("Ticket store is not available.")

        ticket = store.get(HUBSPOT_TICKETS, args.ticketId)
        if ticket is None:
            return success_response(None, "Ticket not found.")

        properties = ticket["properties"]
        return success_response(
            {
                "id": ticket["id"],
                "subject": properties.get("subject"),
                "status": STAGE_NAMES.get(properties.get("hs_pipeline_stage"), properties.get("hs_pipeline_stage")),
                "pipeline": PIPELINE_NAMES.get(properties.get("hs_pipeline"), properties.get("hs_pipeline")),
                "lastUpdate": properties.get("lastmodifieddate"),
            },
            "Ticket status retrieved successfully.",
        )
