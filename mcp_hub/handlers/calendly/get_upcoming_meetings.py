# mcp_hub/handlers/calendly/get_upcoming_meetings.py

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field

from mcp_hub.connectors.factory import register_handler
from mcp_hub.handlers.connector_handler import ActionHandler, error_response, success_response
from mcp_hub.stores.memory_store import InMemoryStore
from mcp_hub.stores.seed_data import CALENDLY_EVENTS


class UpcomingMeetingsArgs(BaseModel):
    email: EmailStr


class CalendlyAuth(BaseModel):
    token: str = Field(..., min_length=1, description="Calendly API token")


def _parse_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@register_handler("calendly", "getUpcomingMeetings")
class CalendlyGetUpcomingMeetingsHandler(ActionHandler):
    """
    Handler para calendly.getUpcomingMeetings (simulado).
    Devuelve los eventos futuros del invitado ordenados por fecha de inicio.
    """

    description = "Lists the upcoming Calendly meetings for an invitee email, sorted by start time."
    args_schema = UpcomingMeetingsArgs
    connection_schema = CalendlyAuth
    service_name = "Calendly"

    async def run(
        self,
        args: UpcomingMeetingsArgs,
        auth: CalendlyAuth,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        if store is None:
            return error_response("Meeting store is not available.")

        events = store.get(CALENDLY_EVENTS, args.email)
        if events is None:
            return success_response(
                {"email": args.email, "upcomingMeetings": []},
                "Invitee email not found in Calendly (simulated).",
            )
        now = datetime.now(timezone.utc)

        upcoming = sorted(
            (event for event in events if _parse_time(event["start_time"]) > now),
            key=lambda event: _parse_time(event["start_time"]),
        )
        meetings = [
            {
                "eventId": event["uri"].rstrip("/").split("/")[-1],
                "name": event.get("name"),
                "startTime": event["start_time"],
                "endTime": event.get("end_time"),
                "status": event.get("status"),
                "eventType": event.get("event_type"),
            }
            for event in upcoming
        ]

        message = (
            "Upcoming meetings retrieved successfully."
            if meetings
            else "No upcoming meetings found for this email."
        )
        return success_response({"email": args.email, "upcomingMeetings": meetings}, message)
