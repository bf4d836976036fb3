"""
Datos semilla del backend simulado (HubSpot tickets, Calendly events,
Klaviyo carts). Las fechas son relativas al momento del reset.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

HUBSPOT_TICKETS = "hubspot.tickets"
CALENDLY_EVENTS = "calendly.events"
KLAVIYO_CARTS = "klaviyo.carts"


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def default_seed() -> Dict[str, Dict[str, Any]]:
    now = datetime.now(timezone.utc)

    return {
        HUBSPOT_TICKETS: {
            "hub_ticket_78901": {
                "id": "hub_ticket_78901",
                "properties": {
                    "subject": "Issue with login",
                    "hs_pipeline": "0",
                    "hs_pipeline_stage": "2",
                    "content": "User reported they cannot log in to their account.",
                    "createdate": _iso(now - timedelta(days=2)),
                    "lastmodifieddate": _iso(now - timedelta(days=1)),
                },
            },
        },
        # Eventos indexados por email del invitado
        CALENDLY_EVENTS: {
            "invitee@example.com": [
                {
                    "uri": "https://api.calendly.com/scheduled_events/event_uuid_123",
                    "name": "30 Minute Meeting",
                    "start_time": _iso(now + timedelta(days=3)),
                    "end_time": _iso(now + timedelta(days=3, minutes=30)),
                    "status": "active",
                    "event_type": "https://api.calendly.com/event_types/ETYPE123",
                },
                {
                    "uri": "https://api.calendly.com/scheduled_events/event_uuid_future_sync",
                    "name": "Project Sync",
                    "start_time": _iso(now + timedelta(days=1)),
                    "end_time": _iso(now + timedelta(days=1, hours=1)),
                    "status": "active",
                    "event_type": "https://api.calendly.com/event_types/ETYPE789",
                },
                {
                    "uri": "https://api.calendly.com/scheduled_events/event_uuid_past",
                    "name": "Intro Call",
                    "start_time": _iso(now - timedelta(days=5)),
                    "end_time": _iso(now - timedelta(days=5) + timedelta(minutes=15)),
                    "status": "active",
                    "event_type": "https://api.calendly.com/event_types/ETYPEPAST",
                },
            ],
        },
        # Perfiles indexados por email; cart None = sin carrito activo
        KLAVIYO_CARTS: {
            "shopper@example.com": {
                "profile_id": "klaviyo_prof_123",
                "cart": {
                    "cart_id": "klaviyo_cart_abc123",
                    "items": [
                        {"product_id": "PROD001", "sku": "TSHIRT-AWESOME-M", "product_name": "Awesome T-Shirt",
                         "quantity": 1, "unit_price": "25.00", "line_total": "25.00"},
                        {"product_id": "PROD002", "sku": "CAP-COOL-OS", "product_name": "Cool Cap",
                         "quantity": 2, "unit_price": "15.00", "line_total": "30.00"},
                    ],
                    "currency": "USD",
                    "total_amount": "55.00",
                    "cart_url": "https://example.com/cart/klaviyo_cart_abc123",
                    "last_updated_at": _iso(now - timedelta(hours=1)),
                },
            },
            "another@example.com": {
                "profile_id": "klaviyo_prof_456",
                "cart": None,
            },
        },
    }
