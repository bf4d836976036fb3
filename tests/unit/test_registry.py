"""Unit tests for the handler registry."""

from typing import Optional

import pytest
from pydantic import BaseModel, RootModel

from mcp_hub.connectors import factory
from mcp_hub.connectors.factory import (
    get_registered_action,
    get_registered_handlers,
    get_registry_status,
    has_validation_schema,
    register_handler,
)
from mcp_hub.discovery.field_kind import NumberKind, OptionalKind, StringKind
from mcp_hub.handlers.connector_handler import ActionHandler
from mcp_hub.handlers.stripe.get_customer_by_email import StripeGetCustomerByEmailHandler


@pytest.fixture
def clean_registry(monkeypatch):
    """Registry aislado para los handlers definidos en el test."""
    monkeypatch.setattr(factory, "_HANDLER_REGISTRY", dict(factory._HANDLER_REGISTRY))
    return factory._HANDLER_REGISTRY


class SearchArgs(BaseModel):
    email: str
    limit: Optional[int] = None


class TestRegisterHandler:

    def test_field_kinds_computed_at_registration(self, clean_registry):
        @register_handler("demo", "search")
        class SearchHandler(ActionHandler):
            description = "Search."
            args_schema = SearchArgs

            async def run(self, args, auth, store=None):
                return {}

        entry = clean_registry["demo.search"]
        assert entry.handler_cls is SearchHandler
        assert entry.key == "demo.search"
        assert entry.args_fields == {"email": StringKind(), "limit": OptionalKind(NumberKind())}
        assert entry.auth_fields is None

    def test_handler_without_schema(self, clean_registry):
        @register_handler("demo", "legacy")
        class LegacyHandler(ActionHandler):
            args_schema = None

            async def run(self, args, auth, store=None):
                return {}

        assert clean_registry["demo.legacy"].args_fields is None

    def test_last_registration_wins(self, clean_registry):
        @register_handler("demo", "twice")
        class First(ActionHandler):
            args_schema = SearchArgs

            async def run(self, args, auth, store=None):
                return {}

        @register_handler("demo", "twice")
        class Second(First):
            pass

        assert clean_registry["demo.twice"].handler_cls is Second


class TestLookup:

    def test_registered_action(self):
        entry = get_registered_action("stripe", "getCustomerByEmail")

        assert entry is not None
        assert entry.handler_cls is StripeGetCustomerByEmailHandler
        assert entry.module == "mcp_hub.handlers.stripe.get_customer_by_email"

    def test_unknown_action(self):
        assert get_registered_action("stripe", "deleteEverything") is None

    def test_all_bundled_handlers_registered(self):
        keys = set(get_registered_handlers())

        assert {
            "stripe.getCustomerByEmail",
            "stripe.getInvoices",
            "hubspot.createTicket",
            "hubspot.getTicketStatus",
            "shopify.getCustomerByEmail",
            "woocommerce.getOrders",
            "calendly.getUpcomingMeetings",
            "wordpress.getPosts",
            "klaviyo.getCartStatus",
        } <= keys

    def test_registry_status(self):
        get_registered_handlers()
        status = get_registry_status()

        assert status["scanned"] is True
        assert status["handlers_registered"] == len(status["handler_keys"])


@pytest.mark.parametrize(
    "schema, expected",
    [(SearchArgs, True), (Optional[SearchArgs], True), (None, False), (dict, False), ("SearchArgs", False), (RootModel[str], True)],
)
def test_has_validation_schema(schema, expected):
    assert has_validation_schema(schema) is expected
