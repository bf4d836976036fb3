"""Unit tests for the ActionHandler base class and envelope helpers."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from pydantic import BaseModel, Field, ValidationError

from mcp_hub.core.config import settings
from mcp_hub.exceptions.api_exceptions import ExternalAPIError
from mcp_hub.handlers.connector_handler import (
    ActionHandler,
    error_response,
    flatten_validation_errors,
    success_response,
)


class EchoArgs(BaseModel):
    text: str = Field(..., min_length=1)
    times: int = 1


class EchoAuth(BaseModel):
    token: str


class EchoHandler(ActionHandler):
    description = "Echoes the text."
    args_schema = EchoArgs
    connection_schema = EchoAuth
    service_name = "Echo"

    async def run(self, args, auth, store=None):
        return success_response({"text": args.text * args.times, "token": auth.token}, "Echoed.")


class NoAuthHandler(EchoHandler):
    connection_schema = None

    async def run(self, args, auth, store=None):
        return success_response({"auth": auth, "store": store}, "ok")


class FailingHandler(EchoHandler):
    async def run(self, args, auth, store=None):
        raise ExternalAPIError(service="Echo", endpoint="/echo", message="Echo API Error: down", status_code=503)


class BuggyHandler(EchoHandler):
    async def run(self, args, auth, store=None):
        raise KeyError("missing")


class TestEnvelope:

    def test_success_response(self):
        assert success_response([1], "done") == {"success": True, "data": [1], "message": "done"}

    def test_error_response_without_errors(self):
        assert error_response("failed") == {"success": False, "data": None, "message": "failed"}

    def test_error_response_with_errors(self):
        response = error_response("Invalid arguments.", {"text": ["Field required"]})
        assert response["errors"] == {"text": ["Field required"]}

    def test_flatten_validation_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            EchoArgs.model_validate({"times": "many"})

        errors = flatten_validation_errors(exc_info.value)

        assert set(errors) == {"text", "times"}
        assert all(isinstance(messages, list) and messages for messages in errors.values())


class TestExecute:

    @pytest.mark.asyncio
    async def test_valid_call(self):
        result = await EchoHandler().execute({"text": "ab", "times": 2}, {"token": "t"})

        assert result == {"success": True, "data": {"text": "abab", "token": "t"}, "message": "Echoed."}

    @pytest.mark.asyncio
    async def test_args_validated_before_auth(self):
        result = await EchoHandler().execute({"text": ""}, {})

        assert result["message"] == "Invalid arguments."
        assert list(result["errors"]) == ["text"]

    @pytest.mark.asyncio
    async def test_invalid_auth(self):
        result = await EchoHandler().execute({"text": "hi"}, {"token": None})

        assert result["message"] == "Invalid auth information."
        assert "token" in result["errors"]

    @pytest.mark.asyncio
    async def test_none_args_treated_as_empty(self):
        result = await EchoHandler().execute(None, {"token": "t"})

        assert result["message"] == "Invalid arguments."

    @pytest.mark.asyncio
    async def test_auth_ignored_without_connection_schema(self, store):
        result = await NoAuthHandler().execute({"text": "hi"}, {"anything": 1}, store=store)

        assert result["data"] == {"auth": None, "store": store}

    @pytest.mark.asyncio
    async def test_external_api_error_becomes_envelope(self):
        result = await FailingHandler().execute({"text": "hi"}, {"token": "t"})

        assert result == {"success": False, "data": None, "message": "Echo API Error: down"}

    @pytest.mark.asyncio
    async def test_programming_errors_propagate(self):
        with pytest.raises(KeyError):
            await BuggyHandler().execute({"text": "hi"}, {"token": "t"})


class TestDescribeHttpError:

    @staticmethod
    def _status_error(status_code, **kwargs):
        request = httpx.Request("GET", "https://api.example.com/echo")
        response = httpx.Response(status_code, request=request, **kwargs)
        return httpx.HTTPStatusError("error", request=request, response=response)

    def test_nested_error_message(self):
        error = self._status_error(400, json={"error": {"message": "No such customer"}})
        assert EchoHandler().describe_http_error(error) == "Echo API Error: No such customer"

    def test_top_level_message(self):
        error = self._status_error(403, json={"message": "Forbidden resource"})
        assert EchoHandler().describe_http_error(error) == "Echo API Error: Forbidden resource"

    def test_non_json_body_uses_reason(self):
        error = self._status_error(502, text="<html>bad gateway</html>")
        assert EchoHandler().describe_http_error(error) == "Echo API Error: Bad Gateway"


class TestRequestJson:

    URL = "https://api.example.com/echo"

    @pytest.fixture
    def client_cls(self):
        with patch("mcp_hub.handlers.connector_handler.httpx.AsyncClient") as client_cls:
            client_cls.return_value.__aenter__.return_value.request = AsyncMock()
            yield client_cls

    def _respond(self, client_cls, **kwargs):
        response = httpx.Response(200, request=httpx.Request("GET", self.URL), **kwargs)
        client_cls.return_value.__aenter__.return_value.request.return_value = response

    @pytest.mark.asyncio
    async def test_returns_json_body(self, client_cls):
        self._respond(client_cls, json={"id": "cus_1"})

        assert await EchoHandler().request_json("GET", self.URL) == {"id": "cus_1"}

    @pytest.mark.asyncio
    async def test_non_json_success_body(self, client_cls):
        self._respond(client_cls, text="<html>maintenance</html>")

        with pytest.raises(ExternalAPIError) as exc_info:
            await EchoHandler().request_json("GET", self.URL)

        assert str(exc_info.value) == "Echo API Error: response is not valid JSON"
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_non_json_success_body_becomes_envelope(self, client_cls):
        self._respond(client_cls, text="not json")

        class FetchingHandler(EchoHandler):
            async def run(self, args, auth, store=None):
                return success_response(await self.request_json("GET", TestRequestJson.URL), "ok")

        result = await FetchingHandler().execute({"text": "hi"}, {"token": "t"})

        assert result == {"success": False, "data": None, "message": "Echo API Error: response is not valid JSON"}

    @pytest.mark.asyncio
    async def test_default_client_timeout(self, client_cls, monkeypatch):
        monkeypatch.setattr(settings, "HTTPX_TIMEOUT", None)
        self._respond(client_cls, json={})

        await EchoHandler().request_json("GET", self.URL)

        client_cls.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_configured_timeout(self, client_cls, monkeypatch):
        monkeypatch.setattr(settings, "HTTPX_TIMEOUT", 2.5)
        self._respond(client_cls, json={})

        await EchoHandler().request_json("GET", self.URL)

        client_cls.assert_called_once_with(timeout=2.5)
