"""Unit tests for the single-call tool handler against a fake abuse API."""

import json
import logging

import httpx
import pytest

from abuse_core.exceptions import NetworkError, RequestConstructionError, UpstreamError
from abuse_core.tools import CREATE_TICKET_TOOL, LIST_TICKETS_TOOL, SingleCallTool
from abuse_core.models import AbuseTicketCreate, AbuseTicketId

BASE_URL = "https://abuse.test"


def _text(result):
    assert len(result.content) == 1
    return result.content[0].text


# ===================================================================
# Tool descriptors
# ===================================================================


class TestToolDescriptors:

    def test_names(self):
        assert CREATE_TICKET_TOOL.name == "post_v1_abuse_tickets"
        assert LIST_TICKETS_TOOL.name == "get_v1_abuse_tickets"

    def test_create_input_schema(self):
        schema = CREATE_TICKET_TOOL.input_schema()
        assert schema["type"] == "object"
        assert schema["required"] == []
        props = schema["properties"]
        assert set(props) == {"target", "type", "info", "infoUrl", "intentional", "proxy", "source"}
        assert props["intentional"]["type"] == "boolean"
        assert props["source"]["type"] == "string"
        assert "description" in props["infoUrl"]

    def test_list_input_schema(self):
        props = LIST_TICKETS_TOOL.input_schema()["properties"]
        assert list(props) == [
            "type", "closed", "sourceDomainOrIp", "target",
            "createdStart", "createdEnd", "limit", "offset",
        ]
        assert props["closed"]["type"] == "boolean"
        assert props["limit"]["type"] == "number"
        assert props["createdStart"]["type"] == "string"

    def test_to_mcp_tool(self):
        tool = LIST_TICKETS_TOOL.to_mcp_tool()
        assert tool.name == "get_v1_abuse_tickets"
        assert tool.description == "List all abuse tickets ids that match user provided filters"
        assert tool.inputSchema["properties"]["offset"]["type"] == "number"

    def test_unknown_location_rejected(self):
        with pytest.raises(ValueError):
            SingleCallTool("x", "x", "PUT", "/x", AbuseTicketCreate, AbuseTicketId, location="header")


# ===================================================================
# Create ticket (body) tool
# ===================================================================


class TestCreateTicket:

    @pytest.mark.asyncio
    async def test_success_pretty_json(self, fake_api, http_client):
        fake_api.respond(201, '{"u_number":"T-123"}')
        result = await CREATE_TICKET_TOOL.call({"source": "http://bad.example"}, BASE_URL, http_client)
        assert not result.isError
        text = _text(result)
        assert '"u_number": "T-123"' in text
        assert text == json.dumps({"u_number": "T-123"}, indent=2)

    @pytest.mark.asyncio
    async def test_request_shape(self, fake_api, http_client):
        fake_api.respond(201, '{"u_number":"T-1"}')
        await CREATE_TICKET_TOOL.call(
            {"target": "Acme", "intentional": True, "ticket_name": "ignored"},
            BASE_URL,
            http_client,
        )
        request = fake_api.last_request
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/v1/abuse/tickets"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"
        assert "Authorization" not in request.headers
        assert json.loads(request.content) == {"target": "Acme", "intentional": True}

    @pytest.mark.asyncio
    async def test_upstream_error_passes_body_verbatim(self, fake_api, http_client):
        fake_api.respond(400, '{"code":"bad_request"}')
        result = await CREATE_TICKET_TOOL.call({"type": "SPAM"}, BASE_URL, http_client)
        assert result.isError
        assert '{"code":"bad_request"}' in _text(result)
        assert _text(result) == 'API error: {"code":"bad_request"}'

    @pytest.mark.asyncio
    async def test_invoke_raises_upstream_error(self, fake_api, http_client):
        fake_api.respond(503, "service unavailable")
        with pytest.raises(UpstreamError) as exc_info:
            await CREATE_TICKET_TOOL.invoke({}, BASE_URL, http_client)
        assert exc_info.value.status_code == 503
        assert exc_info.value.body == "service unavailable"

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, fake_api, http_client):
        result = await CREATE_TICKET_TOOL.call(["not", "a", "mapping"], BASE_URL, http_client)
        assert result.isError
        assert _text(result) == "Invalid arguments object"
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_binding_error(self, fake_api, http_client):
        result = await CREATE_TICKET_TOOL.call({"intentional": "yes"}, BASE_URL, http_client)
        assert result.isError
        assert _text(result).startswith("Failed to convert arguments to request type:")
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_network_error(self, fake_api, http_client):
        fake_api.fail_with(httpx.ConnectError("connection refused"))
        result = await CREATE_TICKET_TOOL.call({}, BASE_URL, http_client)
        assert result.isError
        assert _text(result).startswith("Request failed")

        with pytest.raises(NetworkError):
            await CREATE_TICKET_TOOL.invoke({}, BASE_URL, http_client)

    @pytest.mark.asyncio
    async def test_request_construction_error(self, fake_api, http_client):
        with pytest.raises(RequestConstructionError):
            await CREATE_TICKET_TOOL.invoke({}, "https://abuse\x00.test", http_client)
        assert fake_api.requests == []


# ===================================================================
# List tickets (query) tool
# ===================================================================


class TestListTickets:

    @pytest.mark.asyncio
    async def test_query_string_order(self, fake_api, http_client):
        fake_api.respond(200, '{"ticketIds": []}')
        await LIST_TICKETS_TOOL.call(
            {"limit": 10, "unknown": "x", "closed": False, "type": "spam"},
            BASE_URL,
            http_client,
        )
        request = fake_api.last_request
        assert request.method == "GET"
        assert request.url.path == "/v1/abuse/tickets"
        assert request.url.query == b"type=spam&closed=false&limit=10"
        assert request.headers["Accept"] == "application/json"
        assert "Content-Type" not in request.headers

    @pytest.mark.asyncio
    async def test_whole_number_float_rendered_as_integer(self, fake_api, http_client):
        fake_api.respond(200, '{"ticketIds": []}')
        result = await LIST_TICKETS_TOOL.call({"limit": 10.0, "offset": 20.0, "type": "spam"}, BASE_URL, http_client)
        assert not result.isError
        assert fake_api.last_request.url.query == b"type=spam&limit=10&offset=20"

    @pytest.mark.asyncio
    async def test_non_numeric_limit_rejected(self, fake_api, http_client):
        result = await LIST_TICKETS_TOOL.call({"limit": "10"}, BASE_URL, http_client)
        assert result.isError
        assert _text(result).startswith("Failed to convert arguments to request type:")
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_undecodable_content_encoding(self, fake_api, http_client):
        fake_api.respond(200, b"not gzip", headers={"Content-Encoding": "gzip"})
        result = await LIST_TICKETS_TOOL.call({}, BASE_URL, http_client)
        assert result.isError
        assert _text(result).startswith("Request failed")

        with pytest.raises(NetworkError):
            await LIST_TICKETS_TOOL.invoke({}, BASE_URL, http_client)

    @pytest.mark.asyncio
    async def test_no_arguments_no_query(self, fake_api, http_client):
        fake_api.respond(200, '{"ticketIds": []}')
        await LIST_TICKETS_TOOL.call({}, BASE_URL, http_client)
        assert str(fake_api.last_request.url) == f"{BASE_URL}/v1/abuse/tickets"

    @pytest.mark.asyncio
    async def test_success_decoded(self, fake_api, http_client):
        fake_api.respond(200, '{"pagination":{"total":2,"extra":1},"ticketIds":["A-1","A-2"]}')
        result = await LIST_TICKETS_TOOL.call({"type": "spam"}, BASE_URL, http_client)
        assert not result.isError
        text = _text(result)
        assert json.loads(text) == {"pagination": {"total": 2}, "ticketIds": ["A-1", "A-2"]}
        assert '\n  "ticketIds": [' in text

    @pytest.mark.asyncio
    async def test_malformed_body_returned_raw(self, fake_api, http_client, caplog):
        fake_api.respond(200, "<html>not json")
        with caplog.at_level(logging.WARNING, logger="abuse-core"):
            result = await LIST_TICKETS_TOOL.call({}, BASE_URL, http_client)
        assert not result.isError
        assert _text(result) == "<html>not json"
        assert any("returning raw body" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_schema_mismatch_returned_raw(self, fake_api, http_client):
        fake_api.respond(200, '{"ticketIds": "not-a-list"}')
        text = await LIST_TICKETS_TOOL.invoke({}, BASE_URL, http_client)
        assert text == '{"ticketIds": "not-a-list"}'
