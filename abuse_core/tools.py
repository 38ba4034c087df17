"""Declarative single-call tools for the abuse ticket API.

Every tool binds its arguments onto a request model, sends exactly one HTTP
request and renders the decoded response as indented JSON.
"""

import logging
from typing import Annotated, Any, Dict, List, Optional, Type, get_args, get_origin

import httpx
from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel, ValidationError

from .actions import Action
from .binding import bind_arguments, build_query_string
from .exceptions import AbuseToolError, NetworkError, RequestConstructionError, UpstreamError
from .models import AbuseTicketCreate, AbuseTicketId, AbuseTicketList, AbuseTicketQuery

logger = logging.getLogger("abuse-core")

_JSON_TYPES = {bool: "boolean", int: "integer", float: "number", str: "string"}


def _json_type(annotation: Any) -> str:
    types = set()
    for arg in get_args(annotation) or (annotation,):
        if arg is type(None):
            continue
        if get_origin(arg) is Annotated:
            arg = get_args(arg)[0]
        types.add(arg)
    if types == {int, float}:
        return "number"
    if len(types) == 1:
        return _JSON_TYPES.get(types.pop(), "string")
    return "string"


class SingleCallTool:
    """One tool backed by one HTTP endpoint.

    Args:
        name: Tool name exposed to callers.
        description: Human readable description.
        method: HTTP method.
        path: Path appended to the API base URL.
        request_model: Model the arguments are bound to.
        response_model: Model a successful response is decoded into.
        location: ``"body"`` to send the bound model as JSON, ``"query"`` to
            render it as a query string.
    """

    def __init__(self, name: str, description: str, method: str, path: str,
                 request_model: Type[BaseModel], response_model: Type[BaseModel], location: str = "body"):
        if location not in ("body", "query"):
            raise ValueError(f"Unsupported parameter location: {location}")
        self.name = name
        self.description = description
        self.method = method
        self.path = path
        self.request_model = request_model
        self.response_model = response_model
        self.location = location

    def input_schema(self) -> Dict[str, Any]:
        properties = {}
        for field_name, field in self.request_model.model_fields.items():
            prop = {"type": _json_type(field.annotation)}
            if field.description:
                prop["description"] = field.description
            properties[field_name] = prop
        return {"type": "object", "properties": properties, "required": []}

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())

    async def invoke(self, arguments: Any, base_url: str, client: Optional[httpx.AsyncClient] = None) -> str:
        """Run the tool and return its text output, raising AbuseToolError on failure."""
        request_args = bind_arguments(arguments, self.request_model)
        url = f"{base_url}{self.path}"
        headers = {"Accept": "application/json"}
        content = None
        if self.location == "body":
            content = request_args.model_dump_json(exclude_none=True)
            headers["Content-Type"] = "application/json"
        else:
            query = build_query_string(request_args)
            if query:
                url = f"{url}?{query}"

        # No authentication required for these endpoints
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                return await self._send(owned_client, url, headers, content)
        return await self._send(client, url, headers, content)

    async def _send(self, client: httpx.AsyncClient, url: str, headers: Dict[str, str], content: Optional[str]) -> str:
        try:
            request = client.build_request(self.method, url, headers=headers, content=content)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"Failed to create request: {e}") from e

        logger.debug(f"{self.name}: {self.method} {request.url}")
        try:
            response = await client.send(request)
        except httpx.RequestError as e:
            raise NetworkError(f"Request failed: {e}") from e

        body = response.text
        if response.status_code >= 400:
            raise UpstreamError(response.status_code, body)

        try:
            result = self.response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"{self.name}: response did not match {self.response_model.__name__}, returning raw body: {e}")
            return body
        return result.model_dump_json(indent=2, exclude_none=True)

    async def call(self, arguments: Any, base_url: str, client: Optional[httpx.AsyncClient] = None) -> CallToolResult:
        """Run the tool at the protocol boundary: errors become error results, never exceptions."""
        try:
            text = await self.invoke(arguments, base_url, client)
        except AbuseToolError as e:
            logger.error(f"Tool {self.name} failed: {e}")
            return CallToolResult(content=[TextContent(type="text", text=str(e))], isError=True)
        return CallToolResult(content=[TextContent(type="text", text=text)])


CREATE_TICKET_TOOL = SingleCallTool(
    name=Action.CREATE_TICKET.value,
    description="Create a new abuse ticket",
    method="POST",
    path="/v1/abuse/tickets",
    request_model=AbuseTicketCreate,
    response_model=AbuseTicketId,
    location="body",
)

LIST_TICKETS_TOOL = SingleCallTool(
    name=Action.LIST_TICKETS.value,
    description="List all abuse tickets ids that match user provided filters",
    method="GET",
    path="/v1/abuse/tickets",
    request_model=AbuseTicketQuery,
    response_model=AbuseTicketList,
    location="query",
)

ALL_TOOLS: List[SingleCallTool] = [CREATE_TICKET_TOOL, LIST_TICKETS_TOOL]
