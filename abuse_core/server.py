"""MCP stdio server exposing the abuse ticket tools."""

import asyncio
import logging
from typing import Any

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .client import AbuseToolSet
from .exceptions import ToolExecutionError

logger = logging.getLogger("abuse-core")

SERVER_NAME = "abuse-tickets"


def build_server(toolset: AbuseToolSet) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [tool.to_mcp_tool() for tool in toolset.select_tools()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        result = await toolset.call_tool(name, arguments)
        if result.isError:
            # The server turns raised errors into isError results for the client
            raise ToolExecutionError("\n".join(content.text for content in result.content))
        return result.content

    return server


async def serve(toolset: AbuseToolSet) -> None:
    server = build_server(toolset)
    logger.info(f"Starting {SERVER_NAME} MCP server for {toolset.config.base_url}")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await toolset.cleanup()


def main():
    """Run the MCP server over stdio."""
    asyncio.run(serve(AbuseToolSet()))


if __name__ == "__main__":
    main()
