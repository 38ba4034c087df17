import logging
from typing import List, Dict, Any, Optional

import httpx
from mcp.types import CallToolResult, TextContent

from .actions import Action
from .config import APIConfig, load_config
from .exceptions import ToolExecutionError
from .tools import ALL_TOOLS, SingleCallTool

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("abuse-core")


class AbuseToolSet:
    def __init__(self, config: Optional[APIConfig] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config or load_config()
        self.http_client = http_client
        self.tools: Dict[str, SingleCallTool] = {tool.name: tool for tool in ALL_TOOLS}
        logger.info(f"AbuseToolSet initialized for {self.config.base_url}")

    def select_tools(self, actions: Optional[List[Action]] = None) -> List[SingleCallTool]:
        if not actions:
            return list(self.tools.values())
        action_names = [action.value for action in actions]
        return [tool for tool in self.tools.values() if tool.name in action_names]

    async def get_tools(self, actions: Optional[List[Action]] = None) -> List[Dict[str, Any]]:
        """Describe the available tools as name/description/JSON-schema dicts."""
        tools = [
            {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.input_schema(),
            }
            for tool in self.select_tools(actions)
        ]
        logger.info(f"Fetched {len(tools)} tools")
        logger.debug(f"Tool schemas: {tools}")
        return tools

    async def call_tool(self, name: str, arguments: Any) -> CallToolResult:
        """Invoke a tool by name and return the protocol-level result."""
        if name not in self.tools:
            logger.error(f"Unknown tool requested: {name}")
            return CallToolResult(content=[TextContent(type="text", text=f"Unknown tool: {name}")], isError=True)
        return await self.tools[name].call(arguments, self.config.base_url, self.http_client)

    async def execute_action(self, action: Action, params: Dict[str, Any]) -> str:
        """Execute a specific action directly."""
        result = await self.call_tool(action.value, params)
        text = "\n".join(content.text for content in result.content if hasattr(content, "text"))
        if result.isError:
            logger.error(f"Error executing action {action.value}: {text}")
            raise ToolExecutionError(f"Failed to execute action: {text}")
        logger.info(f"Executed action {action.value} successfully")
        return text

    async def cleanup(self):
        """Clean up resources."""
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None
        logger.info("AbuseToolSet cleaned up")
