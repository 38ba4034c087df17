import json
import logging
from typing import List, Dict, Any, Optional

import httpx
from openai import AsyncOpenAI
from abuse_core import AbuseToolSet, Action, APIConfig
from abuse_core.exceptions import ToolExecutionError

logger = logging.getLogger("abuse-openai")

class AbuseOpenAIToolSet(AbuseToolSet):
    def __init__(self, openai_api_key: str, config: Optional[APIConfig] = None, http_client: Optional[httpx.AsyncClient] = None):
        if not openai_api_key:
            logger.error("OPENAI_API_KEY is not provided or empty")
            raise ValueError("OPENAI_API_KEY is required")
        super().__init__(config, http_client)
        self.openai = AsyncOpenAI(api_key=openai_api_key)

    async def get_tools(self, actions: Optional[List[Action]] = None) -> List[Dict[str, Any]]:
        """Convert the abuse tools to OpenAI-compatible function schemas."""
        tools = await super().get_tools(actions)
        openai_tools = [
            {
                "type": "function",
                "function": {
                    "name": tool.get("name"),
                    "description": tool.get("description", f"Execute {tool.get('name')}"),
                    "parameters": tool.get("parameters", {"type": "object", "properties": {}})
                }
            }
            for tool in tools
        ]
        logger.info(f"Converted {len(openai_tools)} tools for OpenAI")
        return openai_tools

    async def _run_tool_call(self, tool_call) -> str:
        tool_name = tool_call.function.name
        try:
            tool_args = json.loads(tool_call.function.arguments or "{}")
            return await self.execute_action(Action(tool_name), tool_args)
        except (ValueError, ToolExecutionError) as e:
            # json errors and unknown tool names are both ValueError
            logger.error(f"Tool call error for {tool_name}: {e}")
            return f"Error calling tool {tool_name}: {str(e)}"

    async def process_query(self, query: str, previous_messages: List[Dict[str, Any]] = None, model: str = "gpt-4o") -> tuple[str, List[Dict[str, Any]]]:
        """Process a query using OpenAI with tool calling."""
        messages = previous_messages.copy() if previous_messages else []
        messages.append({"role": "user", "content": query})
        tools = await self.get_tools()

        try:
            response = await self.openai.chat.completions.create(
                model=model,
                messages=messages,
                tools=tools,
                tool_choice="auto",
                max_tokens=1000
            )
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise ToolExecutionError(f"OpenAI API error: {str(e)}")

        final_text = []
        choice = response.choices[0]
        if not choice.message.tool_calls:
            if choice.message.content:
                final_text.append(choice.message.content)
                messages.append({"role": "assistant", "content": choice.message.content})
            return "\n".join(final_text), messages

        messages.append({
            "role": "assistant",
            "content": choice.message.content,
            "tool_calls": [
                {
                    "id": tool_call.id,
                    "type": "function",
                    "function": {"name": tool_call.function.name, "arguments": tool_call.function.arguments}
                }
                for tool_call in choice.message.tool_calls
            ]
        })
        if choice.message.content:
            final_text.append(choice.message.content)
        for tool_call in choice.message.tool_calls:
            result = await self._run_tool_call(tool_call)
            final_text.append(f"[Tool {tool_call.function.name} result: {result}]")
            messages.append({
                "role": "tool",
                "content": result,
                "tool_call_id": tool_call.id
            })

        # Follow-up call
        try:
            next_response = await self.openai.chat.completions.create(
                model=model,
                messages=messages,
                tools=tools,
                tool_choice="auto",
                max_tokens=1000
            )
            next_content = next_response.choices[0].message.content
            if next_content:
                final_text.append(next_content)
                messages.append({"role": "assistant", "content": next_content})
        except Exception as e:
            logger.error(f"OpenAI follow-up API error: {e}")
            final_text.append(f"[Error in follow-up response: {str(e)}]")

        return "\n".join(final_text), messages
