import logging
from typing import List, Any, Optional
from langchain_core.tools import StructuredTool
from abuse_core import AbuseToolSet, Action
from abuse_core.tools import SingleCallTool

logger = logging.getLogger("abuse-langchain")

class AbuseLangChainToolSet(AbuseToolSet):
    def _make_tool(self, tool: SingleCallTool) -> StructuredTool:
        action = Action(tool.name)

        async def tool_func(**params: Any) -> str:
            logger.debug(f"Tool {tool.name} called with params: {params}")
            arguments = {key: value for key, value in params.items() if value is not None}
            return await self.execute_action(action, arguments)

        return StructuredTool.from_function(
            func=None,
            coroutine=tool_func,
            name=tool.name,
            description=tool.description,
            args_schema=tool.request_model
        )

    async def get_tools(self, actions: Optional[List[Action]] = None) -> List[StructuredTool]:
        """Wrap the abuse tools as LangChain StructuredTools."""
        langchain_tools = [self._make_tool(tool) for tool in self.select_tools(actions)]
        logger.info(f"Converted {len(langchain_tools)} tools for LangChain")
        return langchain_tools
