import logging
import asyncio
from typing import List, Dict, Any, Optional, Type, Union
from pydantic import BaseModel, PrivateAttr
from crewai.tools import BaseTool
from abuse_core import AbuseToolSet, Action

logger = logging.getLogger("abuse-crewai")

class AbuseCrewAITool(BaseTool):
    """CrewAI tool for one abuse ticket action."""
    _toolset: AbuseToolSet = PrivateAttr()
    _action: Action = PrivateAttr()

    def __init__(self, name: str, description: str, toolset: AbuseToolSet, action: Action, args_schema: Type[BaseModel]):
        super().__init__(name=name, description=description, args_schema=args_schema)
        self._toolset = toolset
        self._action = action
        logger.debug(f"Created tool: {name}, {description}")

    async def _async_run(self, **params: Any) -> Union[str, Dict[str, Any]]:
        """Execute the tool asynchronously."""
        try:
            logger.debug(f"Tool {self.name} called with params: {params}")
            arguments = {key: value for key, value in params.items() if value is not None}
            return await self._toolset.execute_action(self._action, arguments)
        except Exception as e:
            logger.error(f"Error executing tool {self.name}: {str(e)}")
            return {"error": f"Failed to execute {self.name}: {str(e)}"}

    def _run(self, **params: Any) -> Union[str, Dict[str, Any]]:
        """Execute the tool synchronously. Must not be called from a running event loop."""
        try:
            return asyncio.run(self._async_run(**params))
        except Exception as e:
            logger.error(f"Error in _run for tool {self.name}: {str(e)}")
            return {"error": f"Failed to execute {self.name}: {str(e)}"}

class AbuseCrewAIToolSet(AbuseToolSet):
    async def get_tools(self, actions: Optional[List[Action]] = None) -> List[BaseTool]:
        """Wrap the abuse tools as CrewAI tools."""
        crewai_tools = [
            AbuseCrewAITool(
                name=tool.name,
                description=tool.description,
                toolset=self,
                action=Action(tool.name),
                args_schema=tool.request_model
            )
            for tool in self.select_tools(actions)
        ]
        logger.info(f"Converted {len(crewai_tools)} tools for CrewAI")
        return crewai_tools
