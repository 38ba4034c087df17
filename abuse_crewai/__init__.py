from .toolset import AbuseCrewAITool, AbuseCrewAIToolSet

__all__ = ["AbuseCrewAITool", "AbuseCrewAIToolSet"]
