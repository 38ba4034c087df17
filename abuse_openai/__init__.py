from .toolset import AbuseOpenAIToolSet

__all__ = ["AbuseOpenAIToolSet"]
