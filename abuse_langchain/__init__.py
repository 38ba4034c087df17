from .toolset import AbuseLangChainToolSet

__all__ = ["AbuseLangChainToolSet"]
