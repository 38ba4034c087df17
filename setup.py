from setuptools import setup, find_packages

setup(
    name="abuse-mcp-sdk",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "mcp>=1.2.0",
        "httpx>=0.27.0",
        "pydantic>=2.0.0",
        "langchain-core>=0.2.38",
        "crewai>=0.30.0",
        "openai>=1.0.0",
        "python-dotenv>=1.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "abuse-mcp-server=abuse_core.server:main",
        ],
    },
    description="MCP and agent-framework tools for the abuse ticket API",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
