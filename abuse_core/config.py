import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_BASE_URL = "https://api.godaddy.com"


class APIConfig(BaseModel):
    """Settings for reaching the abuse API. No credentials are needed for the ticket endpoints."""
    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("ABUSE_API_BASE_URL must not be empty")
        return value.rstrip("/")


def load_config() -> APIConfig:
    """Build an APIConfig from the environment, reading a .env file if present."""
    load_dotenv()
    return APIConfig(base_url=os.getenv("ABUSE_API_BASE_URL", DEFAULT_BASE_URL))
