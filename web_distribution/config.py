"""
Configuration loader for the Web Distribution client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Environment variable -> config field
ENV_VARS = {
    "WEB_DISTRIBUTION_URL": "base_url",
    "WEB_DISTRIBUTION_TOKEN": "api_token",
    "WEB_DISTRIBUTION_TIMEOUT": "timeout_seconds",
    "WEB_DISTRIBUTION_USER_AGENT": "user_agent",
}


class ClientConfig(BaseModel):
    """Connection settings for a Web Distribution instance"""

    base_url: str = Field(min_length=1)
    api_token: Optional[str] = None
    timeout_seconds: float = Field(default=30.0, gt=0.0, le=300.0)
    user_agent: str = "web-distribution-sdk/1.0"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration.

    Values come from the optional YAML file first; WEB_DISTRIBUTION_* environment
    variables (including those in a local .env file) override them.

    Args:
        config_path: Path to a YAML config file with the ClientConfig keys

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValidationError: If the merged values don't match the schema
    """
    load_dotenv()

    config_data: Dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

    for env_name, field_name in ENV_VARS.items():
        value = os.getenv(env_name)
        if value:
            config_data[field_name] = value

    try:
        config = ClientConfig(**config_data)
        logger.info(f"Loaded Web Distribution config for {config.base_url}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
