# FILE PATH: generator_config.py
# LOCATION: Root directory of your project
# DESCRIPTION: Credentials, endpoints and limits read from the environment

"""Runtime configuration: credentials, endpoints and limits."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from github_client import DEFAULT_API_URL
from replication_prompt import (
    DEFAULT_MAX_FILES,
    DEFAULT_MODEL,
    DEFAULT_OPENAI_URL,
    DEFAULT_TOKEN_LIMIT,
)


@dataclass
class Config:
    """Configuration threaded into the API clients."""

    github_token: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    openai_base_url: str = DEFAULT_OPENAI_URL
    github_api_url: str = DEFAULT_API_URL
    request_timeout: float = 30.0
    max_prompt_files: int = DEFAULT_MAX_FILES
    prompt_token_limit: int = DEFAULT_TOKEN_LIMIT
    show_progress: bool = True

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "Config":
        """
        Read credentials from the environment (and a ``.env`` file if present).
        Keyword arguments that are not ``None`` take precedence.
        """
        load_dotenv(env_file)
        config = cls(
            github_token=os.environ.get("GITHUB_TOKEN") or None,
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            openai_model=os.environ.get("OPENAI_MODEL", DEFAULT_MODEL),
            openai_base_url=os.environ.get("OPENAI_BASE_URL", DEFAULT_OPENAI_URL),
            github_api_url=os.environ.get("GITHUB_API_URL", DEFAULT_API_URL),
        )
        for key, value in overrides.items():
            if not hasattr(config, key):
                raise TypeError(f"Unknown configuration option: {key}")
            if value is not None:
                setattr(config, key, value)
        return config
