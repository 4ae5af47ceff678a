"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class JiraSettings(BaseSettings):
    """Jira bridge settings.

    All settings are loaded from environment variables prefixed with JIRA_.
    """

    model_config = {"env_prefix": "JIRA_"}

    # Required
    url: str
    email: str
    api_token: str

    # Optional
    read_only_mode: bool = False
    timeout: int = 30
    log_level: str = "INFO"
    ssl_verify: bool | str = True
