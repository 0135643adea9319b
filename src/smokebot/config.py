"""Config loading from .github/smokebot.yml with sensible defaults."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .github_client import DEFAULT_USER_AGENT, GITHUB_API


class GitHubConfig(BaseModel):
    api_url: str = GITHUB_API
    timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("api_url")
    @classmethod
    def api_url_not_empty(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("github.api_url must not be empty")
        return v

    @field_validator("timeout")
    @classmethod
    def timeout_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("github.timeout must be greater than 0")
        return v


class SmokeBotConfig(BaseModel):
    github: GitHubConfig = GitHubConfig()


def load_config(repo_root: Path | None = None) -> SmokeBotConfig:
    """Load config from .github/smokebot.yml. Returns defaults if file absent."""
    config_path_env = os.environ.get("SMOKEBOT_CONFIG_PATH", ".github/smokebot.yml")

    if repo_root is None:
        repo_root = Path(os.environ.get("GITHUB_WORKSPACE", "."))

    config_file = repo_root / config_path_env

    if not config_file.exists():
        return SmokeBotConfig()

    raw = yaml.safe_load(config_file.read_text()) or {}
    try:
        return SmokeBotConfig.model_validate(raw)
    except ValidationError as e:
        raise SystemExit(f"SmokeBot: invalid config at {config_file}:\n{e}") from e
