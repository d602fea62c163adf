"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from mransnap.config.defaults import DEFAULT_MRAN_URL, DEFAULT_REPOS, DEFAULT_USER_AGENT


class MransnapConfig(BaseModel):
    model_config = {"extra": "forbid"}

    mran_url: str = DEFAULT_MRAN_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
    # Initial mirror configuration used to seed the store from the CLI
    repos: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_REPOS))
