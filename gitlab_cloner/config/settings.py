from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_HOST, DEFAULT_TARGET_DIRECTORY, FIRST_PAGE

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env). CLI flags take precedence."""

    model_config = SettingsConfigDict(env_prefix="", env_file=None, extra="ignore")

    gitlab_host: str = Field(default=DEFAULT_HOST)
    gitlab_token: str | None = Field(default=None)
    gitlab_target_directory: str = Field(default=DEFAULT_TARGET_DIRECTORY)
    gitlab_first_page: int = Field(default=FIRST_PAGE)


def get_settings() -> Settings:
    return Settings()
