from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_app_token.errors import ConfigError

GITHUB_API_URL = "https://api.github.com"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    github_app_id: str | None = None
    github_app_private_key_path: str | None = None

    github_api_url: str = GITHUB_API_URL
    github_api_version: str = "2022-11-28"
    request_timeout: float = 10.0


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"invalid settings: {e}") from e
