from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class AppCredentials(BaseModel):
    """Параметры запуска: приложение, ключ и репозиторий."""

    model_config = ConfigDict(frozen=True)

    app_id: str = Field(min_length=1)
    private_key_path: Path
    organization: str = Field(min_length=1)
    repository: str = Field(min_length=1)

    @property
    def repo_name(self) -> str:
        return f"{self.organization}/{self.repository}"


class InstallationInfo(BaseModel):
    """Ответ GET /repos/{owner}/{repo}/installation."""

    id: int
    access_tokens_url: str | None = None


class InstallationAccessToken(BaseModel):
    """Ответ POST access_tokens_url."""

    token: str
    expires_at: datetime | None = None
