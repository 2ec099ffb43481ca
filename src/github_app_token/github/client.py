from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from github_app_token.errors import RequestError

T = TypeVar("T", bound=BaseModel)

ACCEPT = "application/vnd.github+json"


class GitHubHttpClient:
    def __init__(self, client: httpx.Client, api_version: str = "2022-11-28"):
        self.client = client
        self.api_version = api_version

    def headers(self, bearer_token: str) -> dict[str, str]:
        return {
            "Accept": ACCEPT,
            "X-GitHub-Api-Version": self.api_version,
            "Authorization": f"Bearer {bearer_token}",
        }

    def request(self, method: str, url: str, bearer_token: str, response_model: type[T]) -> T:
        """Выполнить запрос и разобрать JSON ответа в response_model."""
        try:
            resp = self.client.request(method, url, headers=self.headers(bearer_token))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RequestError(f"{method} {url}: {e}") from e

        if not resp.is_success:
            raise RequestError(
                f"request failed: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        try:
            return response_model.model_validate_json(resp.content)
        except ValidationError as e:
            raise RequestError(
                f"cannot decode {response_model.__name__} from {url}: {e}",
                status_code=resp.status_code,
            ) from e
