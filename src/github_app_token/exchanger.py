from rich.console import Console

from github_app_token.config import GITHUB_API_URL
from github_app_token.errors import MissingEndpointError
from github_app_token.github import (
    AppCredentials,
    AppJwtSigner,
    GitHubHttpClient,
    InstallationAccessToken,
    InstallationInfo,
    load_private_key,
)


class TokenExchanger:
    def __init__(
        self,
        credentials: AppCredentials,
        http: GitHubHttpClient,
        api_url: str = GITHUB_API_URL,
        console: Console | None = None,
    ):
        self.credentials = credentials
        self.http = http
        self.api_url = api_url.rstrip("/")
        self.console = console or Console(stderr=True, quiet=True)

    def get(self) -> str:
        """Обменять ключ приложения на токен установки."""

        # 1. Читаем ключ
        self.console.print(f"[blue]Читаю ключ {self.credentials.private_key_path}...[/blue]")
        signer = AppJwtSigner(load_private_key(self.credentials.private_key_path))

        # 2. Ищем установку приложения в репозитории
        endpoint = self.get_access_token_endpoint(signer)

        # 3. Получаем токен
        return self.get_access_token(signer, endpoint)

    def installation_url(self) -> str:
        return f"{self.api_url}/repos/{self.credentials.repo_name}/installation"

    def get_access_token_endpoint(self, signer: AppJwtSigner) -> str:
        url = self.installation_url()
        self.console.print(f"[blue]Ищу установку для {self.credentials.repo_name}...[/blue]")
        info = self.http.request("GET", url, signer.sign(self.credentials.app_id), InstallationInfo)
        if not info.access_tokens_url:
            raise MissingEndpointError(
                f"installation {info.id} for {self.credentials.repo_name} has no access_tokens_url"
            )
        self.console.print(f"[dim]Установка #{info.id}[/dim]")
        return info.access_tokens_url

    def get_access_token(self, signer: AppJwtSigner, endpoint: str) -> str:
        self.console.print("[blue]Получаю токен установки...[/blue]")
        # Новый JWT: окно действия первого могло уже сдвинуться
        result = self.http.request(
            "POST", endpoint, signer.sign(self.credentials.app_id), InstallationAccessToken
        )
        if result.expires_at:
            self.console.print(f"[green]Токен действует до {result.expires_at.isoformat()}[/green]")
        return result.token
