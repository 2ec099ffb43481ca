from github_app_token.github.app_auth import AppJwtSigner
from github_app_token.github.client import GitHubHttpClient
from github_app_token.github.keys import load_private_key
from github_app_token.github.schemas import AppCredentials, InstallationAccessToken, InstallationInfo

__all__ = [
    "AppJwtSigner",
    "GitHubHttpClient",
    "load_private_key",
    "AppCredentials",
    "InstallationInfo",
    "InstallationAccessToken",
]
