from github_app_token.exchanger import TokenExchanger

__all__ = ["TokenExchanger"]
