class TokenExchangeError(Exception):
    """Базовая ошибка обмена ключа приложения на токен установки."""


class KeyFileError(TokenExchangeError):
    """Файл с приватным ключом не читается."""


class KeyFormatError(TokenExchangeError):
    """Содержимое файла не является PKCS#1 RSA ключом в PEM."""


class SigningError(TokenExchangeError):
    """Не удалось подписать JWT."""


class RequestError(TokenExchangeError):
    """Запрос к GitHub API завершился неудачно."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingEndpointError(TokenExchangeError):
    """В ответе установки нет access_tokens_url."""


class ConfigError(TokenExchangeError):
    """Настройки из окружения или .env не прошли валидацию."""
