import re
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from github_app_token.errors import KeyFileError, KeyFormatError

# GitHub выдаёт ключи приложений только в PKCS#1
PKCS1_LABEL = "RSA PRIVATE KEY"

PEM_BLOCK = re.compile(
    rb"-----BEGIN (?P<label>[A-Z0-9 ]+)-----\r?\n.*?-----END (?P=label)-----",
    re.DOTALL,
)


def load_private_key(path: str | Path) -> RSAPrivateKey:
    """Прочитать PKCS#1 RSA ключ из PEM файла."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise KeyFileError(f"cannot read private key {path}: {e}") from e

    match = PEM_BLOCK.search(data)
    if match is None:
        raise KeyFormatError(f"no PEM block found in {path}")

    label = match.group("label").decode("ascii")
    if label != PKCS1_LABEL:
        raise KeyFormatError(f"expected {PKCS1_LABEL} PEM block in {path}, got {label}")

    try:
        key = serialization.load_pem_private_key(match.group(0), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyFormatError(f"invalid PKCS#1 private key in {path}: {e}") from e

    if not isinstance(key, RSAPrivateKey):
        raise KeyFormatError(f"{path} does not contain an RSA private key")
    return key
