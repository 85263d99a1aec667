"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
ENV_FILE = PROJECT_ROOT / ".env"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

DEFAULT_PRODUCTS_API_URL = (
    "https://api.eu.apiconnect.ibmcloud.com"
    "/matthewcroninukibmcom-mattcronin/development/api/products"
)

# env var -> Settings field
REQUIRED_VARS = {
    "MESSENGER_APP_SECRET": "app_secret",
    "MESSENGER_VALIDATION_TOKEN": "validation_token",
    "MESSENGER_PAGE_ACCESS_TOKEN": "page_access_token",
    "SERVER_URL": "server_url",
    "CONVERSATION_URL": "conversation_url",
    "CONVERSATION_USERNAME": "conversation_username",
    "CONVERSATION_PASSWORD": "conversation_password",
    "CONVERSATION_WORKSPACE": "conversation_workspace",
}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the relay."""

    app_secret: str
    validation_token: str
    page_access_token: str
    server_url: str
    conversation_url: str
    conversation_username: str
    conversation_password: str
    conversation_workspace: str
    products_api_url: str = DEFAULT_PRODUCTS_API_URL
    products_api_key: str = ""
    products_api_secret: str = ""
    api_host: str = "0.0.0.0"
    port: int = 5000
    http_timeout: float = 10.0


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings instance

    Raises:
        ConfigError: If any required variable is missing or empty.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_VARS if not env.get(name)]
    if missing:
        raise ConfigError(f"Missing config values: {', '.join(missing)}")

    values = {field: env[name] for name, field in REQUIRED_VARS.items()}
    try:
        port = int(env.get("PORT", "5000"))
        http_timeout = float(env.get("HTTP_TIMEOUT_SECONDS", "10"))
    except ValueError as e:
        raise ConfigError(f"Invalid numeric config value: {e}") from e

    return Settings(
        **values,
        products_api_url=env.get("PRODUCTS_API_URL") or DEFAULT_PRODUCTS_API_URL,
        products_api_key=env.get("PRODUCTS_API_KEY", ""),
        products_api_secret=env.get("PRODUCTS_API_SECRET", ""),
        api_host=env.get("API_HOST", "0.0.0.0"),
        port=port,
        http_timeout=http_timeout,
    )
