"""Configuration management for TAssist."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

TASSIST_HOME = Path(os.environ.get("TASSIST_HOME", Path.home() / "tassist"))
CONFIG_FILE = TASSIST_HOME / "config" / "tassist.conf"
DATA_DIR = TASSIST_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "addressbook.json"


@dataclass
class Config:
    """TAssist configuration."""

    data_file: str = str(DEFAULT_DATA_FILE)
    log_level: str = "INFO"
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)

    @property
    def data_path(self) -> Path:
        return Path(self.data_file).expanduser()


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from tassist.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "log_level":
                config.log_level = value.upper()
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                users = []
                for u in value.split(","):
                    u = u.strip()
                    if not u:
                        continue
                    try:
                        users.append(int(u))
                    except ValueError:
                        logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry: {u!r}")
                config.telegram_allowed_users = users
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
