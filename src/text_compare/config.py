"""Viewer configuration loading from environment and optional .env file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_FILE = "logs/app.log"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Configuration loading error with user-facing message text."""


@dataclass(frozen=True)
class ViewerConfig:
    """Settings for the local comparison viewer."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_file: Path = Path(DEFAULT_LOG_FILE)
    verbose_logging: bool = False


def _parse_env_line(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None

    key, raw_value = stripped.split("=", 1)
    key = key.strip()
    value = raw_value.strip()
    if not key:
        return None

    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        value = value[1:-1]
    return key, value


def _load_dotenv(dotenv_path: Path) -> None:
    if not dotenv_path.exists():
        return

    for line in dotenv_path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_env_line(line)
        if parsed is None:
            continue
        key, value = parsed
        os.environ.setdefault(key, value)


def _optional_env(name: str) -> str | None:
    value = os.environ.get(name)
    if value is None:
        return None
    normalized = value.strip()
    return normalized or None


def _port_env(name: str, default: int) -> int:
    value = _optional_env(name)
    if value is None:
        return default
    try:
        port = int(value)
    except ValueError as exc:
        raise ConfigError(f"Configuration error: {name} must be an integer, got {value!r}.") from exc
    if not 1 <= port <= 65535:
        raise ConfigError(f"Configuration error: {name} must be between 1 and 65535, got {port}.")
    return port


def _bool_env(name: str, default: bool) -> bool:
    value = _optional_env(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Configuration error: {name} must be a boolean (true/false), got {value!r}.")


def get_config() -> ViewerConfig:
    """Load viewer config from environment variables and `.env` in the working directory."""
    _load_dotenv(Path(".env"))

    return ViewerConfig(
        host=_optional_env("TEXT_COMPARE_HOST") or DEFAULT_HOST,
        port=_port_env("TEXT_COMPARE_PORT", DEFAULT_PORT),
        log_file=Path(_optional_env("TEXT_COMPARE_LOG_FILE") or DEFAULT_LOG_FILE),
        verbose_logging=_bool_env("TEXT_COMPARE_VERBOSE_LOGGING", False),
    )
