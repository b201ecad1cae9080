"""Runtime settings read from the environment (.env is loaded by the entry points)."""

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent

DEFAULT_TAP_URL = "https://exoplanetarchive.ipac.caltech.edu/TAP/sync"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"


class ConfigurationError(Exception):
    """Malformed environment value."""


def _float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {raw!r}")
    return value


def _int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Application settings. Defaults work without any .env file."""

    tap_url: str = DEFAULT_TAP_URL  # NASA Exoplanet Archive TAP sync endpoint
    tap_timeout: float = 10.0  # HTTP timeout (seconds)
    result_limit: int = 50  # Max rows returned per catalog query
    selection_path: Path = _ROOT / "data" / "selection.json"
    tick: float = 0.005  # Phase step (radians) per animation tick
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build Settings from GOLDILOCKS_* variables.

        Raises:
            ConfigurationError: When a variable is set but cannot be parsed.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        log_level = env.get("GOLDILOCKS_LOG_LEVEL", defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"GOLDILOCKS_LOG_LEVEL is not a level: {log_level!r}")

        selection_path = env.get("GOLDILOCKS_SELECTION_PATH")

        return cls(
            tap_url=env.get("GOLDILOCKS_TAP_URL") or defaults.tap_url,
            tap_timeout=_float(env, "GOLDILOCKS_TAP_TIMEOUT", defaults.tap_timeout),
            result_limit=_int(env, "GOLDILOCKS_RESULT_LIMIT", defaults.result_limit),
            selection_path=(
                Path(selection_path) if selection_path else defaults.selection_path
            ),
            tick=_float(env, "GOLDILOCKS_TICK", defaults.tick),
            log_level=log_level,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
