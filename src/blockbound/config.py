"""Engine configuration and its JSON persistence."""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

from blockbound.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

_DEFAULT_REPLY_DELAY = 1.0
_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Tunables for the combat loop and logging."""

    enemy_reply_delay: float = _DEFAULT_REPLY_DELAY
    enforce_special_cooldown: bool = False
    log_level: str = "INFO"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Blockbound"
        return Path.home() / "Blockbound"
    return Path.home() / ".config" / "blockbound"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize(raw: Dict[str, Any]) -> EngineConfig:
    defaults = EngineConfig()
    delay = raw.get("enemy_reply_delay", defaults.enemy_reply_delay)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        delay = defaults.enemy_reply_delay
    enforce = raw.get("enforce_special_cooldown", defaults.enforce_special_cooldown)
    if not isinstance(enforce, bool):
        enforce = defaults.enforce_special_cooldown
    level = raw.get("log_level", defaults.log_level)
    if not isinstance(level, str) or level.upper() not in _VALID_LOG_LEVELS:
        level = defaults.log_level
    return EngineConfig(
        enemy_reply_delay=float(delay),
        enforce_special_cooldown=enforce,
        log_level=level.upper(),
    )


def load_config(path: Path | None = None) -> EngineConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return EngineConfig()
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Ignoring unreadable config {config_path}: {exc}")
        return EngineConfig()
    if not isinstance(raw, dict):
        return EngineConfig()
    return _normalize(raw)


def save_config(config: EngineConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(_normalize(asdict(config)))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(config: EngineConfig) -> None:
    """Install the root handler at the configured level."""
    setup_logging(config.log_level)
