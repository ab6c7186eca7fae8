from __future__ import annotations

import json
from dataclasses import dataclass
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "musicctl"
    return Path.home() / ".config" / "musicctl"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Player selection: display name, e.g. "vlc (MPRIS)" or "RadioTrayNG"
    instance: str | None

    # Notifications (vinfo)
    notify_app_name: str
    notify_timeout_ms: int


def load_config() -> AppConfig:
    config_dir = _config_dir()
    return AppConfig(
        config_dir=config_dir,
        instance=_load_instance(config_dir),
        notify_app_name=os.getenv("MUSICCTL_APP_NAME", "musicctl"),
        notify_timeout_ms=int(os.getenv("MUSICCTL_NOTIFY_TIMEOUT", "0")),
    )


def _load_instance(config_dir: Path) -> str | None:
    # Priority: config.json → MUSICCTL_INSTANCE → none
    cfg_path = config_dir / "config.json"
    if cfg_path.exists():
        try:
            data = json.loads(cfg_path.read_text(encoding="utf-8"))
            raw = data.get("instance")
            if isinstance(raw, str) and raw:
                return raw
        except (OSError, ValueError, AttributeError) as e:
            logger.debug("Ignoring unreadable config %s: %s", cfg_path, e)
    return os.getenv("MUSICCTL_INSTANCE") or None
