from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aboutsettings.collectors.device_info import DEFAULT_SERIAL_PATH
from aboutsettings.collectors.disk_usage_collector import DEFAULT_CANDIDATES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigPaths:
    path: Path


@dataclass(frozen=True)
class AboutConfig:
    candidate_mountpoints: list[str] = field(default_factory=lambda: list(DEFAULT_CANDIDATES))
    os_release_path: str = "/etc/os-release"
    hw_release_path: str = "/etc/hw-release"
    serial_path: str = DEFAULT_SERIAL_PATH


class ConfigService:
    def __init__(self, paths: ConfigPaths | None = None) -> None:
        self.paths = paths or ConfigPaths(path=self.default_path())

    @staticmethod
    def default_path() -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            base = Path(xdg)
        else:
            base = Path.home() / ".config"
        return base / "aboutsettings" / "config.json"

    def load(self) -> dict[str, Any]:
        p = self.paths.path
        if not p.exists():
            return {}
        try:
            with open(p, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", p, e)
            return {}
        return obj if isinstance(obj, dict) else {}

    def load_settings(self) -> AboutConfig:
        cfg = self.load()
        defaults = AboutConfig()

        candidates = cfg.get("candidate_mountpoints")
        if isinstance(candidates, list) and all(isinstance(c, str) for c in candidates):
            candidate_mountpoints = list(candidates)
        else:
            candidate_mountpoints = defaults.candidate_mountpoints

        return AboutConfig(
            candidate_mountpoints=candidate_mountpoints,
            os_release_path=_str_or(cfg.get("os_release_path"), defaults.os_release_path),
            hw_release_path=_str_or(cfg.get("hw_release_path"), defaults.hw_release_path),
            serial_path=_str_or(cfg.get("serial_path"), defaults.serial_path),
        )


def _str_or(value: object, default: str) -> str:
    return value if isinstance(value, str) and value else default
