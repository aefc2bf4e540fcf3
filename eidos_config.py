#!/usr/bin/env python3
"""
Eidos Configuration Manager

Stores the exclusion set, the default scan mode and run statistics in a
JSON file under ~/.eidos (or $EIDOS_HOME).
"""

import json
import os
import pathlib
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Optional

from categorizer import DEFAULT_EXCLUDE_DIRS


def _default_stats() -> dict:
    return {"total_runs": 0, "files_deleted": 0, "bytes_deleted": 0}


def _parse_stats(raw) -> dict:
    """Counters from a config file; anything that is not a whole number is rejected"""
    if not isinstance(raw, dict):
        raise ValueError("stats must be an object")
    stats = _default_stats()
    for key in stats:
        if key not in raw:
            continue
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(f"stats.{key} must be an integer")
        stats[key] = int(value)
    return stats


@dataclass
class EidosConfig:
    """Persistent settings for Eidos"""

    version: str = "1.0"
    exclude_dirs: list[str] = field(default_factory=lambda: sorted(DEFAULT_EXCLUDE_DIRS))
    full_scan: bool = False
    last_run: Optional[str] = None
    stats: dict = field(default_factory=_default_stats)

    def record_run(self, files_deleted: int, bytes_deleted: int):
        """Add one session's deletions to the totals"""
        for key, default in _default_stats().items():
            self.stats.setdefault(key, default)
        self.stats["total_runs"] += 1
        self.stats["files_deleted"] += files_deleted
        self.stats["bytes_deleted"] += bytes_deleted
        self.last_run = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "EidosConfig":
        """Create from dictionary"""
        default = cls()
        exclude_dirs = data.get("exclude_dirs", default.exclude_dirs)
        if not isinstance(exclude_dirs, list):
            raise ValueError("exclude_dirs must be a list of directory names")
        return cls(
            version=data.get("version", default.version),
            exclude_dirs=[str(name) for name in exclude_dirs],
            full_scan=bool(data.get("full_scan", default.full_scan)),
            last_run=data.get("last_run"),
            stats=_parse_stats(data.get("stats", {})),
        )


class ConfigManager:
    """Loads and saves the Eidos configuration file"""

    def __init__(self, config_dir: Optional[pathlib.Path] = None):
        """Initialize configuration manager

        Args:
            config_dir: Override default configuration directory location
        """
        if config_dir:
            self.config_dir = pathlib.Path(config_dir)
        elif os.environ.get("EIDOS_HOME"):
            self.config_dir = pathlib.Path(os.environ["EIDOS_HOME"])
        else:
            self.config_dir = pathlib.Path.home() / ".eidos"

        self.config_file = self.config_dir / "config.json"

    def load(self) -> EidosConfig:
        """Load configuration from file"""
        if self.config_file.exists():
            try:
                with self.config_file.open() as f:
                    return EidosConfig.from_dict(json.load(f))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError):
                # If config is corrupted, return default
                return EidosConfig()
        return EidosConfig()

    def save(self, config: EidosConfig):
        """Save configuration to file"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.config_file.open("w") as f:
            json.dump(config.to_dict(), f, indent=2)

    def reset_excludes(self) -> EidosConfig:
        """Restore the built-in exclusion set and save"""
        config = self.load()
        config.exclude_dirs = sorted(DEFAULT_EXCLUDE_DIRS)
        self.save(config)
        return config
