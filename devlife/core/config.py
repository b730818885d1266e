"""
Application configuration.

In-code defaults only: the viewer reads no config file and no environment
variables, and keeps no state between runs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple


def default_base_dir() -> Path:
    return Path.home() / ".devlife-viewer"


@dataclass
class AppConfig:
    # Platform API
    api_base_url: str = "https://developerslife.ru"
    random_path: str = "/random"
    connect_timeout: int = 15
    read_timeout: int = 30

    # Media downloads (total, seconds)
    media_timeout: int = 60

    # UI
    notification_duration_ms: int = 2000
    media_border_radius: int = 16
    window_size: Tuple[int, int] = (480, 720)

    # Logging
    log_dir: Optional[Path] = None
    log_levels: Dict[str, int] = field(default_factory=dict)

    def resolved_log_dir(self) -> Path:
        return self.log_dir or (default_base_dir() / "logs")
