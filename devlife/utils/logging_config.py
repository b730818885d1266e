"""
Centralized logging configuration with categorized loggers.

This module provides a flexible logging system with:
- Named categories for different subsystems
- Per-category log level control
- A rotating log file next to a console stream
"""
import logging
from typing import Dict, Optional
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler


# Logger categories for different subsystems
class LoggerCategory:
    """Named categories for application loggers"""
    CORE = "core"                  # Navigator, history, context
    API = "api"                    # Platform API client
    NETWORK = "network"            # HTTP sessions, media downloads
    UI = "ui"                      # Window and widgets
    IMAGE_LOADING = "image"        # Media decoding and display


# Default log levels for each category
DEFAULT_LOG_LEVELS = {
    LoggerCategory.CORE: logging.INFO,
    LoggerCategory.API: logging.INFO,
    LoggerCategory.NETWORK: logging.INFO,
    LoggerCategory.UI: logging.WARNING,  # Reduce UI noise
    LoggerCategory.IMAGE_LOADING: logging.WARNING,  # Reduce image loading noise
}


# Map module names to categories
MODULE_TO_CATEGORY = {
    # Core
    'devlife.core': LoggerCategory.CORE,
    'devlife.core.context': LoggerCategory.CORE,
    'devlife.core.history': LoggerCategory.CORE,
    'devlife.core.navigator': LoggerCategory.CORE,
    'devlife.core.fetcher': LoggerCategory.CORE,

    # API
    'devlife.core.api': LoggerCategory.API,
    'devlife.core.api.base': LoggerCategory.API,
    'devlife.core.api.developerslife': LoggerCategory.API,

    # Network
    'devlife.core.http_client': LoggerCategory.NETWORK,
    'devlife.core.media_loader': LoggerCategory.NETWORK,

    # UI
    'devlife.ui': LoggerCategory.UI,
    'devlife.ui.meme_window': LoggerCategory.UI,
    'devlife.ui.widgets': LoggerCategory.UI,

    # Image Loading
    'devlife.ui.images': LoggerCategory.IMAGE_LOADING,
    'devlife.ui.images.meme_renderer': LoggerCategory.IMAGE_LOADING,
}


class LoggingManager:
    """Manages application-wide logging configuration"""

    def __init__(self, log_dir: Optional[Path] = None, levels: Optional[Dict[str, int]] = None):
        """
        Initialize logging manager.

        Args:
            log_dir: Directory for log files
            levels: Per-category level overrides (category name -> level)
        """
        self.log_dir = log_dir or (Path.home() / ".devlife-viewer" / "logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._category_levels: Dict[str, int] = DEFAULT_LOG_LEVELS.copy()
        for category, level in (levels or {}).items():
            if category in DEFAULT_LOG_LEVELS:
                self._category_levels[category] = level

    def get_category_level(self, category: str) -> int:
        """Get log level for a category"""
        return self._category_levels.get(category, logging.INFO)

    def set_category_level(self, category: str, level: int):
        """Set log level for a category"""
        self._category_levels[category] = level
        self._apply_category_level(category, level)

    def _apply_category_level(self, category: str, level: int):
        """Apply level to all loggers in a category"""
        for module_name, cat in MODULE_TO_CATEGORY.items():
            if cat == category:
                logging.getLogger(module_name).setLevel(level)

    def setup_logging(self, root_level: int = logging.INFO):
        """
        Setup application logging with categories.

        Args:
            root_level: Root logger level (default: INFO)
        """
        log_file = self.log_dir / "devlife_viewer.log"

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # File handler with rotation
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)

        # Console handler
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(root_level)

        # Remove existing handlers
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        root_logger.addHandler(file_handler)
        root_logger.addHandler(stream_handler)

        for category, level in self._category_levels.items():
            self._apply_category_level(category, level)

        # Silence noisy third-party loggers
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('requests').setLevel(logging.WARNING)
        logging.getLogger('aiohttp').setLevel(logging.WARNING)
        logging.getLogger('asyncio').setLevel(logging.WARNING)

    def get_all_levels(self) -> Dict[str, int]:
        """Get all category log levels"""
        return self._category_levels.copy()


# Global instance
_logging_manager: Optional[LoggingManager] = None


def get_logging_manager(log_dir: Optional[Path] = None, levels: Optional[Dict[str, int]] = None) -> LoggingManager:
    """Get or create the global logging manager"""
    global _logging_manager
    if _logging_manager is None:
        _logging_manager = LoggingManager(log_dir=log_dir, levels=levels)
    return _logging_manager


def setup_logging(log_dir: Optional[Path] = None, levels: Optional[Dict[str, int]] = None):
    """Setup application logging (convenience function)"""
    manager = get_logging_manager(log_dir, levels)
    manager.setup_logging()
    return manager
