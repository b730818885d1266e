"""Categorized logging setup."""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from devlife.utils.logging_config import (
    DEFAULT_LOG_LEVELS,
    LoggerCategory,
    LoggingManager,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_defaults_match_category_table(tmp_path):
    manager = LoggingManager(log_dir=tmp_path)
    assert manager.get_all_levels() == DEFAULT_LOG_LEVELS


def test_level_overrides_apply_to_known_categories_only(tmp_path):
    manager = LoggingManager(
        log_dir=tmp_path,
        levels={LoggerCategory.CORE: logging.DEBUG, "unknown": logging.ERROR},
    )
    assert manager.get_category_level(LoggerCategory.CORE) == logging.DEBUG
    assert "unknown" not in manager.get_all_levels()


def test_setup_installs_file_and_console_handlers(tmp_path, restore_root_logger):
    manager = LoggingManager(log_dir=tmp_path / "logs")
    manager.setup_logging()

    root = logging.getLogger()
    assert any(isinstance(h, TimedRotatingFileHandler) for h in root.handlers)
    assert len(root.handlers) == 2
    assert (tmp_path / "logs").is_dir()
    assert logging.getLogger("devlife.ui.images.meme_renderer").level == logging.WARNING
    assert logging.getLogger("aiohttp").level == logging.WARNING


def test_set_category_level_updates_module_loggers(tmp_path):
    manager = LoggingManager(log_dir=tmp_path)
    manager.set_category_level(LoggerCategory.API, logging.ERROR)
    assert logging.getLogger("devlife.core.api.developerslife").level == logging.ERROR
    assert manager.get_category_level(LoggerCategory.API) == logging.ERROR
    manager.set_category_level(LoggerCategory.API, logging.INFO)
