"""
Main application entry point for Developers Life Viewer
"""
import sys

import logging
import asyncio
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QtMsgType, qInstallMessageHandler
from PyQt6.QtGui import QColor, QPalette
import qasync

from devlife import __version__
from devlife.core.config import AppConfig


# Qt message handler to suppress specific warnings
def qt_message_handler(mode, context, message):
    """Custom Qt message handler to filter out known harmless warnings."""
    # Suppress QFont::setPointSize warnings (happens during widget initialization with font inheritance)
    if "QFont::setPointSize: Point size <= 0" in message:
        return

    if mode == QtMsgType.QtDebugMsg:
        logging.debug(f"Qt: {message}")
    elif mode == QtMsgType.QtInfoMsg:
        logging.info(f"Qt: {message}")
    elif mode == QtMsgType.QtWarningMsg:
        logging.warning(f"Qt: {message}")
    elif mode == QtMsgType.QtCriticalMsg:
        logging.error(f"Qt: {message}")
    elif mode == QtMsgType.QtFatalMsg:
        logging.critical(f"Qt: {message}")


# Setup logging
def setup_logging(config: AppConfig):
    """Configure application logging"""
    from devlife.utils.logging_config import setup_logging as setup_categorized_logging

    logging_manager = setup_categorized_logging(config.resolved_log_dir(), config.log_levels)

    # Install Qt message handler to filter warnings
    qInstallMessageHandler(qt_message_handler)

    logger = logging.getLogger(__name__)
    logger.info("="*50)
    logger.info("Developers Life Viewer Starting")
    logger.info("="*50)

    return logging_manager


def apply_dark_palette(app: QApplication) -> None:
    """Dark palette for system widgets."""
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor("#141414"))
    palette.setColor(QPalette.ColorRole.WindowText, QColor("#e6e6e6"))
    palette.setColor(QPalette.ColorRole.Base, QColor("#1b1b1b"))
    palette.setColor(QPalette.ColorRole.Text, QColor("#e6e6e6"))
    palette.setColor(QPalette.ColorRole.Button, QColor("#232323"))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor("#e6e6e6"))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor("#232323"))
    palette.setColor(QPalette.ColorRole.ToolTipText, QColor("#e6e6e6"))
    palette.setColor(QPalette.ColorRole.Highlight, QColor("#f7673a"))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)


async def async_main(config: AppConfig):
    """Async main function with Qt event loop integration"""
    logger = logging.getLogger(__name__)

    try:
        from devlife.core import AppContext
        from devlife.ui.meme_window import MemeWindow

        app = QApplication.instance()
        apply_dark_palette(app)

        logger.info("Initializing core context...")
        core = AppContext(config)

        logger.info("Creating meme window...")
        main_window = MemeWindow(core)
        main_window.show()
        main_window.start()

        logger.info("Application started successfully")

        # Keep reference to prevent garbage collection
        app._main_window = main_window
        app._core_context = core

    except Exception as e:
        logger.exception(f"Fatal error during startup: {e}")
        sys.exit(1)


def main():
    """Main application entry point"""
    config = AppConfig()
    setup_logging(config)
    logger = logging.getLogger(__name__)

    try:
        app = QApplication(sys.argv)
        app.setApplicationName("Developers Life Viewer")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("DevLifeViewer")

        # Create event loop with Qt integration
        loop = qasync.QEventLoop(app)
        asyncio.set_event_loop(loop)

        logger.info("Starting application with asyncio event loop integration")

        with loop:
            loop.run_until_complete(async_main(config))
            loop.run_forever()
            if hasattr(app, '_core_context'):
                loop.run_until_complete(app._core_context.aclose())

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
    finally:
        logger.info("Shutting down...")
        if 'app' in locals() and hasattr(app, '_core_context'):
            app._core_context.close()
        logger.info("Application closed")

if __name__ == "__main__":
    main()
