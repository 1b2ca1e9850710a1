"""Application entry point."""

from __future__ import annotations

import logging
import sys

from memflip.config import GameSettings

_LOGGER = logging.getLogger(__name__)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from memflip.ui.main_window import create_main_window

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Memory Flip")
    app.setStyle("Fusion")

    settings = GameSettings.from_env()
    _LOGGER.info("Leaderboard file: %s", settings.leaderboard_path)
    window = create_main_window(settings)
    if window is None:
        return 0
    window.show()
    return app.exec()


def main() -> None:
    """Launch the Memory Flip application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application())


if __name__ == "__main__":
    main()
