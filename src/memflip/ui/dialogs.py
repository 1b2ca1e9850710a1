"""Modal prompts used by the main window."""

from __future__ import annotations

from PyQt6.QtWidgets import QInputDialog, QLineEdit, QMessageBox, QWidget

from memflip.core.names import PlayerNameError, validate_player_name


def ask_player_name(parent: QWidget | None) -> str | None:
    """Prompt for a player name. Returns ``None`` if cancelled or invalid."""
    text, ok = QInputDialog.getText(
        parent, "Memory Flip", "Enter your name:", QLineEdit.EchoMode.Normal
    )
    if not ok:
        return None
    try:
        return validate_player_name(text)
    except PlayerNameError as exc:
        QMessageBox.warning(parent, "Memory Flip", str(exc))
        return None


def show_info(parent: QWidget | None, title: str, text: str) -> None:
    QMessageBox.information(parent, title, text)


def show_warning(parent: QWidget | None, title: str, text: str) -> None:
    QMessageBox.warning(parent, title, text)


def ask_yes_no(parent: QWidget | None, title: str, text: str) -> bool:
    reply = QMessageBox.question(
        parent,
        title,
        text,
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        QMessageBox.StandardButton.No,
    )
    return reply == QMessageBox.StandardButton.Yes
