"""MainWindow — the tile grid, status line and control buttons."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from memflip.config import GameSettings
from memflip.core.enums import LevelId
from memflip.core.levels import LEVEL_COUNT, TILES_PER_BOARD
from memflip.core.names import PlayerNameError
from memflip.game.controller import GameController
from memflip.leaderboard.store import LeaderboardStore
from memflip.ui.dialogs import ask_player_name, ask_yes_no, show_info, show_warning
from memflip.ui.qt_scheduler import QtScheduler

_GRID_SIDE = 4
_HIDDEN_STYLE = "background-color: #000000; color: #ffffff;"
_PAUSED_STYLE = "background-color: #808080; color: #808080;"
_TITLE = "Memory Flip Game"


class MainWindow(QMainWindow):
    """Main application window. Renders controller state, forwards clicks."""

    def __init__(
        self,
        player_name: str,
        *,
        settings: GameSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(_TITLE)
        self.resize(600, 750)

        self._settings = settings or GameSettings()
        self._scheduler: QtScheduler | None = None
        if controller is None:
            self._scheduler = QtScheduler(self)
            controller = GameController(
                self._scheduler,
                settings=self._settings,
                store=LeaderboardStore(self._settings.leaderboard_path),
            )
        self._controller = controller

        self._setup_ui()
        self._connect_game_events()
        self._controller.new_game(player_name)
        self._render_board()

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def tile_buttons(self) -> list[QPushButton]:
        return list(self._tiles)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)

        self._status_label = QLabel()
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setFont(QFont("Arial", 24, QFont.Weight.Bold))
        root.addWidget(self._status_label)

        grid = QGridLayout()
        grid.setSpacing(10)
        self._tiles: list[QPushButton] = []
        for index in range(TILES_PER_BOARD):
            button = QPushButton()
            button.setFont(QFont("Arial", 18, QFont.Weight.Bold))
            button.setSizePolicy(
                QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
            )
            button.clicked.connect(
                lambda _checked=False, i=index: self._on_tile_clicked(i)
            )
            grid.addWidget(button, index // _GRID_SIDE, index % _GRID_SIDE)
            self._tiles.append(button)
        root.addLayout(grid, stretch=1)

        controls = QHBoxLayout()
        controls.setSpacing(10)
        self._btn_pause = self._control_button("Pause", "#00ffff", self._on_pause)
        self._btn_resume = self._control_button("Resume", "#00ff00", self._on_resume)
        self._btn_new_game = self._control_button(
            "New Game", "#00ff00", self._on_new_game
        )
        self._btn_exit = self._control_button("Exit", "#ff0000", self.close)
        self._btn_leaderboard = self._control_button(
            "Leaderboard", "#ffc800", self._show_leaderboard
        )
        for button in (
            self._btn_pause,
            self._btn_resume,
            self._btn_new_game,
            self._btn_exit,
            self._btn_leaderboard,
        ):
            controls.addWidget(button)
        root.addLayout(controls)
        self._btn_resume.setEnabled(False)

    def _control_button(
        self, text: str, color: str, slot: Callable[[], object]
    ) -> QPushButton:
        button = QPushButton(text)
        button.setStyleSheet(f"background-color: {color};")
        button.clicked.connect(slot)
        return button

    def _connect_game_events(self) -> None:
        ev = self._controller.events
        ev.on_tile_revealed.append(self._render_tile)
        ev.on_tile_hidden.append(self._render_tile)
        ev.on_time_updated.append(self._on_time_updated)
        ev.on_pause_changed.append(self._on_pause_changed)
        ev.on_level_cleared.append(self._on_level_cleared)
        ev.on_level_advanced.append(self._on_level_advanced)
        ev.on_level_failed.append(self._on_level_failed)
        ev.on_game_completed.append(self._on_game_completed)
        ev.on_warning.append(self._on_warning)

    # ── Rendering ────────────────────────────────────────────────────────

    def _render_board(self) -> None:
        for index in range(len(self._tiles)):
            self._render_tile(index)
        self._update_status(self._controller.timer.remaining_seconds())

    def _render_tile(self, index: int) -> None:
        button = self._tiles[index]
        board = self._controller.board
        if board is None:
            button.setText("")
            button.setStyleSheet(_HIDDEN_STYLE)
            button.setEnabled(False)
            return
        if self._controller.is_paused:
            button.setStyleSheet(_PAUSED_STYLE)
            button.setEnabled(False)
            return

        tile = board[index]
        button.setEnabled(True)
        if tile.revealed or tile.matched:
            button.setText(tile.symbol)
            button.setStyleSheet(f"background-color: {tile.color}; color: #000000;")
        else:
            button.setText("")
            button.setStyleSheet(_HIDDEN_STYLE)

    def _update_status(self, seconds: int) -> None:
        session = self._controller.session
        level = int(session.level) if session else "-"
        self._status_label.setText(f"Level: {level} | Time: {seconds}s")

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── User actions ─────────────────────────────────────────────────────

    def _on_tile_clicked(self, index: int) -> None:
        self._controller.select_tile(index)

    def _on_pause(self) -> None:
        self._controller.pause()

    def _on_resume(self) -> None:
        self._controller.resume()

    def _on_new_game(self) -> None:
        name = ask_player_name(self)
        if name is None:
            return
        try:
            self._controller.new_game(name)
        except PlayerNameError as exc:
            show_warning(self, _TITLE, str(exc))
            return
        self._sync_pause_buttons(False)
        self._render_board()

    def _show_leaderboard(self) -> None:
        records = self._controller.top_scores()
        if not records:
            show_info(self, "Leaderboard", "No scores recorded yet.")
            return
        lines = ["Top Scores:"]
        lines.extend(f"{record.name}: {record.final_score}" for record in records)
        show_info(self, "Leaderboard", "\n".join(lines))

    def _offer_replay(self) -> None:
        if ask_yes_no(self, "New Game", "Do you want to play again?"):
            self._controller.reset_game()
            self._sync_pause_buttons(False)
            self._render_board()
        else:
            self.close()

    # ── Game events ──────────────────────────────────────────────────────

    def _on_time_updated(self, seconds: int) -> None:
        self._update_status(seconds)

    def _on_pause_changed(self, paused: bool) -> None:
        self._sync_pause_buttons(paused)
        for index in range(len(self._tiles)):
            self._render_tile(index)

    def _sync_pause_buttons(self, paused: bool) -> None:
        self._btn_pause.setEnabled(not paused)
        self._btn_resume.setEnabled(paused)

    def _on_level_cleared(self, level: LevelId) -> None:
        show_info(self, _TITLE, f"Congratulations! You completed Level {int(level)}.")

    def _on_level_advanced(self, _level: LevelId) -> None:
        self._render_board()

    def _on_level_failed(self) -> None:
        self._update_status(0)
        show_info(self, _TITLE, "Time's up! Level Failed.")
        self._offer_replay()

    def _on_game_completed(self, final_score: int) -> None:
        show_info(self, _TITLE, f"Congratulations! You completed Level {LEVEL_COUNT}.")
        show_info(self, _TITLE, f"Your final score is: {final_score}")
        self._show_leaderboard()
        self._offer_replay()

    def _on_warning(self, message: str) -> None:
        show_warning(self, _TITLE, f"Error saving progress: {message}")

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        self._controller.close()
        if self._scheduler is not None:
            self._scheduler.cancel_all()
        super().closeEvent(event)


def create_main_window(settings: GameSettings | None = None) -> MainWindow | None:
    """Ask for the player's name and build the window, or ``None`` if declined."""
    name = ask_player_name(None)
    if name is None:
        return None
    return MainWindow(name, settings=settings)
