"""Tests for MainWindow wiring against a controller on virtual time."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from memflip.game.controller import GameController
from memflip.game.interfaces import GamePhase
from memflip.game.scheduler import ManualScheduler
from memflip.leaderboard.store import LeaderboardStore
from memflip.ui import main_window as main_window_module
from memflip.ui.main_window import MainWindow


class _Prompts:
    def __init__(self, replay: bool = False) -> None:
        self.replay = replay
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def install(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            main_window_module,
            "show_info",
            lambda _p, _t, text: self.infos.append(text),
        )
        monkeypatch.setattr(
            main_window_module,
            "show_warning",
            lambda _p, _t, text: self.warnings.append(text),
        )
        monkeypatch.setattr(main_window_module, "ask_yes_no", lambda *_a: self.replay)


def _make_window(
    qapp: object, tmp_path: Path
) -> tuple[MainWindow, GameController, ManualScheduler]:
    assert qapp is not None
    sched = ManualScheduler()
    ctrl = GameController(
        sched,
        store=LeaderboardStore(tmp_path / "lb.csv"),
        rng=random.Random(5),
    )
    window = MainWindow("Ada", controller=ctrl)
    window.show()
    return window, ctrl, sched


class TestMainWindow:
    def test_initial_render(self, qapp: object, tmp_path: Path) -> None:
        window, _, _ = _make_window(qapp, tmp_path)
        assert len(window.tile_buttons) == 16
        assert all(b.text() == "" for b in window.tile_buttons)
        assert window.status_text == "Level: 1 | Time: 60s"

    def test_click_reveals_symbol(self, qapp: object, tmp_path: Path) -> None:
        window, ctrl, _ = _make_window(qapp, tmp_path)
        window.tile_buttons[3].click()
        assert ctrl.board is not None
        assert window.tile_buttons[3].text() == ctrl.board[3].symbol
        assert str(ctrl.board[3].color) in window.tile_buttons[3].styleSheet()

    def test_status_follows_timer(self, qapp: object, tmp_path: Path) -> None:
        window, _, sched = _make_window(qapp, tmp_path)
        sched.advance_seconds(2)
        assert window.status_text == "Level: 1 | Time: 58s"

    def test_pause_disables_tiles(self, qapp: object, tmp_path: Path) -> None:
        window, ctrl, _ = _make_window(qapp, tmp_path)
        ctrl.pause()
        assert not any(b.isEnabled() for b in window.tile_buttons)
        ctrl.resume()
        assert all(b.isEnabled() for b in window.tile_buttons)

    def test_failure_offers_replay(
        self, qapp: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        prompts = _Prompts(replay=True)
        prompts.install(monkeypatch)
        window, ctrl, sched = _make_window(qapp, tmp_path)
        sched.advance_seconds(60)
        assert "Time's up! Level Failed." in prompts.infos
        assert ctrl.phase == GamePhase.AWAITING_FIRST
        assert window.status_text == "Level: 1 | Time: 60s"

    def test_leaderboard_text(
        self, qapp: object, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        prompts = _Prompts(replay=False)
        prompts.install(monkeypatch)
        window, _, sched = _make_window(qapp, tmp_path)
        sched.advance_seconds(60)
        window._show_leaderboard()
        assert prompts.infos[-1] == "Top Scores:\nAda: 0"

    def test_close_stops_game(self, qapp: object, tmp_path: Path) -> None:
        window, ctrl, sched = _make_window(qapp, tmp_path)
        window.close()
        assert ctrl.session is None
        assert sched.pending == 0
