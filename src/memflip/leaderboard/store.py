"""Append-only CSV leaderboard with ranked retrieval."""

from __future__ import annotations

import csv
import logging
import os
from pathlib import Path

from memflip.leaderboard.errors import (
    LeaderboardReadError,
    LeaderboardWriteError,
    MalformedRecordError,
)
from memflip.leaderboard.models import HEADER, LeaderboardRecord

_LOGGER = logging.getLogger(__name__)


class LeaderboardStore:
    """Durable record log.

    Every :meth:`append` is a scoped open-append-flush-close, so a record is
    on disk (or the failure raised) before the call returns.  The header row
    is written only when the file is missing or empty.
    """

    __slots__ = ("_path", "_warnings")

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._warnings: list[str] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def warnings(self) -> tuple[str, ...]:
        """Problems reported by the most recent :meth:`top_n`."""
        return tuple(self._warnings)

    # ── Writing ──────────────────────────────────────────────────────────

    def append(self, record: LeaderboardRecord) -> None:
        """Append *record* to the log.

        Raises:
            LeaderboardWriteError: The file could not be opened or written.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8", newline="") as fh:
                writer = csv.writer(fh, lineterminator="\n")
                if fh.tell() == 0:
                    writer.writerow(HEADER)
                elif not self._ends_with_newline():
                    fh.write("\n")
                writer.writerow(record.to_row())
                fh.flush()
                os.fsync(fh.fileno())
        except OSError as exc:
            raise LeaderboardWriteError(
                f"Could not save score to {self._path}: {exc}"
            ) from exc

    def _ends_with_newline(self) -> bool:
        with self._path.open("rb") as raw:
            raw.seek(-1, os.SEEK_END)
            return raw.read(1) in (b"\n", b"\r")

    # ── Reading ──────────────────────────────────────────────────────────

    def read_records(
        self, malformed: list[MalformedRecordError] | None = None
    ) -> list[LeaderboardRecord]:
        """Return every parsable record in insertion order.

        Unparsable lines are skipped; when *malformed* is given, the error
        for each skipped line is appended to it.

        Raises:
            LeaderboardReadError: The log is missing or unreadable.
        """
        if not self._path.is_file():
            raise LeaderboardReadError(f"Leaderboard file not found: {self._path}")
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LeaderboardReadError(
                f"Error loading leaderboard {self._path}: {exc}"
            ) from exc

        records: list[LeaderboardRecord] = []
        for line_no, row in enumerate(csv.reader(text.splitlines()), start=1):
            if not row or all(not field.strip() for field in row):
                continue
            if tuple(field.strip() for field in row) == HEADER:
                continue
            try:
                records.append(LeaderboardRecord.from_row(row, line_no))
            except MalformedRecordError as exc:
                if malformed is not None:
                    malformed.append(exc)
        return records

    def top_n(self, n: int) -> list[LeaderboardRecord]:
        """Best *n* records by final score, descending.

        The sort is stable: records with equal final scores keep the order
        in which they were appended.  A missing log yields ``[]``, and bad
        lines are left out; both are logged and kept in :attr:`warnings`.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        self._warnings = []
        malformed: list[MalformedRecordError] = []
        try:
            records = self.read_records(malformed)
        except LeaderboardReadError as exc:
            self._warn(str(exc))
            return []
        for error in malformed:
            self._warn(f"Skipping malformed leaderboard record ({error})")

        ranked = sorted(records, key=lambda record: record.final_score, reverse=True)
        return ranked[:n]

    def _warn(self, message: str) -> None:
        _LOGGER.warning("%s", message)
        self._warnings.append(message)
