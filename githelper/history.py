"""Command history journal — a bounded, oldest-first log of executed commands.

The journal lives in a single JSON file under the user's home directory and
is shared by every invocation of the tool.  Each append re-reads the file,
adds one record, drops the oldest records beyond the retention limit and
rewrites the whole file atomically (write-to-temp then rename).

History is best-effort: read problems yield an empty journal and write
problems are logged and dropped.  Nothing here raises into the operation
that triggered the append.

There is no locking.  Two concurrent invocations can each read the same
journal and the last one to write wins, losing the other's record.
"""

from __future__ import annotations

import json
import logging
import tempfile
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from githelper.config import MAX_HISTORY_ENTRIES
from githelper.errors import HistoryPersistenceError

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CommandRecord(BaseModel):
    """A single executed command.  Immutable once created.

    Both fields are required when validating a persisted journal; use
    :meth:`now` to stamp a new record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: str = Field(min_length=1)
    timestamp: str = Field(min_length=1)

    @classmethod
    def now(cls, command: str) -> CommandRecord:
        return cls(command=command, timestamp=_utc_now())


_RECORDS = TypeAdapter(list[CommandRecord])


class HistoryJournal:
    """Ordered records, oldest first, never longer than *limit*.

    Appending past the limit silently drops records from the front.
    """

    def __init__(
        self,
        records: Iterable[CommandRecord] = (),
        limit: int = MAX_HISTORY_ENTRIES,
    ) -> None:
        self.limit = limit
        self._records: deque[CommandRecord] = deque(records, maxlen=limit)

    def append(self, record: CommandRecord) -> None:
        self._records.append(record)

    @property
    def records(self) -> list[CommandRecord]:
        return list(self._records)

    def to_json(self) -> str:
        return json.dumps([r.model_dump() for r in self._records], indent=2)

    def __iter__(self) -> Iterator[CommandRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)


class HistoryStore:
    """Load, append to and persist the history journal.

    Parameters
    ----------
    path:
        Journal file.  ``None`` disables history entirely: loads return an
        empty journal and appends do nothing.
    limit:
        Retention cap.  Defaults to 100 records.
    """

    def __init__(self, path: str | Path | None, limit: int = MAX_HISTORY_ENTRIES) -> None:
        self.path = Path(path) if path is not None else None
        self.limit = limit

    @property
    def enabled(self) -> bool:
        return self.path is not None

    # -- Public API -----------------------------------------------------------

    def load(self) -> HistoryJournal:
        """Read the journal from disk.

        A missing, unreadable or malformed file yields an empty journal.
        """
        try:
            return HistoryJournal(self._read(), limit=self.limit)
        except HistoryPersistenceError as exc:
            logger.debug("Ignoring history file: %s", exc)
            return HistoryJournal(limit=self.limit)

    def append(self, command: str) -> None:
        """Record *command* with the current UTC time and persist."""
        if not self.enabled:
            logger.debug("History disabled; not recording %r", command)
            return
        if not command or not command.strip():
            logger.debug("Ignoring blank history command")
            return

        journal = self.load()
        journal.append(CommandRecord.now(command))
        self.persist(journal)

    def persist(self, journal: HistoryJournal) -> bool:
        """Overwrite the journal file with *journal*.

        Returns *True* if the file was written.  Failures are logged and
        swallowed.
        """
        if self.path is None:
            return False
        try:
            self._write(self.path, journal.to_json())
        except HistoryPersistenceError as exc:
            logger.debug("Could not save history: %s", exc)
            return False
        logger.debug("History saved (%d entries) to %s", len(journal), self.path)
        return True

    # -- Internals ------------------------------------------------------------

    def _read(self) -> list[CommandRecord]:
        if self.path is None:
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise HistoryPersistenceError(f"cannot read {self.path}: {exc}") from exc
        try:
            return _RECORDS.validate_json(raw)
        except ValidationError as exc:
            raise HistoryPersistenceError(
                f"malformed history in {self.path}: {exc.error_count()} error(s)"
            ) from exc

    @staticmethod
    def _write(path: Path, payload: str) -> None:
        parent = path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
            # Atomic write: temp file + rename
            fd, tmp = tempfile.mkstemp(dir=parent, prefix=".git_helper_history_", suffix=".json")
            try:
                with open(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                Path(tmp).replace(path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise HistoryPersistenceError(f"cannot write {path}: {exc}") from exc
