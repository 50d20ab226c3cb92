"""Persistence helpers (load/save) for the task list.

The file holds one storable line per task (see models). Storage itself only
manages the file: decoding is delegated to Task.from_storable_line, and a
line that fails to decode is skipped and counted rather than aborting the
load. I/O failures are logged and handed back to the caller as values.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from errors import MalformedRecord, StorageIOFailure
from models import Task

DEFAULT_TASKS_FILE = Path('data') / 'tasks.txt'

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    tasks: List[Task] = field(default_factory=list)
    skipped: int = 0
    error: Optional[StorageIOFailure] = None


class Storage:
    def __init__(self, path: Path = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def _ensure_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)

    def load(self) -> LoadResult:
        """Read every task from disk.

        Missing file -> created empty, empty result.
        Corrupted lines -> skipped; the count is in LoadResult.skipped.
        """
        result = LoadResult()
        try:
            if not self.path.exists():
                self._ensure_file()
                logger.info("Created empty task file at %s", self.path)
                return result
            # binary mode so one undecodable line is skipped like any other bad line
            with open(self.path, 'rb') as f:
                for lineno, raw in enumerate(f, start=1):
                    if not raw.strip():
                        continue
                    try:
                        line = raw.decode('utf-8')
                        result.tasks.append(Task.from_storable_line(line))
                    except (MalformedRecord, UnicodeDecodeError) as e:
                        result.skipped += 1
                        logger.warning("Skipping corrupted line %d in %s: %s", lineno, self.path, e)
        except OSError as e:
            result.tasks = []
            result.error = StorageIOFailure(self.path, "load tasks from", e)
            logger.error("%s", result.error)
            return result
        if result.skipped:
            logger.warning("Skipped %d line(s) with corrupted data in %s", result.skipped, self.path)
        logger.debug("Loaded %d task(s) from %s", len(result.tasks), self.path)
        return result

    def save(self, tasks: Iterable[Task]) -> Optional[StorageIOFailure]:
        """Rewrite the whole file; returns the failure instead of raising it."""
        lines = [task.to_storable_line() + '\n' for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.writelines(lines)
        except OSError as e:
            failure = StorageIOFailure(self.path, "save tasks to", e)
            logger.error("%s", failure)
            return failure
        logger.debug("Saved %d task(s) to %s", len(lines), self.path)
        return None
