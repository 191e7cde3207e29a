"""Projects, tasks and their progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from slate.rows import RowEmphasis, RowState


class ProgressStatus(Enum):
    """Where a task stands."""

    PENDING = "Pending"
    STARTED = "Started"
    DONE = "Done"

    def label(self) -> str:
        """The text shown for this status."""
        return self.value

    def next(self) -> ProgressStatus:
        """The status that follows this one, wrapping back to pending."""
        return _NEXT_STATUS[self]


_NEXT_STATUS = {
    ProgressStatus.PENDING: ProgressStatus.STARTED,
    ProgressStatus.STARTED: ProgressStatus.DONE,
    ProgressStatus.DONE: ProgressStatus.PENDING,
}

_EMPHASIS = {
    ProgressStatus.DONE: RowEmphasis.LOW,
    ProgressStatus.PENDING: RowEmphasis.MEDIUM,
    ProgressStatus.STARTED: RowEmphasis.HIGH,
}


@dataclass
class Task:
    """A single item of a project."""

    name: str = ""
    status: ProgressStatus = ProgressStatus.PENDING

    def to_row(self) -> RowState:
        """The row that shows this task in the tasks table."""
        return RowState([self.status.label(), self.name], _EMPHASIS[self.status])


@dataclass
class Project:
    """A named list of tasks, backed by a file."""

    name: str = ""
    file_path: Path = field(default_factory=Path)
    tasks: list[Task] = field(default_factory=list)