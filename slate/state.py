"""State of the application: its tables, its modal and its projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from slate.models import Project
from slate.rows import RowState


class TableType(Enum):
    """Which of the two tables a table state describes."""

    PROJECTS = "Projects"
    TASKS = "Tasks"


@dataclass
class TableState:
    """Contents, focus and selection of one table."""

    table_type: TableType
    header: list[str] = field(default_factory=list)
    rows: list[RowState] = field(default_factory=list)
    is_focused: bool = False
    selected_row: int | None = 0

    def title(self) -> str:
        """The title shown above the table."""
        return self.table_type.value


class ModalType(Enum):
    """The kinds of modal dialog."""

    NEW_TASK = "New Task"
    NEW_PROJECT = "New Project"


@dataclass
class ModalState:
    """An open modal dialog."""

    modal_type: ModalType

    def title(self) -> str:
        """The title shown on the modal."""
        return self.modal_type.value


class _Applicable(Protocol):
    def apply(self, state: AppState) -> None: ...


def _projects_table() -> TableState:
    return TableState(TableType.PROJECTS, header=["Name", "Tasks", "Subprojects"])


def _tasks_table() -> TableState:
    return TableState(TableType.TASKS, header=["Status", "Name"])


@dataclass
class AppState:
    """Everything the application shows and acts on."""

    is_running: bool = False
    projects_table: TableState = field(default_factory=_projects_table)
    projects: list[Project] = field(default_factory=list)
    tasks_table: TableState = field(default_factory=_tasks_table)
    selected_project_index: int = 0
    modal: ModalState | None = None

    def apply(self, action: _Applicable) -> None:
        """Let an action change this state."""
        action.apply(self)

    def focused_table(self) -> TableState:
        """The projects table if it has focus, otherwise the tasks table."""
        if self.projects_table.is_focused:
            return self.projects_table
        return self.tasks_table