"""Actions that change the application state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from slate.models import Project
from slate.rows import RowState
from slate.state import AppState, ModalState, ModalType, TableState

__all__ = [
    "Action",
    "ActionFactory",
    "CancelModal",
    "FocusNextTable",
    "MoveDownInTable",
    "MoveUpInTable",
    "NoOp",
    "QuitApp",
    "SelectProject",
    "ShowNewProjectModal",
    "ShowNewTaskModal",
    "StartApp",
    "ToggleTaskStatus",
    "UpdateProjects",
]


class Action(ABC):
    """A single change to the application state."""

    @abstractmethod
    def apply(self, state: AppState) -> None:
        """Change ``state``."""


class ActionFactory(Action):
    """An action that picks another action from the state and applies it."""

    @abstractmethod
    def create(self, state: AppState) -> Action:
        """The action to apply to ``state``."""

    def apply(self, state: AppState) -> None:
        self.create(state).apply(state)


@dataclass(frozen=True)
class FocusNextTable(Action):
    """Move focus between the projects table and the tasks table."""

    def apply(self, state: AppState) -> None:
        tasks_should_focus = state.projects_table.is_focused
        state.projects_table.is_focused = not tasks_should_focus
        state.tasks_table.is_focused = tasks_should_focus


def _open_modal(state: AppState, modal_type: ModalType) -> None:
    state.projects_table.is_focused = False
    state.tasks_table.is_focused = False
    state.modal = ModalState(modal_type)


@dataclass(frozen=True)
class ShowNewTaskModal(Action):
    """Open the dialog for a new task."""

    def apply(self, state: AppState) -> None:
        _open_modal(state, ModalType.NEW_TASK)


@dataclass(frozen=True)
class ShowNewProjectModal(Action):
    """Open the dialog for a new project."""

    def apply(self, state: AppState) -> None:
        _open_modal(state, ModalType.NEW_PROJECT)


@dataclass(frozen=True)
class CancelModal(Action):
    """Close the open dialog and give focus back to its table."""

    def apply(self, state: AppState) -> None:
        modal, state.modal = state.modal, None
        if modal is None:
            return
        if modal.modal_type is ModalType.NEW_PROJECT:
            state.projects_table.is_focused = True
        else:
            state.tasks_table.is_focused = True


@dataclass(frozen=True)
class NoOp(Action):
    """Leave the state as it is."""

    def apply(self, state: AppState) -> None:
        return None


@dataclass(frozen=True)
class QuitApp(Action):
    """Stop the application."""

    def apply(self, state: AppState) -> None:
        state.is_running = False


@dataclass(frozen=True)
class StartApp(Action):
    """Mark the application as running."""

    def apply(self, state: AppState) -> None:
        state.is_running = True


def _project_at(state: AppState, index: int) -> Project | None:
    if 0 <= index < len(state.projects):
        return state.projects[index]
    return None


@dataclass(frozen=True)
class SelectProject(Action):
    """Show the tasks of the project selected in the projects table."""

    def apply(self, state: AppState) -> None:
        new_index = state.projects_table.selected_row
        if new_index is None:
            return
        state.selected_project_index = new_index
        project = _project_at(state, new_index)
        if project is None:
            return
        state.tasks_table.rows = [task.to_row() for task in project.tasks]
        state.projects_table.is_focused = False
        state.tasks_table.is_focused = True
        state.tasks_table.selected_row = 0


def _move_up(table: TableState) -> None:
    if not table.rows:
        return
    selected = table.selected_row
    if selected is None or selected == 0:
        table.selected_row = len(table.rows) - 1
    else:
        table.selected_row = selected - 1


def _move_down(table: TableState) -> None:
    if not table.rows:
        return
    selected = table.selected_row
    if selected is not None and selected + 1 < len(table.rows):
        table.selected_row = selected + 1
    else:
        table.selected_row = 0


@dataclass(frozen=True)
class MoveUpInTable(Action):
    """Select the previous row of the focused table, wrapping to the last."""

    def apply(self, state: AppState) -> None:
        _move_up(state.focused_table())


@dataclass(frozen=True)
class MoveDownInTable(Action):
    """Select the next row of the focused table, wrapping to the first."""

    def apply(self, state: AppState) -> None:
        _move_down(state.focused_table())


@dataclass(frozen=True)
class ToggleTaskStatus(Action):
    """Advance the status of the selected task of the selected project."""

    def apply(self, state: AppState) -> None:
        task_index = state.tasks_table.selected_row
        if task_index is None:
            return
        project = _project_at(state, state.selected_project_index)
        if project is None or not 0 <= task_index < len(project.tasks):
            return
        task = project.tasks[task_index]
        task.status = task.status.next()
        state.tasks_table.rows[task_index] = task.to_row()


@dataclass
class UpdateProjects(Action):
    """Replace the projects and rebuild the tables that show them."""

    projects: list[Project] = field(default_factory=list)

    def apply(self, state: AppState) -> None:
        state.projects_table.rows = [
            RowState([project.name, str(len(project.tasks))])
            for project in self.projects
        ]
        index = state.selected_project_index
        if not 0 <= index < len(self.projects):
            return
        project = self.projects[index]
        state.tasks_table.rows = [task.to_row() for task in project.tasks]
        state.projects_table.is_focused = False
        state.tasks_table.is_focused = True
        state.projects = self.projects