"""Key presses and the actions they lead to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag

from slate.actions import (
    Action,
    ActionFactory,
    CancelModal,
    FocusNextTable,
    MoveDownInTable,
    MoveUpInTable,
    NoOp,
    QuitApp,
    SelectProject,
    ShowNewProjectModal,
    ShowNewTaskModal,
    ToggleTaskStatus,
)
from slate.state import AppState

__all__ = ["HandleKeyEvent", "KeyCode", "KeyEvent", "KeyModifiers"]


class KeyCode(Enum):
    """Keys that do not stand for a character."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    ESC = "esc"


class KeyModifiers(Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a named key or a single character, with its modifiers."""

    code: KeyCode | str
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and len(self.code) != 1:
            raise ValueError(f"a character key must be one character, got {self.code!r}")


@dataclass(frozen=True)
class HandleKeyEvent(ActionFactory):
    """Choose the action a key press stands for in the current state."""

    key: KeyEvent

    def create(self, state: AppState) -> Action:
        action = self._global_action()
        if action is not None:
            return action
        if state.modal is not None:
            return self._modal_action()
        return self._home_action(state)

    def _global_action(self) -> Action | None:
        if self.key.modifiers == KeyModifiers.CONTROL and self.key.code in ("c", "C"):
            return QuitApp()
        return None

    def _modal_action(self) -> Action:
        if self.key.code in (KeyCode.ESC, "q"):
            return CancelModal()
        return NoOp()

    def _home_action(self, state: AppState) -> Action:
        code, modifiers = self.key.code, self.key.modifiers
        if code in (KeyCode.ESC, "q"):
            return QuitApp()
        if code is KeyCode.TAB and modifiers in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return FocusNextTable()
        if code is KeyCode.BACK_TAB:
            return FocusNextTable()
        if code == "a":
            if state.tasks_table.is_focused:
                return ShowNewTaskModal()
            return ShowNewProjectModal()
        if code in ("k", KeyCode.UP):
            return MoveUpInTable()
        if code in ("j", KeyCode.DOWN):
            return MoveDownInTable()
        if code == " ":
            if state.tasks_table.is_focused:
                return ToggleTaskStatus()
            return SelectProject()
        return NoOp()