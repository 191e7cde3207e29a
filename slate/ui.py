"""Terminal interface: layout, drawing and the main loop."""

from __future__ import annotations

import argparse
import curses
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Any

from slate.actions import StartApp, UpdateProjects
from slate.keys import HandleKeyEvent, KeyCode, KeyEvent, KeyModifiers
from slate.repository import TaskFileRepository, TaskRepository, TaskRepositoryError
from slate.rows import RowEmphasis
from slate.state import AppState, TableState, TableType

__all__ = [
    "App",
    "Rect",
    "column_widths",
    "layout_chunks",
    "main",
    "popup_area",
    "translate_key",
]

KEYBINDINGS = " | ".join(
    ["New: a", "Act: <space>", "Switch table: <tab>", "Quit: <esc>/q"]
)
MODAL_HINT = " Cancel: <esc>/q "
COLUMN_SPACING = 1

_COLUMN_PERCENTAGES = {
    TableType.PROJECTS: (80, 20),
    TableType.TASKS: (10, 90),
}


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def layout_chunks(area: Rect) -> tuple[Rect, Rect, Rect]:
    """Split the screen into the projects table, the tasks table and a one-line footer."""
    footer = min(1, area.height)
    rest = area.height - footer
    top = min(rest, area.height * 33 // 100)
    middle = rest - top
    return (
        Rect(area.x, area.y, area.width, top),
        Rect(area.x, area.y + top, area.width, middle),
        Rect(area.x, area.y + top + middle, area.width, footer),
    )


def popup_area(area: Rect, percent_x: int, percent_y: int) -> Rect:
    """A rectangle of the given share of ``area``, centred inside it."""
    for percent in (percent_x, percent_y):
        if not 0 <= percent <= 100:
            raise ValueError(f"percentage must be between 0 and 100, got {percent}")
    width = area.width * percent_x // 100
    height = area.height * percent_y // 100
    return Rect(
        area.x + (area.width - width) // 2,
        area.y + (area.height - height) // 2,
        width,
        height,
    )


def column_widths(table: TableState, width: int) -> list[int]:
    """Widths of the columns of ``table`` drawn ``width`` cells wide."""
    percentages = _COLUMN_PERCENTAGES[table.table_type]
    available = max(0, width - COLUMN_SPACING * (len(percentages) - 1))
    widths = [available * percent // 100 for percent in percentages[:-1]]
    widths.append(available - sum(widths))
    return widths


_SPECIAL_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
    curses.KEY_HOME: KeyCode.HOME,
    curses.KEY_END: KeyCode.END,
    curses.KEY_PPAGE: KeyCode.PAGE_UP,
    curses.KEY_NPAGE: KeyCode.PAGE_DOWN,
    curses.KEY_DC: KeyCode.DELETE,
    curses.KEY_IC: KeyCode.INSERT,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
    curses.KEY_ENTER: KeyCode.ENTER,
}

_SPECIAL_CHARACTERS = {
    "\x1b": KeyCode.ESC,
    "\t": KeyCode.TAB,
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}


def translate_key(key: int | str) -> KeyEvent | None:
    """The key event for what the terminal reported, or None if it is not a key press."""
    if isinstance(key, int):
        if key == curses.KEY_BTAB:
            return KeyEvent(KeyCode.BACK_TAB, KeyModifiers.SHIFT)
        if key in _SPECIAL_KEYS:
            return KeyEvent(_SPECIAL_KEYS[key])
        if 0 <= key < 256:
            return translate_key(chr(key))
        return None
    if len(key) != 1:
        return None
    if key in _SPECIAL_CHARACTERS:
        return KeyEvent(_SPECIAL_CHARACTERS[key])
    code = ord(key)
    if 1 <= code <= 26:
        return KeyEvent(chr(code + ord("a") - 1), KeyModifiers.CONTROL)
    if code < 32:
        return None
    if key.isupper():
        return KeyEvent(key, KeyModifiers.SHIFT)
    return KeyEvent(key)


@dataclass(frozen=True)
class _Palette:
    green: int = curses.A_NORMAL
    yellow: int = curses.A_NORMAL
    cyan: int = curses.A_NORMAL
    highlight: int = curses.A_REVERSE | curses.A_BOLD

    @classmethod
    def detect(cls) -> _Palette:
        try:
            if not curses.has_colors():
                return cls()
            curses.start_color()
            try:
                curses.use_default_colors()
                background = -1
            except curses.error:
                background = curses.COLOR_BLACK
            curses.init_pair(1, curses.COLOR_GREEN, background)
            curses.init_pair(2, curses.COLOR_YELLOW, background)
            curses.init_pair(3, curses.COLOR_CYAN, background)
            curses.init_pair(4, curses.COLOR_WHITE, curses.COLOR_YELLOW)
            return cls(
                green=curses.color_pair(1),
                yellow=curses.color_pair(2),
                cyan=curses.color_pair(3),
                highlight=curses.color_pair(4),
            )
        except curses.error:
            return cls()


class _Canvas:
    """Clipped drawing on a curses window."""

    def __init__(self, screen: Any) -> None:
        self._screen = screen
        self.height, self.width = screen.getmaxyx()

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def put(self, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
        if not 0 <= y < self.height or x >= self.width or not text:
            return
        if x < 0:
            text, x = text[-x:], 0
        try:
            self._screen.addnstr(y, x, text, self.width - x, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the window.
            pass

    def clear(self, area: Rect) -> None:
        for row in range(area.y, area.bottom):
            self.put(row, area.x, " " * area.width)


def _draw_block(
    canvas: _Canvas,
    area: Rect,
    title: str,
    focused: bool,
    palette: _Palette,
    bottom_title: str | None = None,
) -> None:
    if area.width < 2 or area.height < 2:
        return
    border = palette.green if focused else curses.A_NORMAL
    edge = "━" * (area.width - 2)
    canvas.put(area.y, area.x, f"┏{edge}┓", border)
    for row in range(area.y + 1, area.bottom - 1):
        canvas.put(row, area.x, "┃", border)
        canvas.put(row, area.right - 1, "┃", border)
    canvas.put(area.bottom - 1, area.x, f"┗{edge}┛", border)
    title_attr = curses.A_BOLD if focused else curses.A_NORMAL
    canvas.put(area.y, area.x + 1, f" {title} "[: area.width - 2], title_attr)
    if bottom_title:
        canvas.put(area.bottom - 1, area.x + 1, bottom_title[: area.width - 2], border)


def _format_cells(cells: Sequence[str], widths: Sequence[int]) -> str:
    return (" " * COLUMN_SPACING).join(
        cell[:width].ljust(width) for cell, width in zip(cells, widths)
    )


def _scroll_offset(selected: int | None, visible: int, count: int) -> int:
    if selected is None or count == 0:
        return 0
    selected = min(selected, count - 1)
    return max(0, selected - visible + 1)


def _row_attr(emphasis: RowEmphasis, palette: _Palette) -> int:
    if emphasis is RowEmphasis.LOW:
        return curses.A_DIM
    if emphasis is RowEmphasis.HIGH:
        return palette.yellow
    return curses.A_NORMAL


def _draw_table(canvas: _Canvas, area: Rect, table: TableState, palette: _Palette) -> None:
    _draw_block(canvas, area, table.title(), table.is_focused, palette)
    inner = Rect(area.x + 2, area.y + 1, max(0, area.width - 3), max(0, area.height - 2))
    if inner.height <= 0 or inner.width <= 0:
        return
    widths = column_widths(table, inner.width)
    header_attr = curses.A_BOLD | (palette.yellow if table.is_focused else curses.A_NORMAL)
    canvas.put(inner.y, inner.x, _format_cells(table.header, widths), header_attr)
    visible = inner.height - 2
    if visible <= 0:
        return
    offset = _scroll_offset(table.selected_row, visible, len(table.rows))
    shown = islice(enumerate(table.rows), offset, offset + visible)
    for line, (index, row) in enumerate(shown):
        attr = _row_attr(row.emphasis, palette)
        if table.is_focused and index == table.selected_row:
            attr = palette.highlight
        text = _format_cells(row.cells, widths).ljust(inner.width)
        canvas.put(inner.y + 2 + line, inner.x, text, attr)


class App:
    """The interactive to-do list."""

    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository
        self.state = AppState()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(repository={self.repository!r})"

    def run(self, screen: Any) -> None:
        """Load the projects and handle key presses on ``screen`` until the user quits."""
        projects = self.repository.fetch_projects()
        self.state.apply(UpdateProjects(projects))
        self.state.apply(StartApp())
        palette = _Palette.detect()
        while self.state.is_running:
            self._render(screen, palette)
            key = self._read_key(screen)
            if key is not None:
                self.state.apply(HandleKeyEvent(key))

    @staticmethod
    def _read_key(screen: Any) -> KeyEvent | None:
        try:
            return translate_key(screen.get_wch())
        except curses.error:
            return None

    def _render(self, screen: Any, palette: _Palette) -> None:
        screen.erase()
        canvas = _Canvas(screen)
        projects_area, tasks_area, footer_area = layout_chunks(canvas.area)
        _draw_table(canvas, projects_area, self.state.projects_table, palette)
        _draw_table(canvas, tasks_area, self.state.tasks_table, palette)

        modal = self.state.modal
        if modal is not None:
            area = popup_area(canvas.area, 60, 20)
            canvas.clear(area)
            _draw_block(canvas, area, modal.title(), True, palette, MODAL_HINT)

        if footer_area.height:
            canvas.put(footer_area.y, footer_area.x, f" {KEYBINDINGS} ", palette.cyan)
        screen.refresh()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slate", description="A to-do list over a folder of Markdown notes."
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=os.environ.get("SLATE_ROOT", "."),
        help="directory holding the project files (default: $SLATE_ROOT or the current directory)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interface on the terminal."""
    args = _parser().parse_args(argv)
    app = App(TaskFileRepository(args.root))

    def session(screen: Any) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen.keypad(True)
        app.run(screen)

    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(session)
    except TaskRepositoryError as error:
        print(f"slate: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())