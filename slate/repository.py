"""Loading projects and their tasks from a tree of Markdown files."""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from slate.models import ProgressStatus, Project, Task

__all__ = [
    "TaskFileRepository",
    "TaskRepository",
    "TaskRepositoryError",
    "parse_project_file",
]

_TASK_LINE = re.compile(r"^\s*-\s*\[(.| )\]\s+(.*)$")

_MARKER_STATUS = {
    "x": ProgressStatus.DONE,
    "X": ProgressStatus.DONE,
    "/": ProgressStatus.STARTED,
}


class TaskRepositoryError(Exception):
    """Projects could not be read."""

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"IO error: {self.error}"


class TaskRepository(ABC):
    """A source of projects."""

    @abstractmethod
    def fetch_projects(self) -> list[Project]:
        """All projects of the repository."""


def _lines(path: Path) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            line = line.removesuffix("\n")
            yield line.removesuffix("\r")


def parse_project_file(path: str | os.PathLike[str]) -> Project:
    """Read one Markdown file as a project whose tasks are its checkbox items."""
    path = Path(path)
    project = Project(name=path.stem, file_path=path)
    try:
        for line in _lines(path):
            match = _TASK_LINE.match(line)
            if match is None:
                continue
            status = _MARKER_STATUS.get(match.group(1), ProgressStatus.PENDING)
            project.tasks.append(Task(match.group(2).strip(), status))
    except (OSError, UnicodeDecodeError) as error:
        raise TaskRepositoryError(error) from error
    return project


def _walk(root: Path) -> Iterator[Path]:
    """Yield the root and everything below it, depth first, skipping what cannot be read."""
    if not os.path.lexists(root):
        return
    yield root
    if root.is_symlink() or not root.is_dir():
        return
    try:
        entries = sorted(os.scandir(root), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        yield from _walk(Path(entry.path))


class TaskFileRepository(TaskRepository):
    """Projects stored as ``.md`` files anywhere below a root directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self.root)!r})"

    def fetch_projects(self) -> list[Project]:
        return [
            parse_project_file(path)
            for path in _walk(self.root)
            if path.suffix == ".md" and path.is_file()
        ]