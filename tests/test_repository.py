from pathlib import Path

import pytest

from slate.models import ProgressStatus, Project, Task
from slate.repository import (
    TaskFileRepository,
    TaskRepository,
    TaskRepositoryError,
    parse_project_file,
)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def test_parse_reads_statuses_from_markers(tmp_path):
    path = _write(
        tmp_path / "groceries.md",
        "# Groceries\n"
        "- [ ] Milk\n"
        "- [x] Bread\n"
        "- [X] Eggs\n"
        "- [/] Cheese\n"
        "- [?] Butter\n",
    )
    project = parse_project_file(path)
    assert project.name == "groceries"
    assert project.file_path == path
    assert project.tasks == [
        Task("Milk", ProgressStatus.PENDING),
        Task("Bread", ProgressStatus.DONE),
        Task("Eggs", ProgressStatus.DONE),
        Task("Cheese", ProgressStatus.STARTED),
        Task("Butter", ProgressStatus.PENDING),
    ]


def test_parse_trims_names_and_allows_indentation(tmp_path):
    path = _write(tmp_path / "a.md", "    -   [x]   Indented task   \r\n\t-[ ]\tTabbed\n")
    project = parse_project_file(path)
    assert project.tasks == [
        Task("Indented task", ProgressStatus.DONE),
        Task("Tabbed", ProgressStatus.PENDING),
    ]


@pytest.mark.parametrize(
    "line",
    [
        "Plain text",
        "- [x]NoSpace",
        "- [] Empty marker",
        "- [ab] Long marker",
        "* [ ] Star bullet",
        "[ ] No dash",
    ],
)
def test_parse_ignores_lines_that_are_not_tasks(tmp_path, line):
    path = _write(tmp_path / "notes.md", line + "\n")
    assert parse_project_file(path).tasks == []


def test_parse_uses_stem_of_dotted_name(tmp_path):
    path = _write(tmp_path / "v1.2.md", "- [ ] One\n")
    assert parse_project_file(path).name == "v1.2"


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(TaskRepositoryError) as info:
        parse_project_file(tmp_path / "missing.md")
    assert str(info.value).startswith("IO error: ")
    assert isinstance(info.value.error, FileNotFoundError)
    assert info.value.__cause__ is info.value.error


def test_parse_invalid_utf8_raises(tmp_path):
    path = tmp_path / "bad.md"
    path.write_bytes(b"- [ ] ok\n- [ ] \xff\xfe\n")
    with pytest.raises(TaskRepositoryError):
        parse_project_file(path)


def test_fetch_projects_finds_markdown_in_nested_directories(tmp_path):
    _write(tmp_path / "alpha.md", "- [ ] First\n")
    _write(tmp_path / "sub" / "beta.md", "- [x] Second\n")
    _write(tmp_path / "sub" / "deeper" / "gamma.md", "- [/] Third\n")
    _write(tmp_path / "readme.txt", "- [ ] Not a project\n")
    _write(tmp_path / "sub" / "notes.markdown", "- [ ] Not a project either\n")

    projects = TaskFileRepository(tmp_path).fetch_projects()

    by_name = {project.name: project for project in projects}
    assert set(by_name) == {"alpha", "beta", "gamma"}
    assert by_name["beta"].tasks == [Task("Second", ProgressStatus.DONE)]
    assert by_name["gamma"].file_path == tmp_path / "sub" / "deeper" / "gamma.md"


def test_fetch_projects_ignores_directory_named_like_markdown(tmp_path):
    (tmp_path / "folder.md").mkdir()
    _write(tmp_path / "folder.md" / "inner.md", "- [ ] Inside\n")
    projects = TaskFileRepository(tmp_path).fetch_projects()
    assert [project.name for project in projects] == ["inner"]


def test_fetch_projects_missing_root_is_empty(tmp_path):
    assert TaskFileRepository(tmp_path / "nowhere").fetch_projects() == []


def test_fetch_projects_root_may_be_a_single_file(tmp_path):
    path = _write(tmp_path / "solo.md", "- [ ] Only\n")
    projects = TaskFileRepository(path).fetch_projects()
    assert projects == [Project("solo", path, [Task("Only")])]


def test_fetch_projects_is_repeatable(tmp_path):
    _write(tmp_path / "one.md", "- [ ] A\n")
    _write(tmp_path / "two.md", "- [x] B\n")
    repository = TaskFileRepository(str(tmp_path))
    first = repository.fetch_projects()
    second = repository.fetch_projects()
    assert sorted(project.name for project in first) == ["one", "two"]
    by_name = {project.name: project for project in second}
    assert by_name["one"].tasks == [Task("A", ProgressStatus.PENDING)]
    assert by_name["two"].tasks == [Task("B", ProgressStatus.DONE)]
    assert first == second


def test_file_repository_is_a_task_repository(tmp_path):
    repository: TaskRepository = TaskFileRepository(tmp_path)
    _write(tmp_path / "x.md", "- [ ] Task\n")
    assert [p.name for p in repository.fetch_projects()] == ["x"]


def test_fetch_projects_propagates_read_errors(tmp_path):
    path = tmp_path / "broken.md"
    path.write_bytes(b"\xff\n")
    with pytest.raises(TaskRepositoryError) as info:
        TaskFileRepository(tmp_path).fetch_projects()
    assert str(info.value).startswith("IO error: ")