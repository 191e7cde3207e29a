# slate

slate is a todo list for the terminal. It reads your projects from a folder of
Markdown notes and shows them in two tables: projects at the top and the tasks
of the selected project below, with a line of key hints at the bottom. The
interface is drawn with the standard `curses` module, so it needs a terminal
where `curses` is available (Linux, macOS and other POSIX systems).

## Projects and tasks

Every `.md` file under the notes folder is a project; the folder is searched
recursively. The project is named after the file, without its extension. Every
line that looks like a Markdown check-box item becomes a task:

```markdown
- [ ] Write the report
- [/] Book the venue
- [x] Buy food
```

The box holds exactly one character and must be followed by whitespace. The
text after it, with surrounding spaces removed, is the task's name. The marker
sets the task's status:

| Marker          | Status  |
|-----------------|---------|
| `x` or `X`      | Done    |
| `/`             | Started |
| anything else   | Pending |

Lines that are not check-box items are ignored. A file that cannot be read
stops loading with a `slate.repository.TaskRepositoryError`; the command then
prints `slate: IO error: ...` and exits with status 1.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
slate [ROOT]
```

`ROOT` is the folder that holds the project files. Without it, slate uses the
`SLATE_ROOT` environment variable, or the current directory if that is unset.

On start the tasks table has focus and shows the tasks of the first project.

## Keys

| Key              | Action                                                    |
|------------------|-----------------------------------------------------------|
| `j` / Down       | Move down in the focused table (wraps to the top)          |
| `k` / Up         | Move up in the focused table (wraps to the bottom)         |
| Tab / Shift-Tab  | Switch between the projects and tasks tables               |
| Space            | In the projects table, open the selected project; in the tasks table, cycle the selected task's status (Pending → Started → Done → Pending) |
| `a`              | Open the "New Task" or "New Project" dialog, depending on the focused table |
| Esc / `q`        | Close the open dialog, or quit when none is open           |

Done tasks are drawn dimmed and started tasks are drawn in yellow.

## What slate does not do

- Changes are kept in memory only. Cycling a task's status does not write
  anything back to the Markdown files.
- The "New Task" and "New Project" dialogs only open and close; they do not
  take input and do not create tasks or projects.

## Using it as a library

The parts of slate can be used on their own:

- `slate.repository.TaskFileRepository(root).fetch_projects()` reads every
  project below a folder, and `slate.repository.parse_project_file(path)` reads
  a single Markdown file into a `slate.models.Project`.
- `slate.models` holds `Project`, `Task` and `ProgressStatus`;
  `Task.to_row()` gives the `slate.rows.RowState` shown for a task.
- `slate.state.AppState` holds what the screen shows and is changed by
  applying actions from `slate.actions`, such as `UpdateProjects`,
  `SelectProject`, `ToggleTaskStatus`, `FocusNextTable`, `MoveUpInTable` and
  `MoveDownInTable`.
- `slate.keys.HandleKeyEvent` turns a `slate.keys.KeyEvent` into the action
  that key stands for in the current state. Control-`c` maps to `QuitApp` in
  every state.
- `slate.ui` has the layout helpers `layout_chunks`, `popup_area` and
  `column_widths`, `translate_key` for curses key codes, and `App`, which runs
  the interface on a curses window.

```python
from slate.actions import ToggleTaskStatus, UpdateProjects
from slate.models import ProgressStatus, Project, Task
from slate.state import AppState

state = AppState()
project = Project(name="Groceries", tasks=[Task(name="Buy food")])
state.apply(UpdateProjects(projects=[project]))
state.apply(ToggleTaskStatus())

assert state.projects[0].tasks[0].status is ProgressStatus.STARTED
```