[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slate"
version = "0.1.0"
description = "A terminal todo list for projects kept as Markdown task lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "markdown", "terminal", "curses", "notes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slate = "slate.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["slate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
