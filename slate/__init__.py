"""A terminal todo list for projects kept as Markdown task lists."""

__version__ = "0.1.0"