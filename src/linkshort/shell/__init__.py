"""Page shell: root layout and the header controls that depend on session presence."""

from src.linkshort.shell.controls import AccountControl, AuthLinks, ShellControls, build_shell
from src.linkshort.shell.layout import render_page, templates

__all__ = [
    "AccountControl",
    "AuthLinks",
    "ShellControls",
    "build_shell",
    "render_page",
    "templates",
]
