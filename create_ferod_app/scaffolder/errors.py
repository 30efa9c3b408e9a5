"""Scaffolder exceptions."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class TemplateNotFoundError(ScaffoldError, FileNotFoundError):
    """Raised when a selected template directory is missing from the template tree."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Template '{name}' not found at {path}")
