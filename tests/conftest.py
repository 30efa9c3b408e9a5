"""Shared pytest fixtures for the create-ferod-app test suite.

Provides reusable fixtures for:
- A small, fully controlled template tree
- Configs pointing at that tree or at the bundled templates
- Mocked subprocess execution for the post-scaffold actions
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from create_ferod_app.config import Config, PackageManager
from create_ferod_app.prompts.answers import Answers


# ---------------------------------------------------------------------------
# Template tree
# ---------------------------------------------------------------------------

def _write_manifest(directory: Path, data: dict[str, Any]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "package.json").write_text(json.dumps(data), encoding="utf-8")


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A minimal template tree mirroring the layout of the bundled one."""
    root = tmp_path / "templates"

    _write(root / "git" / ".gitignore", "node_modules/\n")

    _write_manifest(root / "base", {
        "name": "template-base",
        "version": "1.2.3",
        "private": True,
        "type": "module",
        "scripts": {"start": "node src/index.js", "build": "echo base"},
        "dependencies": {"discord.js": "^14.0.0"},
        "devDependencies": {},
    })
    _write(root / "base" / "README.md.j2", "# {{ project_name }}\n")
    _write(root / "base" / "shared.txt", "from base\n")

    _write_manifest(root / "base-ts", {
        "scripts": {"build": "tsc", "dev": "tsx src/index.ts"},
        "devDependencies": {"typescript": "^5.0.0"},
    })
    _write(root / "base-ts" / "src" / "index.ts", "console.log('ts');\n")
    _write(root / "base-ts" / "shared.txt", "from base-ts\n")

    _write_manifest(root / "base-js", {
        "scripts": {"dev": "node --watch src/index.js"},
    })
    _write(root / "base-js" / "src" / "index.js", "console.log('js');\n")
    _write(root / "base-js" / "shared.txt", "from base-js\n")

    _write_manifest(root / "prisma", {
        "scripts": {"db:push": "prisma db push"},
        "dependencies": {"@prisma/client": "^5.0.0"},
        "devDependencies": {"prisma": "^5.0.0"},
    })
    for db in ("mysql", "mongodb", "sqlite", "postgresql", "sqlserver", "cockroachdb"):
        _write(root / "prisma" / f"{db}.prisma", f"// {db} schema\n")

    _write_manifest(root / "eslint-prettier", {
        "scripts": {"lint": "eslint ."},
        "devDependencies": {"eslint": "^8.0.0", "typescript": "^5.3.0"},
    })
    _write(root / "eslint-prettier" / ".prettierrc", "{}\n")

    _write_manifest(root / "dashboard", {
        "scripts": {"dashboard:dev": "vite dashboard"},
        "dependencies": {"react": "^18.0.0"},
    })
    _write(root / "dashboard" / "dashboard" / "index.html.j2", "<title>{{ project_name }}</title>\n")

    for lang in ("ts", "js"):
        _write_manifest(root / f"help-{lang}", {"dependencies": {"lodash": "^4.17.21"}})
        _write(root / f"help-{lang}" / "src" / "commands" / f"help.{lang}", "// help\n")

    return root


# ---------------------------------------------------------------------------
# Configs & answers
# ---------------------------------------------------------------------------

@pytest.fixture
def config(templates_dir: Path) -> Config:
    """Config using the fixture template tree and yarn."""
    return Config(package_manager=PackageManager.YARN, templates_dir=templates_dir)


@pytest.fixture
def bundled_config() -> Config:
    """Config using the templates shipped with the package."""
    return Config(package_manager=PackageManager.NPM)


@pytest.fixture
def minimal_answers() -> Answers:
    """TypeScript project with every optional feature and side effect off."""
    return Answers(
        name="test-bot",
        git_repo=False,
        install=False,
        prisma=False,
        typescript=True,
        help_command=False,
        dashboard=False,
        eslint_and_prettier=False,
    )


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the command runner used by post-scaffold actions.

    Every command "succeeds" with ``(0, "ok", "")``.
    """
    mock = AsyncMock(return_value=(0, "ok", ""))
    with patch("create_ferod_app.scaffolder.actions.run_command", mock):
        yield mock
