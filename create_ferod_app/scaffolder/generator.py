"""Main scaffolding orchestrator.

Takes resolved ``Answers`` and a target directory and materialises a new
Ferod bot project: selects the template set, layers the template trees on
top of each other, writes the Prisma schema, merges every template's
``package.json`` and finally starts ``git init`` / dependency installation
as background tasks.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from create_ferod_app.config import Config
from create_ferod_app.prompts.answers import Answers
from create_ferod_app.utils import is_occupied, print_error, print_info, save_json

from .actions import ActionResult, git_init, install_dependencies, start_action
from .manifest import MANIFEST_NAME, load_manifests, merge_manifests
from .templates import TemplateRenderer

# ---------------------------------------------------------------------------
# Template names
# ---------------------------------------------------------------------------

GIT_TEMPLATE = "git"
BASE_TEMPLATE = "base"
PRISMA_TEMPLATE = "prisma"
ESLINT_PRETTIER_TEMPLATE = "eslint-prettier"
DASHBOARD_TEMPLATE = "dashboard"

PRISMA_DIR = "prisma"
SCHEMA_FILE = "schema.prisma"

# Templates whose files are picked individually instead of copied wholesale.
_NOT_COPIED = frozenset({PRISMA_TEMPLATE})


def language_suffix(typescript: bool) -> str:
    return "ts" if typescript else "js"


def select_templates(answers: Answers) -> list[str]:
    """Return the ordered, duplicate-free template set for *answers*.

    Always ``base`` followed by exactly one language variant (``base-ts`` or
    ``base-js``); optional templates follow in a fixed order. The ``git``
    template is not part of the set because it carries no manifest.
    """
    lang = language_suffix(answers.typescript)
    templates = [BASE_TEMPLATE, f"base-{lang}"]

    if answers.prisma:
        templates.append(PRISMA_TEMPLATE)
    if answers.eslint_and_prettier:
        templates.append(ESLINT_PRETTIER_TEMPLATE)
    if answers.dashboard:
        templates.append(DASHBOARD_TEMPLATE)
    if answers.help_command:
        templates.append(f"help-{lang}")

    return list(dict.fromkeys(templates))


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class ScaffoldResult:
    """What a scaffold run did, plus handles on its background commands."""

    project_dir: Path
    created: bool
    templates: list[str] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    tasks: list[asyncio.Task[ActionResult]] = field(default_factory=list)

    async def wait(self) -> list[ActionResult]:
        """Wait for every post-scaffold command and return their results."""
        if not self.tasks:
            return []
        return list(await asyncio.gather(*self.tasks))


async def _cancel_tasks(tasks: list[asyncio.Task[ActionResult]]) -> None:
    """Cancel *tasks* and wait until each has finished."""
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


# ---------------------------------------------------------------------------
# Main scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Layers template directories into a new project.

    All inputs are explicit: the package manager and template root come from
    ``config``, the user choices from ``Answers``.
    """

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.templates_dir)

    # -- Public API --------------------------------------------------------

    async def scaffold(self, answers: Answers, project_dir: str | Path) -> ScaffoldResult:
        """Generate the project into *project_dir*.

        If *project_dir* already holds anything, a message is printed and
        nothing is written; the returned result has ``created=False``.

        Returns:
            A ``ScaffoldResult`` whose ``tasks`` are still running.
        """
        project_root = Path(project_dir)
        templates = select_templates(answers)

        print_info(f"Using {self.config.package_manager.value} to scaffold the project")

        if is_occupied(project_root):
            print_error(f"The directory {project_root} is not empty. Please try again.")
            return ScaffoldResult(project_dir=project_root, created=False, templates=templates)

        await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=True)

        result = ScaffoldResult(project_dir=project_root, created=True, templates=templates)
        context = self.build_context(answers)

        # 1. Version control
        if answers.git_repo:
            result.tasks.append(
                start_action(
                    git_init(project_root, timeout=self.config.command_timeout), name="git"
                )
            )

        try:
            await self._write_files(answers, project_root, templates, context, result)
        except BaseException:
            await _cancel_tasks(result.tasks)
            raise

        # 5. Dependencies
        if answers.install:
            result.tasks.append(
                start_action(
                    install_dependencies(
                        project_root,
                        self.config.package_manager,
                        timeout=self.config.command_timeout,
                    ),
                    name="install",
                )
            )

        result.files = list(dict.fromkeys(result.files))
        return result

    async def _write_files(
        self,
        answers: Answers,
        project_root: Path,
        templates: list[str],
        context: dict[str, Any],
        result: ScaffoldResult,
    ) -> None:
        """Copy template trees, the schema and the merged manifest."""
        if answers.git_repo:
            result.files += await self.renderer.copy_tree(GIT_TEMPLATE, project_root, context)

        # 2. Template trees, in template-set order
        for name in templates:
            if name in _NOT_COPIED:
                continue
            result.files += await self.renderer.copy_tree(name, project_root, context)

        # 3. Prisma schema
        if answers.prisma:
            result.files.append(await self._write_schema(answers, project_root))

        # 4. Merged package.json
        manifest = merge_manifests(
            answers.name,
            await asyncio.to_thread(load_manifests, self.renderer.template_dir, templates),
        )
        result.files.append(
            await save_json(manifest, project_root / MANIFEST_NAME, indent="\t")
        )

    # -- Context building --------------------------------------------------

    def build_context(self, answers: Answers) -> dict[str, Any]:
        """Build the Jinja2 context shared by every rendered template."""
        lang = language_suffix(answers.typescript)
        return {
            "project_name": answers.name,
            "typescript": answers.typescript,
            "language": lang,
            "package_manager": self.config.package_manager.value,
            "prisma": answers.prisma,
            "database_type": answers.resolved_database.value if answers.prisma else None,
            "database_uri": answers.resolved_database_uri if answers.prisma else None,
            "dashboard": answers.dashboard,
            "help_command": answers.help_command,
            "eslint_and_prettier": answers.eslint_and_prettier,
        }

    # -- Prisma ------------------------------------------------------------

    async def _write_schema(self, answers: Answers, root: Path) -> Path:
        """Copy the schema for the chosen database to ``prisma/schema.prisma``."""
        source = self.renderer.template_path(PRISMA_TEMPLATE) / answers.resolved_database.schema_name
        target_dir = root / PRISMA_DIR
        target = target_dir / SCHEMA_FILE

        await asyncio.to_thread(target_dir.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(shutil.copyfile, source, target)
        return target
