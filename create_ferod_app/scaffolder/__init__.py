"""create-ferod-app scaffolder -- layers template trees into a new project.

Quick usage::

    from create_ferod_app.config import Config
    from create_ferod_app.prompts import default_answers
    from create_ferod_app.scaffolder import ProjectScaffolder

    scaffolder = ProjectScaffolder(Config.from_env())
    result = await scaffolder.scaffold(default_answers("demo"), "./demo")
    await result.wait()
"""

from create_ferod_app.scaffolder.actions import ActionResult
from create_ferod_app.scaffolder.errors import ScaffoldError, TemplateNotFoundError
from create_ferod_app.scaffolder.generator import (
    ProjectScaffolder,
    ScaffoldResult,
    select_templates,
)
from create_ferod_app.scaffolder.manifest import merge_manifests
from create_ferod_app.scaffolder.templates import TemplateRenderer

__all__ = [
    "ActionResult",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "merge_manifests",
    "select_templates",
]
