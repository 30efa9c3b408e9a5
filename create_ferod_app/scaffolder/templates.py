"""Template tree copying with Jinja2 rendering.

A template is a plain directory. Copying it into a project reproduces its
tree verbatim, except that files ending in ``.j2`` are rendered with the
project context and written without the suffix. Later copies overwrite
earlier ones on path collisions, which is how language variants and
optional templates layer on top of ``base``.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from create_ferod_app.scaffolder.errors import TemplateNotFoundError

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Copies and renders template directories.

    The renderer resolves template names against ``template_dir``. Jinja2
    templates are looked up relative to that same root, so a template file at
    ``base-ts/src/index.ts.j2`` is rendered as ``"base-ts/src/index.ts.j2"``.
    """

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def template_path(self, name: str) -> Path:
        """Return the directory of template *name*.

        Raises:
            TemplateNotFoundError: If the directory does not exist.
        """
        path = self.template_dir / name
        if not path.is_dir():
            raise TemplateNotFoundError(name, path)
        return path

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template file with the provided context.

        Args:
            template_path: Path relative to the template root (e.g.
                ``"base/.env.j2"``).
            context: Variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*."""
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out

    # -- Tree copying --------------------------------------------------------

    async def copy_tree(
        self,
        name: str,
        output_dir: str | Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Copy template *name* into *output_dir*.

        The directory structure is preserved. ``*.j2`` files are rendered,
        everything else is copied with its metadata.

        Returns:
            Written file paths, in sorted source order.
        """
        source_root = self.template_path(name)
        out_base = Path(output_dir)
        written: list[Path] = []

        for source in sorted(source_root.rglob("*")):
            if not source.is_file():
                continue
            rel = source.relative_to(source_root)

            if source.name.endswith(TEMPLATE_SUFFIX):
                target = out_base / str(rel)[: -len(TEMPLATE_SUFFIX)]
                await self.render_to_file(f"{name}/{rel.as_posix()}", target, context)
            else:
                target = out_base / rel
                await asyncio.to_thread(_copy_file, source, target)
            written.append(target)

        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _copy_file(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)
