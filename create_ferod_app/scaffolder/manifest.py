"""``package.json`` merging.

Each template ships its own manifest declaring only the scripts and
dependencies that slice of the project needs. The generated project's
manifest is the base template's manifest with those three mappings replaced
by the union of every selected template's entries, later templates winning
on key collisions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from create_ferod_app.utils import load_json

MANIFEST_NAME = "package.json"

MERGED_FIELDS: tuple[str, ...] = ("scripts", "dependencies", "devDependencies")


def merge_manifests(
    project_name: str, manifests: Iterable[Mapping[str, Any]]
) -> dict[str, Any]:
    """Merge template manifests into the project's manifest.

    Args:
        project_name: Written to the ``name`` field.
        manifests: Manifests in template order. The first one is the base:
            all of its fields other than ``name`` and the merged mappings are
            kept verbatim.

    Returns:
        A new dict. The inputs are not modified.

    Raises:
        ValueError: If *manifests* is empty.
    """
    manifests = list(manifests)
    if not manifests:
        raise ValueError("at least one manifest is required")

    merged: dict[str, dict[str, str]] = {field: {} for field in MERGED_FIELDS}
    for manifest in manifests:
        for field in MERGED_FIELDS:
            merged[field].update(manifest.get(field) or {})

    return {
        **manifests[0],
        "name": project_name,
        "scripts": merged["scripts"],
        "dependencies": merged["dependencies"],
        "devDependencies": merged["devDependencies"],
    }


def load_manifests(templates_dir: str | Path, template_set: Iterable[str]) -> list[dict[str, Any]]:
    """Read ``package.json`` from every template in *template_set*.

    Raises:
        FileNotFoundError: If a template has no manifest.
    """
    root = Path(templates_dir)
    return [load_json(root / name / MANIFEST_NAME) for name in template_set]
