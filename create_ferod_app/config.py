"""create-ferod-app configuration.

Typed, read-once configuration for the generator. The environment is
inspected a single time (``Config.from_env``) and the resulting ``Config``
instance is passed explicitly to the scaffolder, so nothing below the CLI
reads ``os.environ`` directly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class PackageManager(str, Enum):
    """Package managers the generated project can be installed with."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    def install_command(self) -> list[str]:
        """Return the argv used to install dependencies in a new project."""
        if self is PackageManager.PNPM:
            return [self.value, "install", "--ignore-workspace"]
        return [self.value, "install"]


def detect_package_manager(user_agent: str | None) -> PackageManager:
    """Map an ``npm_config_user_agent`` value to a package manager.

    npm and yarn always set the variable, pnpm is less consistent, so an
    absent or unrecognised value falls back to npm.

    Examples::

        detect_package_manager("yarn/1.22.19 npm/? node/v18.12.0") -> YARN
        detect_package_manager(None) -> NPM
    """
    if not user_agent:
        return PackageManager.NPM
    if "yarn" in user_agent:
        return PackageManager.YARN
    if "pnpm" in user_agent:
        return PackageManager.PNPM
    return PackageManager.NPM


class Config(BaseModel):
    """Global generator configuration.

    Attributes:
        package_manager: Package manager used for the post-scaffold install.
        templates_dir: Root of the template tree (one sub-directory per
            template name).
        command_timeout: Seconds before ``git init`` / install are killed.
    """

    package_manager: PackageManager = Field(default=PackageManager.NPM)
    templates_dir: Path = Field(default=DEFAULT_TEMPLATES_DIR)
    command_timeout: int = Field(default=600, ge=1, description="Subprocess timeout in seconds")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            npm_config_user_agent, FEROD_PACKAGE_MANAGER, FEROD_TEMPLATES_DIR,
            FEROD_COMMAND_TIMEOUT.

        ``FEROD_PACKAGE_MANAGER`` wins over the user agent when it names a
        known package manager.
        """
        env = os.environ if environ is None else environ

        package_manager = detect_package_manager(env.get("npm_config_user_agent"))
        override = env.get("FEROD_PACKAGE_MANAGER", "").strip().lower()
        if override in {pm.value for pm in PackageManager}:
            package_manager = PackageManager(override)

        kwargs: dict[str, object] = {"package_manager": package_manager}
        if env.get("FEROD_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(env["FEROD_TEMPLATES_DIR"])
        if env.get("FEROD_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(env["FEROD_COMMAND_TIMEOUT"])

        return cls(**kwargs)
