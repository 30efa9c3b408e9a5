"""create-ferod-app command line interface.

Usage::

    create-ferod-app
    create-ferod-app my-bot --yes
    python -m create_ferod_app my-bot --no-git --no-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from create_ferod_app import __version__
from create_ferod_app.config import Config
from create_ferod_app.prompts import Answers, collect_answers
from create_ferod_app.scaffolder import ProjectScaffolder, ScaffoldResult
from create_ferod_app.utils import (
    console,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_ABORTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-ferod-app",
        description="Create a new Ferod Discord bot project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-ferod-app\n"
            "  create-ferod-app my-bot --yes\n"
            "  create-ferod-app my-bot --no-git --no-install\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name, also used as the directory name",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip the prompts and use the defaults",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Do not initialize a git repository",
    )
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Do not install dependencies",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def create_app(answers: Answers, config: Config, cwd: Path) -> ScaffoldResult:
    """Scaffold ``<cwd>/<answers.name>`` and wait for the post-scaffold commands."""
    scaffolder = ProjectScaffolder(config)
    result = await scaffolder.scaffold(answers, cwd / answers.name)
    if not result.created:
        return result

    actions = await result.wait()

    summary = {
        "Project": str(result.project_dir),
        "Templates": ", ".join(result.templates),
        "Package manager": config.package_manager.value,
    }
    for action in actions:
        summary[action.name] = action.summary()
    print_summary_table(summary, title="create-ferod-app")

    failed = [action for action in actions if not action.ok]
    if failed:
        print_warning(
            "Some post-scaffold steps failed; the project files are complete. "
            "Re-run them manually inside the project directory."
        )
    else:
        print_success(f"Created {answers.name} in {result.project_dir}")
    return result


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``create-ferod-app`` and ``python -m create_ferod_app``."""
    args = build_parser().parse_args(argv)
    config = Config.from_env()

    try:
        answers = collect_answers(
            args.name,
            skip_prompts=args.yes,
            skip_git=args.no_git,
            skip_install=args.no_install,
        )
    except (KeyboardInterrupt, EOFError):
        console.print()
        console.print("[bold red]Aborted.[/bold red]")
        return EXIT_ABORTED

    asyncio.run(create_app(answers, config, Path.cwd()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
