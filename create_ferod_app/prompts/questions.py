"""Interactive question flow.

The questions are a flat, ordered list. Visibility is declared up front: a
question's ``depends_on`` names the earlier boolean questions that must have
been answered ``True`` before it is asked. Questions already answered on the
command line are never asked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from rich.prompt import Confirm, Prompt

from create_ferod_app.prompts.answers import (
    DEFAULT_DATABASE,
    DEFAULT_PROJECT_NAME,
    Answers,
    DatabaseType,
    default_answers,
    default_database_uri,
)
from create_ferod_app.utils import console

QuestionKind = Literal["text", "confirm", "choice"]


@dataclass(frozen=True)
class Question:
    """One prompt, keyed by the ``Answers`` field it fills."""

    name: str
    kind: QuestionKind
    message: str
    default: Any = None
    choices: tuple[str, ...] = ()
    depends_on: tuple[str, ...] = field(default_factory=tuple)


QUESTIONS: tuple[Question, ...] = (
    Question("name", "text", "What is the name of your app?", DEFAULT_PROJECT_NAME),
    Question("git_repo", "confirm", "Initialize a git repository?", True),
    Question("install", "confirm", "Install dependencies?", True),
    Question("prisma", "confirm", "Use Prisma?", True),
    Question(
        "database_type",
        "choice",
        "What database do you want to use?",
        DEFAULT_DATABASE.value,
        choices=tuple(db.value for db in DatabaseType),
        depends_on=("prisma",),
    ),
    # Default is derived from the name and database chosen above.
    Question("database_uri", "text", "What is the database URI?", depends_on=("prisma",)),
    Question("typescript", "confirm", "Use TypeScript?", True),
    Question("help_command", "confirm", "Add a help command?", True),
    Question("dashboard", "confirm", "Add a dashboard?", True),
    Question("eslint_and_prettier", "confirm", "Use ESLint and Prettier?", True),
)


def is_visible(question: Question, answered: dict[str, Any]) -> bool:
    """Return ``True`` when every dependency of *question* was answered truthy."""
    return all(answered.get(dep) for dep in question.depends_on)


def _question_default(question: Question, answered: dict[str, Any]) -> Any:
    if question.name == "database_uri":
        name = answered.get("name") or DEFAULT_PROJECT_NAME
        return default_database_uri(name, answered.get("database_type"))
    return question.default


def ask(question: Question, answered: dict[str, Any]) -> Any:
    """Prompt for a single question and return the typed value.

    ``KeyboardInterrupt`` and ``EOFError`` raised by the prompt propagate to
    the caller.
    """
    default = _question_default(question, answered)

    if question.kind == "confirm":
        return Confirm.ask(question.message, default=default, console=console)

    if question.kind == "choice":
        value = Prompt.ask(
            question.message,
            choices=list(question.choices),
            default=default,
            console=console,
        )
        return DatabaseType(value)

    while True:
        value = Prompt.ask(question.message, default=default, console=console)
        if value and value.strip():
            return value.strip()
        console.print("[prompt.invalid]Please enter a value")


def collect_answers(
    name: str | None = None,
    *,
    skip_prompts: bool = False,
    skip_git: bool = False,
    skip_install: bool = False,
    questions: tuple[Question, ...] = QUESTIONS,
) -> Answers:
    """Resolve the scaffold choices.

    Args:
        name: Project name given on the command line, if any. A blank name
            is treated as not given and is prompted for.
        skip_prompts: Use ``default_answers`` without asking anything.
        skip_git: ``--no-git`` was passed; ``git_repo`` is ``False``.
        skip_install: ``--no-install`` was passed; ``install`` is ``False``.
        questions: The question list, in asking order.

    Returns:
        A frozen ``Answers`` instance.
    """
    if skip_prompts:
        return default_answers(name, skip_git=skip_git, skip_install=skip_install)

    preset: dict[str, Any] = {}
    if name and name.strip():
        preset["name"] = name.strip()
    if skip_git:
        preset["git_repo"] = False
    if skip_install:
        preset["install"] = False

    answered: dict[str, Any] = {}
    for question in questions:
        if question.name in preset:
            answered[question.name] = preset[question.name]
        elif is_visible(question, answered):
            answered[question.name] = ask(question, answered)

    return Answers(**answered)
