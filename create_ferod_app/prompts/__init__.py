"""Answer collection for create-ferod-app.

Quick usage::

    from create_ferod_app.prompts import collect_answers

    answers = collect_answers("my-bot", skip_prompts=True)
"""

from create_ferod_app.prompts.answers import (
    DEFAULT_DATABASE,
    DEFAULT_PROJECT_NAME,
    Answers,
    DatabaseType,
    default_answers,
    default_database_uri,
)
from create_ferod_app.prompts.questions import QUESTIONS, Question, collect_answers

__all__ = [
    "DEFAULT_DATABASE",
    "DEFAULT_PROJECT_NAME",
    "QUESTIONS",
    "Answers",
    "DatabaseType",
    "Question",
    "collect_answers",
    "default_answers",
    "default_database_uri",
]
