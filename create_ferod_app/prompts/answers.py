"""The resolved scaffold choices and their defaults."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROJECT_NAME = "my-app"


class DatabaseType(str, Enum):
    """Databases with a bundled Prisma schema."""

    MYSQL = "MySQL"
    MONGODB = "MongoDB"
    SQLITE = "SQLite"
    POSTGRESQL = "PostgreSQL"
    SQLSERVER = "SQLServer"
    COCKROACHDB = "CockroachDB"

    @property
    def schema_name(self) -> str:
        """File name of the bundled schema, e.g. ``postgresql.prisma``."""
        return f"{self.value.lower()}.prisma"


DEFAULT_DATABASE = DatabaseType.MONGODB

_URI_FORMATS: dict[DatabaseType, str] = {
    DatabaseType.MYSQL: "mysql://root@localhost:3306/{name}",
    DatabaseType.MONGODB: "mongodb://localhost:27017/{name}",
    DatabaseType.SQLITE: "file:./{name}.db",
    DatabaseType.POSTGRESQL: "postgresql://postgres@localhost:5432/{name}",
    DatabaseType.SQLSERVER: "sqlserver://localhost:1433;database={name};trustServerCertificate=true",
    DatabaseType.COCKROACHDB: "postgresql://root@localhost:26257/{name}?sslmode=disable",
}


def default_database_uri(name: str, database_type: DatabaseType | None = None) -> str:
    """Local development connection URI for *database_type* named after the project."""
    return _URI_FORMATS[database_type or DEFAULT_DATABASE].format(name=name)


class Answers(BaseModel):
    """Every choice that drives template selection. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project name, also the directory name")
    git_repo: bool = True
    install: bool = True
    prisma: bool = Field(default=True, description="Add the Prisma database layer")
    database_type: DatabaseType | None = None
    database_uri: str | None = None
    typescript: bool = True
    help_command: bool = True
    dashboard: bool = True
    eslint_and_prettier: bool = True

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        return value

    @property
    def resolved_database(self) -> DatabaseType:
        """The selected database, falling back to the default type."""
        return self.database_type or DEFAULT_DATABASE

    @property
    def resolved_database_uri(self) -> str:
        return self.database_uri or default_database_uri(self.name, self.resolved_database)


def default_answers(
    name: str | None = None,
    *,
    skip_git: bool = False,
    skip_install: bool = False,
) -> Answers:
    """Answers used with ``--yes``: every feature on, MongoDB, default name.

    A blank *name* counts as not given.
    """
    project_name = (name or "").strip() or DEFAULT_PROJECT_NAME
    return Answers(
        name=project_name,
        git_repo=not skip_git,
        install=not skip_install,
        prisma=True,
        database_type=DEFAULT_DATABASE,
        database_uri=default_database_uri(project_name, DEFAULT_DATABASE),
        typescript=True,
        help_command=True,
        dashboard=True,
        eslint_and_prettier=True,
    )
