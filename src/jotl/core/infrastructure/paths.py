"""Well-known paths of a jotl project, derived from its working directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CONFIG_FILENAME = "config.yaml"
ENV_FILENAME = ".env"
COMPOSE_FILENAME = "docker-compose.yml"
DB_DIRNAME = "db"
DB_FILENAME = "jotl.db"
GITIGNORE_FILENAME = ".gitignore"


@dataclass(frozen=True)
class ProjectPaths:
    """Paths of the files ``jotl init`` creates."""

    working_directory: Path
    project_dir_name: str = "jotl"

    @property
    def project_dir(self) -> Path:
        return self.working_directory / self.project_dir_name

    @property
    def config_file(self) -> Path:
        return self.project_dir / CONFIG_FILENAME

    @property
    def env_file(self) -> Path:
        return self.project_dir / ENV_FILENAME

    @property
    def compose_file(self) -> Path:
        return self.project_dir / COMPOSE_FILENAME

    @property
    def db_dir(self) -> Path:
        return self.project_dir / DB_DIRNAME

    @property
    def db_file(self) -> Path:
        return self.db_dir / DB_FILENAME

    @property
    def gitignore(self) -> Path:
        return self.working_directory / GITIGNORE_FILENAME

    @property
    def ignore_entry(self) -> str:
        """Gitignore line excluding the project directory."""
        return f"/{self.project_dir_name}"

    def relative(self, path: Path) -> str:
        """Return ``path`` relative to the working directory, posix style."""
        return path.relative_to(self.working_directory).as_posix()
