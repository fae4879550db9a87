"""Rendering of the docker-compose and ``.env`` files."""

from __future__ import annotations

from string import Template

from jotl.config.settings import PostgresSettings
from jotl.core.infrastructure.storage import Storage

COMPOSE_TEMPLATE = "docker-compose.yml.tmpl"
ENV_TEMPLATE = "env.tmpl"


def render_template(storage: Storage, template_name: str, fields: dict[str, str]) -> str:
    """Substitute ``fields`` into a bundled template.

    Args:
        storage: Storage used to read the template.
        template_name: Bundled template file name.
        fields: Values for every ``$placeholder`` in the template.

    Returns:
        Rendered text.

    Raises:
        KeyError: If the template references a field not in ``fields``.
    """
    return Template(storage.read_template(template_name)).substitute(fields)


def compose_fields(postgres: PostgresSettings) -> dict[str, str]:
    """Template fields for the postgres service definition."""
    return {
        "container_name": postgres.container_name,
        "db_name": postgres.db_name,
        "user": postgres.user,
        "password": postgres.password,
        "port": str(postgres.port),
        "volume": postgres.volume,
    }


def render_compose(storage: Storage, postgres: PostgresSettings) -> str:
    """Render the docker-compose file for a local postgres container."""
    return render_template(storage, COMPOSE_TEMPLATE, compose_fields(postgres))


def render_env(storage: Storage, *, connection_string: str, app_name: str) -> str:
    """Render the ``.env`` file read by the jotl runtime."""
    return render_template(
        storage,
        ENV_TEMPLATE,
        {"connection_string": connection_string, "app_name": app_name},
    )
