"""Template loading and query rendering."""

import logging
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from sqlc_querygen.config import Settings
from sqlc_querygen.models.schema import Table
from sqlc_querygen.services.template_funcs import get_template_funcs
from sqlc_querygen.utils.constants import QUERY_KINDS, TEMPLATE_SUFFIX
from sqlc_querygen.utils.exceptions import TemplateLoadError, TemplateRenderError

logger = logging.getLogger("sqlc_querygen.templates")


class TemplateManager:
    """Loads the per-kind query templates and renders them for a table."""

    def __init__(self, template_dir: str | Path):
        """Initialize the template manager.

        Args:
            template_dir: Directory holding ``{kind}.sql.tmpl`` files.
        """
        self.template_dir = Path(template_dir)
        self.templates: dict[str, Template] = {}
        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        self._env.globals.update(get_template_funcs())

    @property
    def loaded_kinds(self) -> list[str]:
        return [kind for kind in QUERY_KINDS if kind in self.templates]

    def load_templates(self) -> None:
        """Load every query template present in the template directory.

        The directory is created when missing. A kind without a template
        file is left out rather than treated as an error.

        Raises:
            TemplateLoadError: The directory cannot be created or a template
                has invalid syntax.
        """
        try:
            self.template_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TemplateLoadError(str(self.template_dir), str(e)) from e

        self.templates.clear()
        for kind in QUERY_KINDS:
            filename = kind + TEMPLATE_SUFFIX
            if not (self.template_dir / filename).is_file():
                logger.debug("No %s template in %s, skipping", kind, self.template_dir)
                continue

            try:
                self.templates[kind] = self._env.get_template(filename)
            except TemplateError as e:
                raise TemplateLoadError(filename, str(e)) from e

        if not self.templates:
            logger.warning(
                "No query templates found in %s; generated files will be empty. "
                "The packaged templates are in %s",
                self.template_dir, Settings.bundled_template_dir()
            )
            return

        logger.info(
            "Loaded %d templates from %s: %s",
            len(self.templates), self.template_dir, ", ".join(self.loaded_kinds)
        )

    def generate_query(self, kind: str, table: Table) -> str:
        """Render one query kind for a table.

        Args:
            kind: One of ``get``, ``list``, ``create``, ``update``, ``delete``.
            table: The table passed to the template as ``table``.

        Returns:
            The rendered query, or an empty string when no template was
            loaded for the kind or the template rendered only whitespace.

        Raises:
            TemplateRenderError: The template or one of its helpers failed.
        """
        template = self.templates.get(kind)
        if template is None:
            return ""

        try:
            rendered = template.render(table=table)
        except Exception as e:
            raise TemplateRenderError(kind, table.qualified_name, str(e)) from e

        return rendered.strip()
