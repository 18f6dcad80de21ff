"""Query generation orchestration."""

import logging
from pathlib import Path

from sqlc_querygen.models.schema import Table
from sqlc_querygen.services.schema_parser import SchemaParser
from sqlc_querygen.services.template_manager import TemplateManager
from sqlc_querygen.utils.constants import (
    BANNER_RULE,
    QUERY_KINDS,
    SINGLE_FILE_HEADER,
    SINGLE_FILE_NAME,
)
from sqlc_querygen.utils.exceptions import OutputWriteError

logger = logging.getLogger("sqlc_querygen.generator")


class QueryGenerator:
    """Turns a migration file into sqlc query files."""

    def __init__(self, template_dir: str | Path):
        """Initialize the generator.

        Args:
            template_dir: Directory holding the query templates.
        """
        self.template_dir = Path(template_dir)
        self.templates = TemplateManager(self.template_dir)

    def generate_from_schema(
        self,
        schema_file: str | Path,
        output_dir: str | Path,
        table_filter: str = "",
        single_file: bool = False
    ) -> list[Path]:
        """Generate query files for the tables of a schema file.

        Every table is rendered before anything is written, so a template
        failure leaves the output directory untouched. A write failure can
        still leave files written earlier in the same run.

        Args:
            schema_file: The migration file to parse.
            output_dir: Directory receiving the generated files.
            table_filter: ``table`` or ``schema.table`` to restrict output to.
            single_file: Write every table into one ``queries.sql``. Ignored
                when ``table_filter`` is set.

        Returns:
            The written files, in write order.

        Raises:
            QueryGenError: Parsing, template loading, rendering or writing
                failed.
        """
        tables = SchemaParser().parse_schema(schema_file)
        self.templates.load_templates()

        output = Path(output_dir)
        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(output), str(e)) from e

        selected = self.filter_tables(tables, table_filter)

        if single_file and not table_filter:
            staged = [(output / SINGLE_FILE_NAME, self.render_all_tables(selected))]
        else:
            staged = [
                (output / f"{table.safe_file_name}.sql", self.render_table(table))
                for table in selected
            ]

        return self._write_files(staged)

    def filter_tables(self, tables: list[Table], table_filter: str) -> list[Table]:
        """Keep the tables matching a ``table`` or ``schema.table`` filter.

        Args:
            tables: Parsed tables.
            table_filter: The filter; empty keeps every table.

        Returns:
            The matching tables in their original order.
        """
        if not table_filter:
            return list(tables)

        selected = [table for table in tables if table.matches(table_filter)]
        if not selected:
            logger.warning("No table matches %s", table_filter)
        return selected

    def render_queries(self, table: Table) -> list[str]:
        """Render every loaded query kind for a table, skipping empty ones."""
        queries = []
        for kind in QUERY_KINDS:
            query = self.templates.generate_query(kind, table)
            if query:
                queries.append(query)
        return queries

    def render_table(self, table: Table) -> str:
        """Render the contents of one per-table query file."""
        content = "\n\n".join(self.render_queries(table))
        logger.info("Generated queries for table: %s", table.qualified_name)
        return content

    def render_all_tables(self, tables: list[Table]) -> str:
        """Render the contents of the single combined query file."""
        sections = ["\n".join(SINGLE_FILE_HEADER)]

        for table in tables:
            banner = "\n".join([
                BANNER_RULE,
                f"-- Queries for table: {table.qualified_name}",
                BANNER_RULE,
            ])
            sections.append("\n\n".join([banner] + self.render_queries(table)))
            logger.info("Generated queries for table: %s", table.qualified_name)

        return "\n\n".join(sections)

    def _write_files(self, staged: list[tuple[Path, str]]) -> list[Path]:
        written = []
        for path, content in staged:
            try:
                path.write_text(content + "\n", encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(path), str(e)) from e
            logger.debug("Wrote %s", path)
            written.append(path)
        return written
