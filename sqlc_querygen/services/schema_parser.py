"""DDL parsing services.

Only the dialect written by the migration generator is understood:
``CREATE TABLE "schema"."table" (`` blocks closed by ``);`` and single-line
``CREATE UNIQUE INDEX "name" ON "schema"."table"("col", ...);`` statements.
"""

import re
import logging
from pathlib import Path
from typing import Iterator, Optional

from sqlc_querygen.models.schema import (
    Column,
    Table,
    UniqueConstraint,
    DEFAULT_PLACEHOLDER,
)
from sqlc_querygen.utils.exceptions import SchemaParseError, SchemaReadError

logger = logging.getLogger("sqlc_querygen.parser")

CREATE_TABLE_RE = re.compile(r'CREATE TABLE "([^"]+)"\.?"([^"]+)" \(')
PRIMARY_KEY_RE = re.compile(r"PRIMARY KEY \(([^)]+)\)")
UNIQUE_INDEX_RE = re.compile(
    r'CREATE UNIQUE INDEX "([^"]+)" ON "([^"]+)"\.?"([^"]+)"\s*\(([^)]+)\);?'
)

_DEFAULT_TERMINATORS = (",", " ", "\t", "\n")


def _split_names(names: str) -> list[str]:
    return [name.strip().strip('"') for name in names.split(",")]


class SchemaParser:
    """Line-oriented two-pass parser for migration DDL."""

    def parse_schema(self, path: str | Path) -> list[Table]:
        """Parse a schema file into tables.

        Args:
            path: The migration file to read.

        Returns:
            The tables in declaration order.

        Raises:
            SchemaReadError: The file cannot be opened or decoded.
            SchemaParseError: A CREATE TABLE header is malformed.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaReadError(str(path), str(e)) from e

        tables = self.parse_text(text)
        logger.info("Parsed %d tables from %s", len(tables), path)
        return tables

    def parse_text(self, text: str) -> list[Table]:
        """Parse DDL text into tables.

        Args:
            text: The DDL source.

        Returns:
            The tables in declaration order, with unique constraints attached.
        """
        lines = text.splitlines()
        tables = self._parse_tables(lines)
        self._parse_unique_indexes(lines, tables)
        return tables

    def _parse_tables(self, lines: list[str]) -> list[Table]:
        tables = []
        numbered: Iterator[tuple[int, str]] = enumerate(lines, start=1)

        for line_number, raw in numbered:
            line = raw.strip()
            if line.startswith("CREATE TABLE"):
                tables.append(self._parse_table(line, line_number, numbered))

        return tables

    def _parse_table(
        self,
        header: str,
        line_number: int,
        numbered: Iterator[tuple[int, str]]
    ) -> Table:
        match = CREATE_TABLE_RE.search(header)
        if not match:
            raise SchemaParseError(header, line_number)

        table = Table(schema=match.group(1), name=match.group(2))

        for body_number, raw in numbered:
            line = raw.strip()

            if line.startswith(");"):
                break

            if line.startswith("CONSTRAINT"):
                table.constraints.append(line)
                self._parse_constraint(line, table)
                continue

            column = self._parse_column(line)
            if column is not None:
                table.columns.append(column)
                if column.is_primary_key:
                    table.add_primary_key(column)
            elif line:
                logger.warning(
                    "Skipping unrecognized line %d in %s: %s",
                    body_number, table.qualified_name, line
                )

        return table

    def _parse_column(self, line: str) -> Optional[Column]:
        """Parse a quoted column declaration.

        Args:
            line: A trimmed table-body line.

        Returns:
            The column, or None when the line is not a column declaration.
        """
        line = line.removesuffix(",")
        if not line.startswith('"'):
            return None

        parts = line.split()
        if len(parts) < 2:
            return None

        name = parts[0].strip('"')
        col_type = parts[1]
        attributes = " ".join(parts[2:])
        upper = attributes.upper()

        return Column(
            name=name,
            type=col_type,
            is_nullable="NOT NULL" not in upper,
            is_primary_key="PRIMARY KEY" in upper,
            is_serial="SERIAL" in col_type.upper(),
            default_value=self._parse_default(attributes),
        )

    def _parse_default(self, attributes: str) -> str:
        start = attributes.upper().find("DEFAULT")
        if start == -1:
            return ""

        rest = attributes[start + len("DEFAULT"):].strip()
        end = len(rest)
        for terminator in _DEFAULT_TERMINATORS:
            idx = rest.find(terminator)
            if idx != -1 and idx < end:
                end = idx

        value = rest[:end].strip()
        # Present but not isolatable.
        return value or DEFAULT_PLACEHOLDER

    def _parse_constraint(self, line: str, table: Table) -> None:
        # CONSTRAINT "cart_item_pkey" PRIMARY KEY ("id")
        match = PRIMARY_KEY_RE.search(line)
        if not match:
            return

        for name in _split_names(match.group(1)):
            col = table.column(name)
            if col is None:
                logger.warning(
                    "Primary key column %s not declared in %s",
                    name, table.qualified_name
                )
                continue
            table.add_primary_key(col)

    def _parse_unique_indexes(self, lines: list[str], tables: list[Table]) -> None:
        table_map = {table.qualified_name: table for table in tables}

        for line_number, raw in enumerate(lines, start=1):
            line = raw.strip()
            if line.startswith("CREATE UNIQUE INDEX"):
                self._parse_unique_index(line, line_number, table_map)

    def _parse_unique_index(
        self,
        line: str,
        line_number: int,
        table_map: dict[str, Table]
    ) -> None:
        match = UNIQUE_INDEX_RE.search(line)
        if not match:
            logger.warning("Ignoring malformed unique index at line %d: %s", line_number, line)
            return

        index_name, schema, table_name, columns = match.groups()
        table = table_map.get(f"{schema}.{table_name}")
        if table is None:
            logger.debug(
                "Unique index %s targets unknown table %s.%s",
                index_name, schema, table_name
            )
            return

        names = _split_names(columns)
        missing = [name for name in names if table.column(name) is None]
        if missing:
            logger.warning(
                "Dropping unique index %s on %s: undeclared columns %s",
                index_name, table.qualified_name, ", ".join(missing)
            )
            return

        table.unique_constraints.append(UniqueConstraint(name=index_name, columns=names))
