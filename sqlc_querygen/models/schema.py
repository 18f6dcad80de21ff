"""Schema-related data models."""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ElementType(str, Enum):
    """Canonical element type of a column, used to type array parameters."""

    INTEGER = "integer"
    BIGINT = "bigint"
    SMALLINT = "smallint"
    TEXT = "text"
    UUID = "uuid"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TIMESTAMP = "timestamp"
    DATE = "date"


# Matched against the base type name: unquoted, upper case, no "(n)" suffix.
_ELEMENT_TYPE_NAMES: dict[ElementType, frozenset[str]] = {
    ElementType.BIGINT: frozenset({"BIGINT", "INT8", "BIGSERIAL", "SERIAL8"}),
    ElementType.SMALLINT: frozenset({"SMALLINT", "INT2", "SMALLSERIAL", "SERIAL2"}),
    ElementType.INTEGER: frozenset({"INT", "INT4", "INTEGER", "SERIAL", "SERIAL4"}),
    ElementType.UUID: frozenset({"UUID"}),
    ElementType.BOOLEAN: frozenset({"BOOL", "BOOLEAN"}),
    ElementType.NUMERIC: frozenset({
        "NUMERIC", "DECIMAL", "REAL", "DOUBLE", "FLOAT", "FLOAT4", "FLOAT8", "MONEY",
    }),
    ElementType.TIMESTAMP: frozenset({"TIMESTAMP", "TIMESTAMPTZ"}),
    ElementType.DATE: frozenset({"DATE"}),
}

RANGE_ELEMENT_TYPES: frozenset[ElementType] = frozenset({
    ElementType.INTEGER,
    ElementType.BIGINT,
    ElementType.SMALLINT,
    ElementType.NUMERIC,
    ElementType.TIMESTAMP,
    ElementType.DATE,
})

# Temporal types without an element type of their own.
RANGE_EXTRA_TYPE_NAMES: frozenset[str] = frozenset({"TIME", "TIMETZ", "INTERVAL"})

DEFAULT_PLACEHOLDER = "DEFAULT"

_TYPE_ARGS_RE = re.compile(r"\(.*\)")
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


def base_type_name(sql_type: str) -> str:
    """Normalize a raw SQL type for classification.

    ``TIMESTAMP(3)`` becomes ``TIMESTAMP`` and ``"shop"."status"`` becomes
    ``SHOP.STATUS``, so user-defined types never match a built-in name.
    """
    return _TYPE_ARGS_RE.sub("", sql_type).replace('"', "").strip().upper()


def classify_element_type(sql_type: str) -> ElementType:
    """Map a raw SQL type to its canonical element type.

    Args:
        sql_type: The column type as written in the DDL, e.g. ``TIMESTAMP(3)``.

    Returns:
        The matching element type, ``ElementType.TEXT`` when nothing matches.
    """
    base = base_type_name(sql_type)
    for element_type, names in _ELEMENT_TYPE_NAMES.items():
        if base in names:
            return element_type
    return ElementType.TEXT


def is_range_type(sql_type: str) -> bool:
    """Check whether a raw SQL type is numeric or temporal."""
    if classify_element_type(sql_type) in RANGE_ELEMENT_TYPES:
        return True
    return base_type_name(sql_type) in RANGE_EXTRA_TYPE_NAMES


def is_complete_literal(value: str) -> bool:
    """Check that a default literal has balanced quotes and brackets.

    The parser cuts defaults at the first space or comma, so ``'new note'``
    arrives as ``'new`` and must not be spliced into SQL.
    """
    stack: list[str] = []
    quote: Optional[str] = None
    for char in value:
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char in "([{":
            stack.append(char)
        elif char in _BRACKET_PAIRS:
            if not stack or stack.pop() != _BRACKET_PAIRS[char]:
                return False
    return quote is None and not stack


class Column(BaseModel):
    """One declared table column."""

    name: str
    type: str
    is_nullable: bool = True
    is_primary_key: bool = False
    is_serial: bool = False
    default_value: str = ""
    element_type: ElementType = ElementType.TEXT
    is_range_filterable: bool = False

    @model_validator(mode="after")
    def _classify_type(self) -> "Column":
        self.element_type = classify_element_type(self.type)
        self.is_range_filterable = is_range_type(self.type)
        return self

    @property
    def quoted_name(self) -> str:
        """Column name wrapped in double quotes."""
        return f'"{self.name}"'

    @property
    def has_literal_default(self) -> bool:
        """True when the DDL default literal was isolated whole."""
        return (
            bool(self.default_value)
            and self.default_value != DEFAULT_PLACEHOLDER
            and is_complete_literal(self.default_value)
        )


class UniqueConstraint(BaseModel):
    """A unique index matched to a table."""

    name: str
    columns: list[str]


class Table(BaseModel):
    """Table structure extracted from DDL."""

    schema_name: str = Field(alias="schema")
    name: str
    columns: list[Column] = Field(default_factory=list)
    primary_key: list[Column] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)
    unique_constraints: list[UniqueConstraint] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def column(self, name: str) -> Optional[Column]:
        """Find a column by exact name.

        Args:
            name: The column name.

        Returns:
            The column, or None when the table does not declare it.
        """
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def add_primary_key(self, col: Column) -> None:
        """Mark a column as part of the primary key, keeping listed order."""
        col.is_primary_key = True
        if not any(pk is col for pk in self.primary_key):
            self.primary_key.append(col)

    def matches(self, table_filter: str) -> bool:
        """Check a ``table`` or ``schema.table`` filter against this table."""
        return table_filter in (self.name, self.qualified_name)

    @property
    def full_table_name(self) -> str:
        return f'"{self.schema_name}"."{self.name}"'

    @property
    def qualified_name(self) -> str:
        return f"{self.schema_name}.{self.name}"

    @property
    def safe_file_name(self) -> str:
        return f"{self.schema_name}_{self.name}"

    @property
    def primary_key_columns(self) -> list[Column]:
        return self.primary_key

    @property
    def non_serial_columns(self) -> list[Column]:
        return [col for col in self.columns if not col.is_serial]

    @property
    def updatable_columns(self) -> list[Column]:
        return [
            col for col in self.columns
            if not col.is_serial and not col.is_primary_key
        ]

    @property
    def non_serial_non_default_columns(self) -> list[Column]:
        return [
            col for col in self.columns
            if not col.is_serial and not col.default_value
        ]

    @property
    def filterable_columns(self) -> list[Column]:
        """Columns usable in list filters.

        Free-text columns are left out, except one literally named ``code``.
        """
        return [
            col for col in self.columns
            if "text" not in col.type.lower() or col.name == "code"
        ]

    @property
    def has_date_columns(self) -> bool:
        return any("date_" in col.name for col in self.columns)

    @property
    def identifier_constraints(self) -> list[list[Column]]:
        """Every column set that identifies a row.

        The primary key comes first, followed by each unique constraint in
        declaration order. A unique constraint naming an undeclared column is
        skipped.
        """
        constraints: list[list[Column]] = []
        if self.primary_key:
            constraints.append(list(self.primary_key))

        for unique in self.unique_constraints:
            cols = [self.column(name) for name in unique.columns]
            if all(col is not None for col in cols):
                constraints.append(cols)

        return constraints
