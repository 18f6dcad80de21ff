"""Helper functions exposed to query templates.

Parameter markers are emitted in sqlc syntax (``sqlc.arg``, ``sqlc.narg``,
``sqlc.slice``) and are part of the generated output contract.
"""

import re
from typing import Any, Callable, Sequence

from sqlc_querygen.models.schema import Column, Table


def _upper_first(s: str) -> str:
    return s[:1].upper() + s[1:]


def camel_case(s: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    parts = s.split("_")
    return parts[0].lower() + "".join(_upper_first(part) for part in parts[1:])


def pascal_case(s: str) -> str:
    """Convert ``snake_case`` to ``PascalCase``."""
    return "".join(_upper_first(part) for part in s.split("_"))


def sqlc_arg(name: str) -> str:
    return f"sqlc.arg('{name}')"


def sqlc_narg(name: str) -> str:
    return f"sqlc.narg('{name}')"


def sqlc_slice(name: str) -> str:
    return f"sqlc.slice('{name}')"


def increment(i: int) -> int:
    return i + 1


_GO_VERB_RE = re.compile(r"(?<!%)%v")


def title_case(s: str) -> str:
    """Upper-case the first letter of each space-separated word, leaving the rest."""
    return " ".join(_upper_first(word) for word in s.split(" "))


def printf(fmt: str, *args: Any) -> str:
    """Printf-style formatting; Go's ``%v`` verb is accepted as ``%s``."""
    return _GO_VERB_RE.sub("%s", fmt) % args


def join(items: Sequence[str], separator: str) -> str:
    return separator.join(items)


def quoted_name(col: Column) -> str:
    return col.quoted_name


def join_quoted_columns(columns: Sequence[Column], separator: str) -> str:
    return separator.join(col.quoted_name for col in columns)


def get_type(col: Column) -> str:
    return col.element_type.value


def is_range_filterable(col: Column) -> bool:
    return col.is_range_filterable


def generate_where_conditions(table: Table) -> str:
    """Build a lookup clause matching any identifier constraint.

    Each identifier constraint (primary key first, then unique constraints)
    becomes an AND group; the groups are OR-joined so one query can find a
    row by any of its keys.

    Args:
        table: The table to build the clause for.

    Returns:
        The WHERE clause.
    """
    constraints = table.identifier_constraints
    if not constraints:
        return 'WHERE "id" = $1'

    groups = []
    for constraint in constraints:
        parts = [f"{col.quoted_name} = {sqlc_narg(col.name)}" for col in constraint]
        groups.append(f"({' AND '.join(parts)})")

    return "WHERE " + " OR ".join(groups)


def _array_param(col: Column) -> str:
    return f"{sqlc_narg(col.name)}::{get_type(col)}[]"


def generate_filter_conditions(table: Table) -> str:
    """Build the optional-filter clause for list queries.

    Every filterable column accepts an array of values, and range-filterable
    columns also accept ``<col>_from`` / ``<col>_to`` bounds. A NULL parameter
    disables its clause.

    Args:
        table: The table to build the clause for.

    Returns:
        The WHERE block, or an empty string when no column is filterable.
    """
    clauses = []
    for col in table.filterable_columns:
        name = col.quoted_name
        values = _array_param(col)
        clauses.append(f"({name} = ANY({values}) OR {values} IS NULL)")

        if col.is_range_filterable:
            lower = sqlc_narg(f"{col.name}_from")
            upper = sqlc_narg(f"{col.name}_to")
            clauses.append(f"({name} >= {lower} OR {lower} IS NULL)")
            clauses.append(f"({name} <= {upper} OR {upper} IS NULL)")

    if not clauses:
        return ""

    return "WHERE (\n    " + "\n    AND ".join(clauses) + "\n)"


def get_template_funcs() -> dict[str, Callable[..., Any]]:
    """Return the helper set under the names templates use."""
    return {
        "join": join,
        "title": title_case,
        "lower": str.lower,
        "upper": str.upper,
        "printf": printf,
        "camelCase": camel_case,
        "pascalCase": pascal_case,
        "sqlcArg": sqlc_arg,
        "sqlcNarg": sqlc_narg,
        "sqlcSlice": sqlc_slice,
        "increment": increment,
        "quotedName": quoted_name,
        "joinQuotedColumns": join_quoted_columns,
        "generateWhereConditions": generate_where_conditions,
        "getType": get_type,
        "isRangeFilterable": is_range_filterable,
        "generateFilterConditions": generate_filter_conditions,
    }
