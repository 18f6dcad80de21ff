"""Data models for sqlc-querygen."""

from sqlc_querygen.models.schema import (
    ElementType,
    Column,
    UniqueConstraint,
    Table,
    classify_element_type,
    is_range_type,
)

__all__ = [
    "ElementType",
    "Column",
    "UniqueConstraint",
    "Table",
    "classify_element_type",
    "is_range_type",
]
