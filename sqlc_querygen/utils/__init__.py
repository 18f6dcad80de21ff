"""Utility modules for sqlc-querygen."""

from sqlc_querygen.utils.constants import ErrorCode, ERROR_MESSAGES, QUERY_KINDS
from sqlc_querygen.utils.exceptions import (
    QueryGenError,
    SchemaReadError,
    SchemaParseError,
    TemplateLoadError,
    TemplateRenderError,
    OutputWriteError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "QUERY_KINDS",
    "QueryGenError",
    "SchemaReadError",
    "SchemaParseError",
    "TemplateLoadError",
    "TemplateRenderError",
    "OutputWriteError",
]
