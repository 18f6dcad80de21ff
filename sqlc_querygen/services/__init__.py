"""Service modules for sqlc-querygen."""

from sqlc_querygen.services.schema_parser import SchemaParser
from sqlc_querygen.services.template_manager import TemplateManager
from sqlc_querygen.services.query_generator import QueryGenerator
from sqlc_querygen.services.template_funcs import (
    generate_where_conditions,
    generate_filter_conditions,
    get_template_funcs,
)

__all__ = [
    # Parsing
    "SchemaParser",
    # Templates
    "TemplateManager",
    "generate_where_conditions",
    "generate_filter_conditions",
    "get_template_funcs",
    # Orchestration
    "QueryGenerator",
]
