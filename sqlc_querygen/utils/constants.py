"""Constants for sqlc-querygen."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    SCHEMA_READ_FAILED = "ERR_001"
    SCHEMA_PARSE_FAILED = "ERR_002"
    TEMPLATE_LOAD_FAILED = "ERR_003"
    TEMPLATE_RENDER_FAILED = "ERR_004"
    OUTPUT_WRITE_FAILED = "ERR_005"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.SCHEMA_READ_FAILED: "Unable to read the schema file",
    ErrorCode.SCHEMA_PARSE_FAILED: "Unable to parse the schema file",
    ErrorCode.TEMPLATE_LOAD_FAILED: "Unable to load query templates",
    ErrorCode.TEMPLATE_RENDER_FAILED: "Unable to render a query template",
    ErrorCode.OUTPUT_WRITE_FAILED: "Unable to write generated queries",
}

# Query kinds in output order.
QUERY_KINDS: tuple[str, ...] = ("get", "list", "create", "update", "delete")

TEMPLATE_SUFFIX = ".sql.tmpl"

SINGLE_FILE_NAME = "queries.sql"

SINGLE_FILE_HEADER: tuple[str, ...] = (
    "-- Code generated by sqlc-querygen. DO NOT EDIT.",
    "-- This file contains all queries for the database schema.",
)

BANNER_RULE = "-- ========================================"
