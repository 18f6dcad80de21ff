"""Exception classes for sqlc-querygen."""

from sqlc_querygen.utils.constants import ErrorCode, ERROR_MESSAGES


class QueryGenError(Exception):
    """Base exception class for sqlc-querygen."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert the exception to a dictionary format.

        Returns:
            A dictionary representation of the error.
        """
        return {
            "status": "error",
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details
            }
        }


class SchemaReadError(QueryGenError):
    """Schema file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code=ErrorCode.SCHEMA_READ_FAILED,
            message=f"failed to read schema {path}: {reason}",
            details={"path": path}
        )


class SchemaParseError(QueryGenError):
    """Malformed CREATE TABLE header."""

    def __init__(self, line: str, line_number: int):
        super().__init__(
            code=ErrorCode.SCHEMA_PARSE_FAILED,
            message=f"invalid CREATE TABLE syntax at line {line_number}: {line}",
            details={"line": line, "line_number": line_number}
        )


class TemplateLoadError(QueryGenError):
    """Template directory or file could not be loaded."""

    def __init__(self, template: str, reason: str):
        super().__init__(
            code=ErrorCode.TEMPLATE_LOAD_FAILED,
            message=f"failed to parse template {template}: {reason}",
            details={"template": template}
        )


class TemplateRenderError(QueryGenError):
    """Template failed while rendering a table."""

    def __init__(self, kind: str, table: str, reason: str):
        super().__init__(
            code=ErrorCode.TEMPLATE_RENDER_FAILED,
            message=f"failed to generate {kind} query for table {table}: {reason}",
            details={"kind": kind, "table": table}
        )


class OutputWriteError(QueryGenError):
    """Output directory or file could not be written."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code=ErrorCode.OUTPUT_WRITE_FAILED,
            message=f"failed to write {path}: {reason}",
            details={"path": path}
        )
