# tests/test_exceptions.py
"""Tests for exception classes."""

from sqlc_querygen.utils.constants import ErrorCode, ERROR_MESSAGES
from sqlc_querygen.utils.exceptions import (
    OutputWriteError,
    QueryGenError,
    SchemaParseError,
    SchemaReadError,
    TemplateLoadError,
    TemplateRenderError,
)


class TestExceptions:
    """Exception hierarchy tests."""

    def test_default_message(self):
        """Test message falls back to the code's default."""
        error = QueryGenError(ErrorCode.SCHEMA_READ_FAILED)
        assert error.message == ERROR_MESSAGES[ErrorCode.SCHEMA_READ_FAILED]
        assert str(error) == error.message
        assert error.details == {}

    def test_to_dict(self):
        """Test dictionary form."""
        error = SchemaParseError("CREATE TABLE broken (", 7)
        assert error.to_dict() == {
            "status": "error",
            "error": {
                "code": "ERR_002",
                "message": "invalid CREATE TABLE syntax at line 7: CREATE TABLE broken (",
                "details": {"line": "CREATE TABLE broken (", "line_number": 7},
            },
        }

    def test_codes(self):
        """Test each subclass carries its code."""
        assert SchemaReadError("a.sql", "missing").code == ErrorCode.SCHEMA_READ_FAILED
        assert TemplateLoadError("get.sql.tmpl", "bad").code == ErrorCode.TEMPLATE_LOAD_FAILED
        assert TemplateRenderError("get", "shop.item", "bad").code == ErrorCode.TEMPLATE_RENDER_FAILED
        assert OutputWriteError("out", "denied").code == ErrorCode.OUTPUT_WRITE_FAILED

    def test_subclass_of_base(self):
        """Test every error can be caught as QueryGenError."""
        for error in (
            SchemaReadError("a.sql", "missing"),
            SchemaParseError("x", 1),
            TemplateLoadError("t", "r"),
            TemplateRenderError("get", "t", "r"),
            OutputWriteError("p", "r"),
        ):
            assert isinstance(error, QueryGenError)

    def test_every_code_has_message(self):
        """Test ERROR_MESSAGES covers the enum."""
        assert set(ERROR_MESSAGES) == set(ErrorCode)
