# tests/test_main.py
"""Tests for the command line entry point."""

import logging

import pytest
from sqlc_querygen.main import build_parser, main


class TestArgumentParsing:
    """Flag parsing tests."""

    def test_single_dash_flags(self):
        """Test Go-style single dash flags."""
        args = build_parser().parse_args([
            "-schema", "m.sql", "-output", "out", "-table", "account.account",
            "-templates", "tpl", "-single-file",
        ])
        assert args.schema == "m.sql"
        assert args.output == "out"
        assert args.table == "account.account"
        assert args.templates == "tpl"
        assert args.single_file is True

    def test_double_dash_flags(self):
        """Test GNU-style aliases."""
        args = build_parser().parse_args(["--schema", "m.sql", "--single-file"])
        assert args.schema == "m.sql"
        assert args.single_file is True

    def test_unset_flags(self):
        """Test omitted flags stay unset."""
        args = build_parser().parse_args([])
        assert args.schema is None
        assert args.single_file is None
        assert args.help is False


class TestMain:
    """CLI behaviour tests."""

    def test_missing_schema_prints_usage(self, tmp_path, monkeypatch, capsys):
        """Test usage without writing anything."""
        monkeypatch.chdir(tmp_path)
        assert main([]) == 0
        assert "Usage:" in capsys.readouterr().out
        assert list(tmp_path.iterdir()) == []

    def test_help_flag(self, tmp_path, monkeypatch, capsys, schema_file):
        """Test -help wins over other flags."""
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        assert main(["-help", "-schema", str(schema_file)]) == 0
        assert "-single-file" in capsys.readouterr().out
        assert list(work.iterdir()) == []

    def test_success(self, tmp_path, schema_file, bundled_templates, capsys):
        """Test generation through the CLI."""
        out = tmp_path / "out"
        code = main([
            "-schema", str(schema_file),
            "-output", str(out),
            "-templates", str(bundled_templates),
        ])
        assert code == 0
        assert len(list(out.iterdir())) == 3
        assert f"Successfully generated SQLC queries in {out}" in capsys.readouterr().out

    @pytest.mark.parametrize("table", ["catalog.product_spu", "product_spu"])
    def test_table_flag(self, tmp_path, schema_file, bundled_templates, table):
        """Test -table selects one table."""
        out = tmp_path / "out"
        code = main([
            "-schema", str(schema_file),
            "-output", str(out),
            "-templates", str(bundled_templates),
            "-table", table,
        ])
        assert code == 0
        assert [p.name for p in out.iterdir()] == ["catalog_product_spu.sql"]

    def test_single_file_flag(self, tmp_path, schema_file, bundled_templates):
        """Test -single-file writes queries.sql."""
        out = tmp_path / "out"
        code = main([
            "-schema", str(schema_file),
            "-output", str(out),
            "-templates", str(bundled_templates),
            "-single-file",
        ])
        assert code == 0
        assert [p.name for p in out.iterdir()] == ["queries.sql"]

    def test_environment_defaults(self, tmp_path, schema_file, bundled_templates, monkeypatch):
        """Test settings from the environment when flags are absent."""
        out = tmp_path / "env_out"
        monkeypatch.setenv("SQLC_QUERYGEN_SCHEMA_FILE", str(schema_file))
        monkeypatch.setenv("SQLC_QUERYGEN_OUTPUT_DIR", str(out))
        monkeypatch.setenv("SQLC_QUERYGEN_TEMPLATE_DIR", str(bundled_templates))
        assert main([]) == 0
        assert (out / "account_account.sql").is_file()

    def test_generation_error(self, tmp_path, bundled_templates, caplog):
        """Test errors are logged and exit non-zero."""
        with caplog.at_level(logging.ERROR, logger="sqlc_querygen"):
            code = main([
                "-schema", str(tmp_path / "missing.sql"),
                "-output", str(tmp_path / "out"),
                "-templates", str(bundled_templates),
            ])
        assert code == 1
        assert "ERR_001" in caplog.text
        assert not (tmp_path / "out").exists()
