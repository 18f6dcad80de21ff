"""Command line entry point for sqlc-querygen."""

import argparse
import logging
import sys
from typing import Optional

from sqlc_querygen.config import Settings
from sqlc_querygen.services.query_generator import QueryGenerator
from sqlc_querygen.utils.exceptions import QueryGenError


logger = logging.getLogger("sqlc_querygen")

USAGE = """SQLC Query Generator
Generate SQLC queries from SQL schema files

Usage:
  sqlc-querygen -schema <schema_file> [options]

Options:
  -schema <file>     Path to SQL migration file (required)
  -output <dir>      Output directory for generated SQL files (default: queries)
  -table <name>      Generate queries for specific table (format: schema.table or just table)
  -templates <dir>   Directory containing template files (default: pkg/tool/templates)
  -single-file       Generate all queries into a single file (only when table not specified)
  -help              Show this help message

Examples:
  # Generate queries for all tables
  sqlc-querygen -schema prisma/migrations/0_init/migration.sql

  # Generate queries for specific table
  sqlc-querygen -schema prisma/migrations/0_init/migration.sql -table account.account

  # Custom output directory
  sqlc-querygen -schema prisma/migrations/0_init/migration.sql -output generated_queries

  # Generate all queries into a single file
  sqlc-querygen -schema prisma/migrations/0_init/migration.sql -single-file

Every option can also be set through SQLC_QUERYGEN_* environment variables.
The packaged default templates live in sqlc_querygen/templates."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Parser accepting both ``-flag`` and ``--flag`` spellings.
    """
    parser = argparse.ArgumentParser(
        prog="sqlc-querygen",
        description="Generate SQLC queries from SQL schema files",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-schema", "--schema", dest="schema", help="Path to SQL migration file")
    parser.add_argument("-output", "--output", dest="output", help="Output directory")
    parser.add_argument("-table", "--table", dest="table", help="schema.table or table")
    parser.add_argument("-templates", "--templates", dest="templates", help="Template directory")
    parser.add_argument(
        "-single-file",
        "--single-file",
        dest="single_file",
        action="store_true",
        default=None,
        help="Generate all queries into a single file"
    )
    parser.add_argument("-help", "--help", "-h", dest="help", action="store_true")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the generator.

    Args:
        argv: Command line arguments, ``sys.argv[1:]`` when omitted.

    Returns:
        The process exit code.
    """
    args = build_parser().parse_args(argv)

    # Load settings; flags win over the environment
    settings = Settings()
    if args.schema:
        settings.schema_file = args.schema
    if args.output:
        settings.output_dir = args.output
    if args.table:
        settings.table = args.table
    if args.templates:
        settings.template_dir = args.templates
    if args.single_file is not None:
        settings.single_file = args.single_file

    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)

    if args.help or not settings.schema_file:
        print(USAGE)
        return 0

    logger.info("Generating queries from %s", settings.schema_file)

    generator = QueryGenerator(settings.template_dir)
    try:
        generator.generate_from_schema(
            settings.schema_file,
            settings.output_dir,
            settings.table,
            settings.single_file
        )
    except QueryGenError as e:
        logger.error("Error generating queries [%s]: %s", e.code.value, e.message)
        return 1

    print(f"Successfully generated SQLC queries in {settings.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
