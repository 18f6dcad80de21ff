"""Generate sqlc CRUD queries from migration DDL."""

__version__ = "0.1.0"
