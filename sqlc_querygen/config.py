"""Configuration management for sqlc-querygen."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Generator settings loaded from environment variables.

    Command line flags take precedence over these values.
    """

    schema_file: str = ""
    output_dir: str = "queries"
    table: str = Field(
        default="",
        description="Restrict generation to one table (table or schema.table)"
    )
    template_dir: str = "pkg/tool/templates"
    single_file: bool = False

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

    class Config:
        env_prefix = "SQLC_QUERYGEN_"

    @staticmethod
    def bundled_template_dir() -> Path:
        """Get the directory of the templates shipped with the package.

        Returns:
            Path to the packaged ``templates`` directory.
        """
        return Path(__file__).parent / "templates"
