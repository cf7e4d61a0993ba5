"""
Configuration management for gene_edges.

Uses pydantic-settings for environment variable loading and validation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GENE_EDGES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Level graphs are named <prefix><level>.<level_extension>
    level_extension: str = Field(default="dot", description="Extension of level graph files")

    # Written wherever a citation or score is absent
    missing_value: str = Field(default="NA", description="Placeholder for missing values")

    verbose: bool = Field(default=False, description="Print stage progress and timing")

    def level_file(self, prefix: str, level: int) -> str:
        """Build the path of the graph file for a given level."""
        return f"{prefix}{level}.{self.level_extension.lstrip('.')}"


# Global settings instance
settings = Settings()
