"""
Settings module for configuration loaded from the environment.

Covers logging, report output and the CLI defaults. The scoring rule
table itself is fixed and deliberately not configurable.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SEO_ANALYZER_",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    
    # Report Output
    output_dir: Path = Path("outputs")
    report_indent: int = Field(default=2, ge=0, le=8)
    
    def reports_dir(self) -> Path:
        """Return the report directory, creating it on first use."""
        path = self.output_dir / "reports"
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Returns:
        Settings: Application settings
    """
    return Settings()
