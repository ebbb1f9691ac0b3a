"""
Storage settings using Pydantic for environment-based configuration.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Locations of the flat files the converter persists to."""

    data_dir: str = Field(
        default=".", description="Directory holding all persisted files"
    )
    history_file: str = Field(
        default="history.txt", description="Conversion history file name"
    )
    error_log_file: str = Field(
        default="error_log.txt", description="Error log file name"
    )
    usage_file: str = Field(
        default="user_behavior.txt", description="Currency pair usage file name"
    )
    precision_log_file: str = Field(
        default="precision_log.txt", description="Precision log file name"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def path_for(self, file_name: str) -> Path:
        """Resolve a file name against the data directory."""
        return Path(self.data_dir) / file_name

    @property
    def history_path(self) -> Path:
        return self.path_for(self.history_file)

    @property
    def error_log_path(self) -> Path:
        return self.path_for(self.error_log_file)

    @property
    def usage_path(self) -> Path:
        return self.path_for(self.usage_file)

    @property
    def precision_log_path(self) -> Path:
        return self.path_for(self.precision_log_file)


# Create a global instance
storage_settings = StorageSettings()
