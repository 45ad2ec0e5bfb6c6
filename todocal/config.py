"""Configuration for todocal."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

try:
    from dotenv import find_dotenv, load_dotenv
except ImportError:
    load_dotenv = None


class TodoCalConfig(BaseModel):
    """Application configuration with Pydantic validation."""

    # Storage
    data_dir: Path = Field(default=Path("data"))
    store_filename: str = Field(default="calendar-todos.json")
    storage_backend: str = Field(default="json")

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="todocal.log")

    # Calendar display (0 = Sunday ... 6 = Saturday)
    week_starts_on: int = Field(default=0, ge=0, le=6)

    @property
    def store_path(self) -> Path:
        """Path to the JSON item store."""
        return self.data_dir / self.store_filename

    @classmethod
    def from_env(cls) -> "TodoCalConfig":
        """Load configuration from environment variables and .env file."""
        if load_dotenv is not None:
            # Search from the working directory, where the user runs the CLI
            load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage
        if "TODOCAL_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["TODOCAL_DATA_DIR"])
        if "TODOCAL_STORE_FILENAME" in os.environ:
            config_dict["store_filename"] = os.environ["TODOCAL_STORE_FILENAME"]
        if "TODOCAL_STORAGE_BACKEND" in os.environ:
            config_dict["storage_backend"] = os.environ["TODOCAL_STORAGE_BACKEND"]

        # Logging
        if "TODOCAL_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["TODOCAL_LOG_DIR"])
        if "TODOCAL_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["TODOCAL_LOG_FILENAME"]

        # Calendar display
        if "TODOCAL_WEEK_STARTS_ON" in os.environ:
            try:
                week_starts_on = int(os.environ["TODOCAL_WEEK_STARTS_ON"])
            except ValueError:
                week_starts_on = None  # Keep default if invalid
            if week_starts_on is not None and 0 <= week_starts_on <= 6:
                config_dict["week_starts_on"] = week_starts_on

        return cls(**config_dict)
