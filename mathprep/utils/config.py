"""
Configuration module for loading environment variables.

Settings here only govern logging and command-line I/O; normalization
output never depends on configuration.
"""

import codecs
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    Configuration class for managing application settings.

    Loads environment variables from .env file and provides
    typed access to all configuration values.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for the log file, or None for console only.
        encoding: Text encoding used to read and write files.
        output_suffix: Suffix inserted before the extension of output files.

    Example:
        >>> config = Config()
        >>> print(config.encoding)
        utf-8
    """

    def __init__(self, env_file: Optional[str] = None) -> None:
        """
        Initialize configuration by loading environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                     searches for .env in the current and parent directories.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            current_dir = Path.cwd()
            env_path = current_dir / ".env"
            if env_path.exists():
                load_dotenv(env_path)
            else:
                for parent in current_dir.parents:
                    env_path = parent / ".env"
                    if env_path.exists():
                        load_dotenv(env_path)
                        break
                else:
                    load_dotenv()

        # Logging
        self.log_level: str = os.getenv("MATHPREP_LOG_LEVEL", "INFO").upper()
        self.log_dir: Optional[str] = os.getenv("MATHPREP_LOG_DIR") or None

        # File I/O
        self.encoding: str = os.getenv("MATHPREP_ENCODING", "utf-8")
        self.output_suffix: str = os.getenv("MATHPREP_OUTPUT_SUFFIX", ".normalized")

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages. Empty list if valid.
        """
        errors: list[str] = []

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"MATHPREP_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"MATHPREP_ENCODING is not a known codec: {self.encoding}")

        if not self.output_suffix:
            errors.append("MATHPREP_OUTPUT_SUFFIX must not be empty")

        return errors

    def get_log_path(self) -> Optional[Path]:
        """
        Get log directory as Path object.

        Returns:
            Path object for the log directory, or None if unset.
        """
        return Path(self.log_dir) if self.log_dir else None

    def __repr__(self) -> str:
        """Return string representation of config."""
        return (
            f"Config("
            f"log_level='{self.log_level}', "
            f"log_dir={self.log_dir!r}, "
            f"encoding='{self.encoding}', "
            f"output_suffix='{self.output_suffix}')"
        )


# Global config instance (lazy loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get global configuration instance.

    Returns:
        Config instance loaded from environment.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
