"""Conversion settings."""

# TSH Results
# Copyright (C) 2025  TSH Results developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from tshresults.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    FORMAT_CSV,
    LOG_LEVELS,
    OUTPUT_FORMATS,
    REPORT_FILE_EXTENSION,
)
from tshresults.exceptions import InvalidConfigurationException
from tshresults.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ConversionConfig:
    """Settings for converting report files.

    Attributes
    ----------
    extension : str
        Suffix of report files picked up when no files are given.
    encoding : str
        Text encoding used to read report files.
    output_format : str
        Either "csv" or "json".
    keep_going : bool
        Skip a failing file and carry on with the rest of the batch.
    strict_rounds : bool
        Treat a failed per-round count check as fatal instead of a warning.
    log_level : str
        Level name for the package logger.
    """

    extension: str = REPORT_FILE_EXTENSION
    encoding: str = DEFAULT_ENCODING
    output_format: str = FORMAT_CSV
    keep_going: bool = False
    strict_rounds: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        for name in ("extension", "encoding", "output_format", "log_level"):
            if not isinstance(getattr(self, name), str):
                raise InvalidConfigurationException(
                    f"{name} must be a string, got {getattr(self, name)!r}"
                )
        for name in ("keep_going", "strict_rounds"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigurationException(
                    f"{name} must be true or false, got {getattr(self, name)!r}"
                )

        self.output_format = self.output_format.lower()
        self.log_level = self.log_level.upper()
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigurationException(
                f"Unknown output format {self.output_format!r}, "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.log_level not in LOG_LEVELS:
            raise InvalidConfigurationException(
                f"Unknown log level {self.log_level!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "extension": self.extension,
            "encoding": self.encoding,
            "output_format": self.output_format,
            "keep_going": self.keep_going,
            "strict_rounds": self.strict_rounds,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConversionConfig":
        """Deserialize configuration from dictionary."""
        unknown = set(data) - set(cls().to_dict())
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            )
        return cls(
            extension=data.get("extension", REPORT_FILE_EXTENSION),
            encoding=data.get("encoding", DEFAULT_ENCODING),
            output_format=data.get("output_format", FORMAT_CSV),
            keep_going=data.get("keep_going", False),
            strict_rounds=data.get("strict_rounds", False),
            log_level=data.get("log_level", DEFAULT_LOG_LEVEL),
        )


def load_configuration(config_file: Optional[Union[str, Path]]) -> Dict[str, Any]:
    """Load configuration values from a JSON file.

    Args:
        config_file: Path to configuration file, or None

    Returns:
        Configuration dictionary (empty when no file is given)

    Raises:
        InvalidConfigurationException: If the file is missing or not a JSON object
    """
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        raise InvalidConfigurationException(
            f"Configuration file not found: {config_path}"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(
            f"Invalid JSON in configuration file {config_path}: {e}"
        ) from e

    if not isinstance(config, dict):
        raise InvalidConfigurationException(
            f"Configuration file {config_path} must contain a JSON object"
        )

    logger.info("Loaded configuration from: %s", config_path)
    return config
