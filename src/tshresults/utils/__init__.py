"""Logging helpers shared across TSH Results."""

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

import logging
from typing import Union

from tshresults.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT

PACKAGE_LOGGER_NAME = "tshresults"


def _configure_package_logger() -> logging.Logger:
    """Attach the stderr handler to the package logger once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(DEFAULT_LOG_LEVEL)
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger whose records flow to the package stderr handler
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of the package logger (e.g. "DEBUG" or logging.WARNING)."""
    if isinstance(level, str):
        level = level.upper()
    _configure_package_logger().setLevel(level)
