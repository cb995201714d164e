"""Locating and reading report files."""

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

from pathlib import Path
from typing import List, Optional, Sequence, Union

from tshresults.constants import DEFAULT_ENCODING, REPORT_FILE_EXTENSION
from tshresults.exceptions import FileLoadException
from tshresults.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def find_report_files(
    paths: Optional[Sequence[PathLike]] = None,
    extension: str = REPORT_FILE_EXTENSION,
    directory: PathLike = ".",
) -> List[Path]:
    """Return the report files to convert.

    Explicit paths are returned as given. Without any, every file in
    ``directory`` ending in ``extension`` is picked up, sorted by name.
    """
    if paths:
        return [Path(p) for p in paths]

    found = sorted(Path(directory).glob(f"*{extension}"))
    logger.debug(f"Found {len(found)} report files in {directory}")
    return found


def division_from_path(path: PathLike, extension: str = REPORT_FILE_EXTENSION) -> str:
    """Derive the division label from a report file name.

    Examples:
        >>> division_from_path("reports/a.t")
        'A'
    """
    name = Path(path).name
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return name.upper()


def read_report_lines(path: PathLike, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """Read a report file and split it into lines.

    Raises:
        FileLoadException: If the file cannot be read or decoded
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding=encoding)
    except FileNotFoundError:
        raise FileLoadException(f"Report file not found: {file_path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadException(f"Cannot read report file {file_path}: {e}") from e

    return content.split("\n")
