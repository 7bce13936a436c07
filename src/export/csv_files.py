"""Local CSV file export.

This module writes serialized CSV text under an output directory and
builds the file names used by each report.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
import re

from core.errors import StatfeedExportError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def write_csv_file(output_dir: str | Path, file_name: str, csv_text: str) -> Path:
    """Write CSV text to a file under an output directory.

    Args:
        output_dir: Destination directory, created when missing.
        file_name: Target file name.
        csv_text: Serialized CSV payload.

    Returns:
        Path of the written file.

    Raises:
        StatfeedExportError: If the directory or file cannot be written.
    """
    target_dir = Path(output_dir).expanduser().resolve()
    target_path = target_dir / safe_file_name(file_name)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target_path.write_text(csv_text, encoding="utf-8", newline="")
    except OSError as error:
        raise StatfeedExportError(
            f"Failed to write CSV export at {target_path}: {error.strerror}. "
            "Check that the output directory is writable."
        ) from error
    _LOGGER.info("csv_exported", path=str(target_path), characters=len(csv_text))
    return target_path


def safe_file_name(file_name: str) -> str:
    """Replace path separators and control characters in a file name."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", file_name).strip()
    if not cleaned or cleaned in {".", ".."}:
        raise StatfeedExportError(
            f"Invalid export file name '{file_name}'. Provide a non-empty file name."
        )
    return cleaned


def date_stamp(today: date | None = None) -> str:
    """Return a ``YYYYMMDD`` stamp used in export file names."""
    return (today or date.today()).strftime("%Y%m%d")
