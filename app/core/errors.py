from __future__ import annotations

from pathlib import Path


class ReferenceDataError(Exception):
    """Reference data file could not be turned into records."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path
        self.message = message


class DataFileNotFoundError(ReferenceDataError):
    def __init__(self, path: Path):
        super().__init__(path, f"Data file not found: {path.name}")


class DataFileFormatError(ReferenceDataError):
    def __init__(self, path: Path, reason: str):
        super().__init__(path, f"Data file {path.name} is malformed: {reason}")
