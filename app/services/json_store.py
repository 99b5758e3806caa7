from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, TypeVar, runtime_checkable

import anyio
from pydantic import BaseModel, TypeAdapter, ValidationError

from app.core.errors import DataFileFormatError, DataFileNotFoundError


log = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


@runtime_checkable
class RecordSource(Protocol):
    """
    Loads every record of one type from a named reference data file.
    """

    async def load_all(self, model: type[RecordT], file_name: str) -> list[RecordT]:
        ...


class JsonFileStore:
    """
    Reads JSON arrays from files under base_dir.

    Nothing is cached: each call reads and parses the file again.
    Errors are raised to the caller untouched.
    """

    def __init__(self, base_dir: str | Path):
        self.base = Path(base_dir)

    def resolve_path(self, file_name: str) -> Path:
        return self.base / file_name

    async def load_all(self, model: type[RecordT], file_name: str) -> list[RecordT]:
        path = self.resolve_path(file_name)
        try:
            raw = await anyio.Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DataFileNotFoundError(path) from e
        except UnicodeDecodeError as e:
            raise DataFileFormatError(path, "file is not valid UTF-8") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DataFileFormatError(path, f"invalid JSON at line {e.lineno} column {e.colno}") from e

        if not isinstance(data, list):
            raise DataFileFormatError(path, f"expected a JSON array, got {type(data).__name__}")

        try:
            items = TypeAdapter(list[model]).validate_python(data)
        except ValidationError as e:
            raise DataFileFormatError(path, f"{e.error_count()} invalid record field(s)") from e

        log.debug("loaded %d %s records from %s", len(items), model.__name__, path.name)
        return items
