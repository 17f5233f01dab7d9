"""File loading helpers shared by config commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

__all__ = [
    "load_validated_json",
    "require_file_exists",
]

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_file_exists(path: Path, file_type: str = "file") -> None:
    """Raise FileNotFoundError if path does not exist.

    Args:
        path: Path to check.
        file_type: Human-readable kind of file, used in the error message.

    Raises:
        FileNotFoundError: If the file is missing.
    """
    if not path.exists():
        raise FileNotFoundError(f"{file_type.capitalize()} file not found: {path}")


def load_validated_json(
    path: Path,
    model: type[ModelT],
    file_type: str = "file",
    recovery_hint: str | None = None,
    encoding: str = "utf-8",
) -> ModelT:
    """Load a JSON file and validate it against a pydantic model.

    Args:
        path: JSON file to read.
        model: Pydantic model class to validate against.
        file_type: Human-readable kind of file, used in error messages.
        recovery_hint: Appended to error messages to tell the user what to do.
        encoding: File encoding.

    Returns:
        Validated model instance.

    Raises:
        ValueError: If the file can't be read, is not valid JSON, or fails
            schema validation.
    """
    hint = f" {recovery_hint}" if recovery_hint else ""

    try:
        with open(path, encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_type} file {path}: {e}.{hint}") from e
    except OSError as e:
        raise ValueError(f"Cannot read {file_type} file {path}: {e}.{hint}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValueError(f"Invalid {file_type} file {path}: {errors}.{hint}") from e
