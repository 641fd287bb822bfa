"""JSON config file reading and writing for pydantic models."""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from loadring.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def read_model(path: Path, model_type: type[M]) -> M:
    """
    Validate the JSON in ``path`` as ``model_type``.

    Raises:
        FileNotFoundError: If there is no file at ``path``
        ConfigFileInvalidError: If the file is unreadable, empty or not JSON
        ConfigValidationError: If a value fails validation
    """
    try:
        text = path.read_text()
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileInvalidError(str(path), f"Cannot read file: {e}") from e

    if not text.strip():
        raise ConfigFileInvalidError(str(path), "File is empty")

    try:
        model = model_type.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"{path} is not a valid {model_type.__name__}: {e}")
        raise wrap_pydantic_error(e, str(path)) from e

    logger.debug(f"Loaded {model_type.__name__} from {path}")
    return model


def read_model_or_default(path: Path, model_type: type[M]) -> M:
    """Like read_model(), but a missing file yields ``model_type()``.

    Broken files still raise; the default is never written back.
    """
    try:
        return read_model(path, model_type)
    except FileNotFoundError:
        logger.info(f"No config at {path}, using defaults")
        return model_type()


def write_model(model: BaseModel, path: Path, backup: bool = True) -> None:
    """
    Write ``model`` to ``path`` as indented JSON.

    The previous file, if any, is copied to ``<name>.bak`` first. The new
    content goes to ``<name>.tmp`` and is renamed over ``path``, so a
    crash mid-write leaves either the old or the new file.

    Raises:
        OSError: If the directory or file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if backup and path.exists():
        backup_path = path.with_suffix(path.suffix + ".bak")
        shutil.copy2(path, backup_path)
        logger.debug(f"Backed up {path} to {backup_path}")

    temp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        temp_path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
        temp_path.replace(path)
    finally:
        if temp_path.exists():
            temp_path.unlink()

    logger.debug(f"Saved {type(model).__name__} to {path}")
