"""Shared utilities for Pydantic model persistence.

Loads and saves Pydantic models to and from JSON files. Used for the user
configuration and for writing effect documents.

Safety Features:
    - Optional .bak backup before overwriting files
    - Atomic writes using temp file + rename, so a failed write never
      leaves a truncated document behind
    - Files are always written as UTF-8
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from chromatrix.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless load/save helpers for Pydantic models.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json(Path("config.json"), AppConfig)
        PydanticPersistence.save_json(config, Path("config.json"))
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid or the file is empty
            ConfigValidationError: If the JSON content fails Pydantic validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        json_content = path.read_text(encoding="utf-8")
        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(json_content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int | None = 2,
        create_parents: bool = True,
        backup: bool = False,
    ) -> None:
        """
        Save a Pydantic model to a JSON file with atomic write.

        The model is fully serialized before the filesystem is touched.

        Args:
            data: The Pydantic model instance to save
            path: Path where the file should be saved
            indent: JSON indentation level (None for compact output)
            create_parents: Create parent directories if they don't exist
            backup: Create .bak backup before overwriting existing file

        Raises:
            OSError: If the file cannot be written (permission denied, disk full, etc.)
        """
        json_content = data.model_dump_json(indent=indent)
        PydanticPersistence.write_text_atomic(
            path, json_content, create_parents=create_parents, backup=backup
        )
        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def write_text_atomic(
        path: Path, content: str, create_parents: bool = True, backup: bool = False
    ) -> None:
        """
        Write UTF-8 text through a temp file and rename.

        Raises:
            OSError: If the file cannot be written
        """
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            backup_path = path.with_suffix(path.suffix + ".bak")
            shutil.copy2(path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"OS error writing {path}: {e}")
            raise
        finally:
            # Left behind only when the rename failed
            if temp_path.exists():
                temp_path.unlink()

    @staticmethod
    def load_or_default(
        path: Path, model_type: type[T], default_factory: Callable[[], T] | None = None
    ) -> T:
        """
        Load a model from JSON, or return a default if the file doesn't exist.

        Only a missing file triggers the default; a corrupt file raises so it
        is never silently replaced.

        Raises:
            ConfigFileInvalidError: If the file exists but has invalid JSON syntax
            ConfigValidationError: If the file exists but has invalid values
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, using default {model_type.__name__}")
            if default_factory:
                return default_factory()
            return model_type()
