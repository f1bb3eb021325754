"""Model schema loader: reads JSON record-type declarations into ModelSchemas.

Bundled schemas live next to this module; an extra directory can be added
with the SCHEMA_DIR setting. A malformed file is a configuration fault and
stops loading: it is never skipped.
"""

import json
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from fieldcheck.config import get_settings
from fieldcheck.validators.exceptions import ConfigurationError, UnknownFieldError
from fieldcheck.validators.schema import ModelSchema

logger = structlog.get_logger()

SCHEMAS_DIR = Path(__file__).parent

# Cache loaded schemas to avoid re-reading from disk
_schema_cache: dict[str, ModelSchema] = {}


def load_schema_file(path: Path) -> ModelSchema:
    """Parse one JSON schema file.

    Raises:
        ConfigurationError: The file is unreadable or does not describe a valid schema
        UnknownFieldError: A declaration names a field outside the schema's field list
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read model schema {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Model schema {path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data.setdefault("name", path.stem)

    try:
        return ModelSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Model schema {path} is invalid: {e}") from e
    except UnknownFieldError as e:
        raise UnknownFieldError(e.field, e.model, source=str(path)) from e
    except ConfigurationError as e:
        raise ConfigurationError(f"Model schema {path} is invalid: {e}") from e


def _schema_dirs() -> list[Path]:
    dirs = [SCHEMAS_DIR]
    extra = get_settings().SCHEMA_DIR
    if extra:
        extra_dir = Path(extra)
        if not extra_dir.is_dir():
            raise ConfigurationError(f"SCHEMA_DIR {extra} is not a directory")
        dirs.append(extra_dir)
    return dirs


def _load_all_schemas() -> dict[str, ModelSchema]:
    """Load and cache all JSON schema files."""
    if _schema_cache:
        return _schema_cache

    loaded: dict[str, ModelSchema] = {}
    for directory in _schema_dirs():
        for json_file in sorted(directory.glob("*.json")):
            schema = load_schema_file(json_file)
            if schema.name in loaded:
                raise ConfigurationError(
                    f"Model schema '{schema.name}' is defined twice (second copy in {json_file})"
                )
            loaded[schema.name] = schema
            logger.debug("schema_loaded", model=schema.name, path=str(json_file))

    _schema_cache.update(loaded)
    return _schema_cache


def load_model_schema(name: str) -> Optional[ModelSchema]:
    """Look up a model schema by name.

    Args:
        name: Model identifier (e.g., "movie")

    Returns:
        The ModelSchema, or None if no schema has that name
    """
    return _load_all_schemas().get(name)


def get_all_models() -> list[str]:
    """List all available model schema names."""
    return sorted(_load_all_schemas())


def clear_schema_cache() -> None:
    """Forget loaded schemas so the next lookup re-reads the directories."""
    _schema_cache.clear()
