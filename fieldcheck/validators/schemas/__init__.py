"""Model schemas: JSON-based record-type declarations."""

from fieldcheck.validators.schemas.loader import (
    clear_schema_cache,
    get_all_models,
    load_model_schema,
    load_schema_file,
)

__all__ = ["load_model_schema", "load_schema_file", "get_all_models", "clear_schema_cache"]
