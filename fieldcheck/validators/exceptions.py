"""Schema-level faults.

These are programmer or configuration mistakes, never user-input problems.
A record that fails its constraints produces Violation values instead.
"""


class SchemaError(Exception):
    """Base class for malformed declarations and schema mismatches."""


class ConfigurationError(SchemaError):
    """A constraint or model schema was declared with invalid parameters."""


class UnknownFieldError(SchemaError):
    """A declaration references a field the record type does not have."""

    def __init__(self, field: str, model: str = "", source: str = ""):
        self.field = field
        self.model = model
        self.source = source
        where = f" on model '{model}'" if model else ""
        if source:
            where += f" in {source}"
        super().__init__(f"Unknown field '{field}'{where}")
