"""Model schemas: record types with their ordered field declarations.

A schema is checked once when it is defined: every declaration must name a
field of the record type, and each field may be declared only once. Schemas
can be built three ways:

    ModelSchema(name="movie", fields=(...), declarations=(...))
    ModelSchema.from_declarations({"title": [Required()]}, name="movie")
    schema_from_class(Movie)  # Annotated[...] metadata on the class
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, get_origin, get_type_hints

from pydantic import Field, model_validator

from fieldcheck.validators.constraints import CONSTRAINT_TYPES, Constraint, DeclarationModel
from fieldcheck.validators.exceptions import ConfigurationError, UnknownFieldError


@dataclass(frozen=True)
class DisplayName:
    """Annotated marker giving a field a human-readable name for messages."""

    name: str


class FieldDeclaration(DeclarationModel):
    """A named field and its constraints, in the order they are evaluated."""

    name: str = Field(min_length=1)
    display_name: Optional[str] = None
    constraints: tuple[Constraint, ...] = ()

    @property
    def label(self) -> str:
        """Name used in violation messages."""
        return self.display_name or self.name


class ModelSchema(DeclarationModel):
    """A record type: its fields and the constraints declared on them."""

    name: str = Field(min_length=1)
    fields: tuple[str, ...] = ()
    declarations: tuple[FieldDeclaration, ...]

    @model_validator(mode="after")
    def check_declarations(self):
        if not self.declarations:
            raise ConfigurationError(f"Model '{self.name}' declares no constraints")

        seen: set[str] = set()
        for declaration in self.declarations:
            if declaration.name in seen:
                raise ConfigurationError(
                    f"Field '{declaration.name}' is declared twice on model '{self.name}'"
                )
            seen.add(declaration.name)
            # An empty field list means the declarations define the record type.
            if self.fields and declaration.name not in self.fields:
                raise UnknownFieldError(declaration.name, self.name)
        return self

    @property
    def field_names(self) -> tuple[str, ...]:
        return self.fields or tuple(d.name for d in self.declarations)

    def declaration(self, field: str) -> FieldDeclaration:
        for declaration in self.declarations:
            if declaration.name == field:
                return declaration
        raise UnknownFieldError(field, self.name)

    @classmethod
    def from_declarations(
        cls,
        declarations: Mapping[str, Sequence],
        name: str = "record",
        fields: Optional[Sequence[str]] = None,
    ) -> "ModelSchema":
        """Build a schema from a plain ``field -> constraints`` table."""
        if not declarations:
            raise ConfigurationError("Field declarations must not be empty")
        return cls(
            name=name,
            fields=tuple(fields or ()),
            declarations=tuple(
                FieldDeclaration(name=field, constraints=tuple(constraints))
                for field, constraints in declarations.items()
            ),
        )


def schema_from_class(cls: type, name: Optional[str] = None) -> ModelSchema:
    """Build a schema from constraint metadata on a class's annotations.

    Works with dataclasses or any plain annotated class. Not for pydantic
    models: pydantic would treat the constraint objects as field types.

        @dataclass
        class Movie:
            title: Annotated[str, Required(), StringLength(60, min_length=3)]
            price: Annotated[float, Range(1, 100)]

    Every annotated attribute becomes a field of the record type; only those
    carrying constraints get declarations.
    """
    hints = {
        field: hint
        for field, hint in get_type_hints(cls, include_extras=True).items()
        if not field.startswith("_") and get_origin(hint) is not ClassVar
    }
    declarations = []
    for field, hint in hints.items():
        metadata = getattr(hint, "__metadata__", ())
        constraints = tuple(m for m in metadata if isinstance(m, CONSTRAINT_TYPES))
        display = next((m.name for m in metadata if isinstance(m, DisplayName)), None)
        if constraints:
            declarations.append(
                FieldDeclaration(name=field, display_name=display, constraints=constraints)
            )

    return ModelSchema(
        name=name or cls.__name__.lower(),
        fields=tuple(hints),
        declarations=tuple(declarations),
    )


_MISSING = object()


def read_value(instance: Any, field: str, model: str = "") -> Any:
    """Fetch a field's value from a record instance.

    Mappings treat a missing key as an absent value. Other objects must expose
    the field as an attribute; a missing attribute is a schema mismatch.
    """
    if isinstance(instance, Mapping):
        return instance.get(field)

    value = getattr(instance, field, _MISSING)
    if value is _MISSING:
        raise UnknownFieldError(field, model or type(instance).__name__)
    return value
