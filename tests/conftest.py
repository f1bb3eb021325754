"""Shared pytest fixtures for fieldcheck tests."""

from datetime import date

import pytest

from fieldcheck.config import get_settings
from fieldcheck.validators import (
    ConstraintEvaluator,
    FieldDeclaration,
    ModelSchema,
    Range,
    RegularExpression,
    Required,
    StringLength,
)
from fieldcheck.validators.schemas import clear_schema_cache


@pytest.fixture(autouse=True)
def _fresh_settings_and_schemas(monkeypatch):
    """Every test starts from default settings and an empty schema cache."""
    monkeypatch.delenv("SCHEMA_DIR", raising=False)
    monkeypatch.delenv("REQUIRED_ALLOWS_WHITESPACE", raising=False)
    get_settings.cache_clear()
    clear_schema_cache()
    yield
    get_settings.cache_clear()
    clear_schema_cache()


@pytest.fixture
def evaluator() -> ConstraintEvaluator:
    """Evaluator with the default whitespace behaviour pinned."""
    return ConstraintEvaluator(allow_whitespace=True)


@pytest.fixture
def movie_schema() -> ModelSchema:
    """The bundled Movie model, declared in Python."""
    return ModelSchema(
        name="movie",
        fields=("id", "title", "release_date", "genre", "price", "rating"),
        declarations=(
            FieldDeclaration(
                name="title",
                display_name="Title",
                constraints=(StringLength(60, min_length=3), Required()),
            ),
            FieldDeclaration(
                name="release_date",
                display_name="Release Date",
                constraints=(Required(), Range(date(1900, 1, 1), date(2099, 12, 31))),
            ),
            FieldDeclaration(
                name="genre",
                display_name="Genre",
                constraints=(
                    RegularExpression(r"^[A-Z]+[a-zA-Z\s]*$"),
                    Required(),
                    StringLength(30),
                ),
            ),
            FieldDeclaration(
                name="price",
                display_name="Price",
                constraints=(Range(1, 100),),
            ),
            FieldDeclaration(
                name="rating",
                display_name="Rating",
                constraints=(
                    RegularExpression(r"^[A-Z]+[a-zA-Z0-9\"'\s-]*$"),
                    StringLength(5),
                    Required(),
                ),
            ),
        ),
    )


@pytest.fixture
def valid_movie() -> dict:
    return {
        "title": "When Harry Met Sally",
        "release_date": "1989-02-12",
        "genre": "Romantic Comedy",
        "price": 7.99,
        "rating": "PG",
    }
