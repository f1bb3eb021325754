"""API request models."""

from typing import Any

from pydantic import BaseModel, Field


class RecordSubmission(BaseModel):
    """A record posted for validation or storage."""

    record: dict[str, Any] = Field(
        ...,
        description="Field values keyed by field name; dates as ISO-8601 strings",
        examples=[
            {
                "title": "Ghostbusters",
                "release_date": "1984-03-13",
                "genre": "Comedy",
                "price": 8.99,
                "rating": "PG",
            }
        ],
    )
