# bookcenter_search/core/domain/record.py

"""Catalog record models consumed by the search core"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Base configuration for record models
RECORD_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    validate_default=True,
)


class SearchableRecord(BaseModel):
    """Minimal read-only view of a catalog record

    Optional text fields are either a non-blank string or None. Blank values
    coming from storage or user input are folded to None.
    """

    model_config = RECORD_MODEL_CONFIG

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    author: str | None = None
    publisher: str | None = None
    notes: str | None = None

    @field_validator("author", "publisher", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        """Treat empty and whitespace-only optional fields as absent"""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Book(SearchableRecord):
    """Catalog book with the bookkeeping columns the indexed lookup orders by"""

    price: float = Field(0.0, ge=0.0)
    created_at: int = Field(0, ge=0, description="Creation time (epoch milliseconds)")
    updated_at: int = Field(0, ge=0, description="Last update time (epoch milliseconds)")


class ScoredRecord(BaseModel):
    """A record paired with its relevance to a query"""

    model_config = ConfigDict(frozen=True)

    record: SearchableRecord
    score: float = Field(ge=0.0, le=10.0)


__all__ = ["SearchableRecord", "Book", "ScoredRecord"]
