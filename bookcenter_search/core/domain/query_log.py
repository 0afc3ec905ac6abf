# bookcenter_search/core/domain/query_log.py

"""Query history entries kept by the suggestion store"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class QueryLogEntry(BaseModel):
    """A normalized query and the order in which it was recorded"""

    model_config = ConfigDict(frozen=True)

    normalized_query: str = Field(min_length=1)
    sequence: int = Field(ge=0)
