# bookcenter_search/core/domain/errors.py

"""Exceptions raised by the search core"""


class RetrievalError(Exception):
    """Raised when the catalog cannot supply candidates for a search

    The original catalog exception is always chained as ``__cause__``.
    """

    def __init__(self, query: str, message: str) -> None:
        super().__init__(message)
        self.query = query
