"""TheMealDB client exceptions.

These are caught by the endpoint layer and converted to a generic
"please try again" response; callers in the service layer treat them as
opaque failures of the recipe source.
"""

from __future__ import annotations


class RecipeSourceError(Exception):
    """Base exception for recipe source errors."""


class RecipeSourceInvalidRequestError(RecipeSourceError):
    """Raised when an endpoint URL cannot be constructed.

    For example, a search query that cannot be percent-encoded.
    """


class RecipeSourceNoDataError(RecipeSourceError):
    """Raised when a single expected result is absent from the response."""


class RecipeSourceDecodingError(RecipeSourceError):
    """Raised when a mandatory item cannot be mapped to a Recipe.

    Only used where exactly one item is required; batch operations drop
    unmappable items instead.
    """


class RecipeSourceUnavailableError(RecipeSourceError):
    """Raised when the recipe API cannot be reached."""


class RecipeSourceTimeoutError(RecipeSourceUnavailableError):
    """Raised when a request to the recipe API times out."""


class RecipeSourceResponseError(RecipeSourceError):
    """Raised when the recipe API answers with a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)


class RecipeSourceParseError(RecipeSourceError):
    """Raised when a response body is not the expected JSON envelope."""
