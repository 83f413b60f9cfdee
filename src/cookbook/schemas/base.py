"""Base schema configuration for all Pydantic models.

Usage:
    - APIRequest: For incoming API request bodies
    - APIResponse: For outgoing API response bodies
    - Document: For records persisted in the catalog store
    - DownstreamResponse: For responses received from external services
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        use_enum_values=True,
        validate_default=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Extra fields sent by clients are ignored.
    """

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Only explicitly defined properties are returned.
    """

    model_config = ConfigDict(extra="forbid")


class Document(_BaseSchema):
    """Base class for immutable catalog records.

    Stored documents may carry fields written by other clients, so extra
    fields are ignored on load. Records are frozen; use ``model_copy`` to
    derive a changed record.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    def to_document(self) -> dict[str, object]:
        """Dump the record as a camelCase JSON-compatible document."""
        return self.model_dump(mode="json", by_alias=True)


class DownstreamResponse(_BaseSchema):
    """Base class for responses received from external services.

    Upstream services may add new properties without breaking parsing.
    """

    model_config = ConfigDict(extra="ignore")
