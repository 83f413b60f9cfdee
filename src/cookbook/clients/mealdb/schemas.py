"""Wire schemas for TheMealDB responses."""

from __future__ import annotations

from typing import Any

from cookbook.schemas.base import DownstreamResponse


class MealsEnvelope(DownstreamResponse):
    """Top-level response of every TheMealDB endpoint.

    ``meals`` is null, not an empty list, when nothing matched. Items are
    kept as loose dictionaries because their keys are numbered
    (``strIngredient1`` .. ``strIngredient20``) and values may be null.
    """

    meals: list[dict[str, Any]] | None = None
