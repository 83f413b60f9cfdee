"""TheMealDB API client.

Translates three query intents (random pick, search by name, browse by
category) into normalized Recipe records. Every call hits the network; there
is no caching at this layer.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

import httpx
import orjson
from pydantic import ValidationError

from cookbook.clients.mealdb.exceptions import (
    RecipeSourceDecodingError,
    RecipeSourceInvalidRequestError,
    RecipeSourceNoDataError,
    RecipeSourceParseError,
    RecipeSourceResponseError,
    RecipeSourceTimeoutError,
    RecipeSourceUnavailableError,
)
from cookbook.clients.mealdb.mapper import map_meal
from cookbook.clients.mealdb.schemas import MealsEnvelope
from cookbook.core.config import get_settings
from cookbook.observability.logging import get_logger


if TYPE_CHECKING:
    from cookbook.core.config.settings import MealDBSettings
    from cookbook.schemas.recipe import Recipe

logger = get_logger(__name__)


class MealDBClient:
    """HTTP client for TheMealDB.

    Example:
        ```python
        client = MealDBClient()
        await client.initialize()

        recipe = await client.fetch_random()
        seafood = await client.fetch_by_category("Seafood")

        await client.shutdown()
        ```
    """

    RANDOM_ENDPOINT = "random.php"
    SEARCH_ENDPOINT = "search.php"
    FILTER_ENDPOINT = "filter.php"
    LOOKUP_ENDPOINT = "lookup.php"

    def __init__(
        self,
        config: MealDBSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: API settings. Defaults to the ``mealdb`` settings section.
            http_client: HTTP client to use instead of creating one.
        """
        self._config = config or get_settings().mealdb
        self._http = http_client
        self._owns_http_client = http_client is None

    @property
    def base_url(self) -> str:
        """Base URL of the API, without trailing slash."""
        return self._config.base_url.rstrip("/")

    async def initialize(self) -> None:
        """Create the HTTP client if one was not injected."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout),
                headers={"Accept": "application/json"},
            )
        logger.info("MealDBClient initialized", base_url=self.base_url)

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http is not None:
            await self._http.aclose()
            self._http = None
        logger.debug("MealDBClient shutdown")

    # =========================================================================
    # Operations
    # =========================================================================

    async def fetch_random(self) -> Recipe:
        """Fetch one random recipe.

        Raises:
            RecipeSourceNoDataError: If the response holds no meal.
            RecipeSourceDecodingError: If the meal lacks an id or title.
            RecipeSourceInvalidRequestError: If the URL cannot be built.
        """
        envelope = await self._get(self._build_url(self.RANDOM_ENDPOINT))
        if not envelope.meals:
            raise RecipeSourceNoDataError("Random endpoint returned no meal")

        recipe = map_meal(envelope.meals[0])
        if recipe is None:
            msg = "Random meal is missing its id or title"
            raise RecipeSourceDecodingError(msg)
        return recipe

    async def search(self, query: str) -> list[Recipe]:
        """Search recipes by name.

        No match is an empty list. Meals that cannot be mapped are dropped
        rather than failing the whole search.

        Raises:
            RecipeSourceInvalidRequestError: If the query cannot be encoded.
        """
        url = self._build_url(self.SEARCH_ENDPOINT, s=query)
        envelope = await self._get(url)
        if envelope.meals is None:
            logger.debug("No recipes matched search", query=query)
            return []

        recipes = []
        for meal in envelope.meals:
            recipe = map_meal(meal)
            if recipe is None:
                logger.debug("Dropping unmappable search result", query=query)
                continue
            recipes.append(recipe)
        return recipes

    async def lookup(self, meal_id: str) -> Recipe:
        """Fetch full details of one meal by id.

        Raises:
            RecipeSourceDecodingError: If the meal is absent or unmappable.
        """
        envelope = await self._get(self._build_url(self.LOOKUP_ENDPOINT, i=meal_id))
        recipe = map_meal(envelope.meals[0]) if envelope.meals else None
        if recipe is None:
            msg = f"Lookup for meal '{meal_id}' returned no usable recipe"
            raise RecipeSourceDecodingError(msg)
        return recipe

    async def fetch_by_category(self, name: str) -> list[Recipe]:
        """Fetch full recipes for every meal in a category.

        The filter endpoint only returns summaries, so each summary is
        looked up concurrently, one task per meal. The operation is
        all-or-nothing: the first failed lookup cancels the remaining ones
        and is re-raised. Result order is not guaranteed.
        """
        envelope = await self._get(self._build_url(self.FILTER_ENDPOINT, c=name))
        if envelope.meals is None:
            logger.debug("Category has no meals", category=name)
            return []

        meal_ids = [
            summary["idMeal"]
            for summary in envelope.meals
            if isinstance(summary.get("idMeal"), str)
        ]

        limit = self._config.max_concurrent_lookups
        semaphore = asyncio.Semaphore(limit) if limit else None

        async def lookup_one(meal_id: str) -> Recipe:
            if semaphore is None:
                return await self.lookup(meal_id)
            async with semaphore:
                return await self.lookup(meal_id)

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(lookup_one(mid)) for mid in meal_ids]
        except ExceptionGroup as eg:
            first = eg.exceptions[0]
            logger.warning(
                "Category fetch aborted",
                category=name,
                meals=len(meal_ids),
                error=str(first),
            )
            raise first  # noqa: B904

        recipes = [task.result() for task in tasks]
        logger.info("Fetched category recipes", category=name, count=len(recipes))
        return recipes

    # =========================================================================
    # Transport
    # =========================================================================

    def _build_url(self, endpoint: str, **params: str) -> httpx.URL:
        """Compose an absolute endpoint URL with percent-encoded params."""
        try:
            query = urlencode(params, quote_via=quote)
            suffix = f"?{query}" if query else ""
            url = httpx.URL(f"{self.base_url}/{endpoint}{suffix}")
        except (UnicodeError, httpx.InvalidURL) as e:
            msg = f"Cannot build URL for {endpoint}: {e}"
            raise RecipeSourceInvalidRequestError(msg) from e

        if not url.is_absolute_url:
            msg = f"Base URL '{self.base_url}' is not absolute"
            raise RecipeSourceInvalidRequestError(msg)
        return url

    async def _get(self, url: httpx.URL) -> MealsEnvelope:
        """GET a URL and decode the ``{"meals": ...}`` envelope."""
        if self._http is None:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        logger.debug("Requesting TheMealDB", url=str(url))

        try:
            response = await self._http.get(url)
        except httpx.TimeoutException as e:
            logger.warning("Request to TheMealDB timed out", url=str(url))
            raise RecipeSourceTimeoutError(str(e)) from e
        except httpx.RequestError as e:
            logger.warning("Failed to connect to TheMealDB", error=str(e))
            msg = f"Failed to connect to TheMealDB: {e}"
            raise RecipeSourceUnavailableError(msg) from e

        if not response.is_success:
            logger.warning(
                "TheMealDB returned error",
                status_code=response.status_code,
                url=str(url),
            )
            raise RecipeSourceResponseError(
                response.status_code, f"HTTP {response.status_code} from {url.path}"
            )

        try:
            return MealsEnvelope.model_validate(orjson.loads(response.content))
        except (orjson.JSONDecodeError, ValidationError) as e:
            msg = f"Malformed response from {url.path}: {e}"
            raise RecipeSourceParseError(msg) from e
