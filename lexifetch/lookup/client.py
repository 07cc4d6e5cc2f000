"""Async HTTP client for the Webster's 1913 dictionary site."""

import asyncio
import random
from urllib.parse import quote

import httpx
from loguru import logger

from lexifetch.core.errors import DefinitionLookupError
from lexifetch.core.types import Definition
from lexifetch.lookup.parsing import PageParseError, parse_definition_page
from lexifetch.utils.constants import Constants


def backoff_delay(attempt: int) -> float:
    """Capped exponential backoff with a little jitter."""
    return min(
        Constants.BACKOFF_MAX,
        Constants.BACKOFF_BASE * (2**attempt) + random.random() * 0.1,
    )


class WebstersClient:
    """Looks up entries on websters1913.com.

    One instance is shared read-only by every concurrent resolution in a run.
    Use as an async context manager so the connection pool is closed.
    """

    def __init__(
        self,
        base_url: str = Constants.DEFAULT_BASE_URL,
        timeout: float = Constants.DEFAULT_TIMEOUT,
        retries: int = Constants.DEFAULT_RETRIES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.retries = retries
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": Constants.USER_AGENT},
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "WebstersClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def url_for(self, term: str) -> str:
        return f"{self.base_url}/words/{quote(term, safe='')}"

    async def _get(self, term: str) -> httpx.Response | None:
        """GET the entry page, retrying throttling, server errors and transport errors.

        Returns None for a 404.
        """
        url = self.url_for(term)
        last_problem = "no attempts made"

        for attempt in range(self.retries + 1):
            if attempt:
                await asyncio.sleep(backoff_delay(attempt - 1))
            try:
                response = await self._client.get(url)
            except httpx.HTTPError as e:
                last_problem = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
                logger.debug(f"  {term}: attempt {attempt + 1} failed ({last_problem})")
                continue

            if response.status_code == 404:
                return None
            if response.status_code == 429 or response.status_code >= 500:
                last_problem = f"HTTP {response.status_code}"
                logger.debug(f"  {term}: attempt {attempt + 1} got {last_problem}")
                continue
            if response.status_code != 200:
                raise DefinitionLookupError(term, f"HTTP {response.status_code}")
            return response

        raise DefinitionLookupError(term, f"{last_problem} after {self.retries + 1} attempt(s)")

    async def lookup(self, term: str) -> Definition | None:
        """Fetch and parse the entry for ``term``.

        Returns:
            Definition, or None if the dictionary has no entry for the term

        Raises:
            DefinitionLookupError: On transport failures, unexpected statuses or
                pages that cannot be parsed
        """
        response = await self._get(term)
        if response is None:
            return None
        try:
            return parse_definition_page(response.text, term)
        except PageParseError as e:
            raise DefinitionLookupError(term, f"unparseable page ({e})") from e
