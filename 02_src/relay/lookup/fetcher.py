"""Product lookup against the banking products API."""

from typing import Any, Protocol, Sequence

import httpx

from ..errors import DataLookupError
from ..logging_config import get_logger

logger = get_logger(__name__)

# (name, value) pairs; names repeat-safe and order-preserving
QueryParams = Sequence[tuple[str, str]]


class IProductLookup(Protocol):
    """Single best-match record lookup."""

    async def lookup(self, query: QueryParams) -> dict[str, Any]:
        """Return the first record matching the query."""
        ...


class ProductLookup:
    """GET the products endpoint with a filter query and client credentials."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        client_id: str,
        client_secret: str,
    ):
        self._client = client
        self._url = url
        self._headers = {
            "X-IBM-Client-ID": client_id,
            "X-IBM-Client-Secret": client_secret,
        }

    async def lookup(self, query: QueryParams) -> dict[str, Any]:
        """
        Fetch the first matching product.

        Raises:
            DataLookupError: On transport failure, non-2xx status, invalid
                JSON, or when the result list is empty.
        """
        try:
            response = await self._client.get(
                self._url, params=list(query), headers=self._headers
            )
            logger.info("Product lookup returned %s", response.status_code)
            response.raise_for_status()
            records = response.json()
        except httpx.HTTPStatusError as e:
            raise DataLookupError(
                f"Product lookup returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise DataLookupError(f"Product lookup failed: {e}") from e
        except ValueError as e:
            raise DataLookupError("Product lookup returned invalid JSON") from e

        if not isinstance(records, list):
            raise DataLookupError("Product lookup did not return a list")
        if not records:
            raise DataLookupError("No products matched the query")
        if not isinstance(records[0], dict):
            raise DataLookupError("Product record is not an object")

        return records[0]
