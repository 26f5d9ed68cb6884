"""HTTP client for published Google Sheets CSV exports."""

import httpx

from sheet2rss.config import DEFAULT_SOURCE_URL_TEMPLATE
from sheet2rss.errors import FetchError


def export_url(key: str, template: str = DEFAULT_SOURCE_URL_TEMPLATE) -> str:
    """Return the CSV export URL for a spreadsheet key."""
    return template.format(key=key)


class SheetClient:
    """Client that downloads a spreadsheet as CSV.

    Every call issues a single GET request; there are no retries.
    """

    def __init__(self, url: str, timeout: float = 30.0):
        """Initialize the client.

        Args:
            url: Full CSV export URL
            timeout: Request timeout in seconds
        """
        self.url = url
        self._timeout = timeout

    async def fetch_csv(self) -> bytes:
        """Download the spreadsheet export.

        Redirects are followed, since the export endpoint answers with a
        redirect to the file host.

        Returns:
            The raw response body

        Raises:
            FetchError: On transport failures and non-success status codes
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, follow_redirects=True
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Spreadsheet export returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch spreadsheet export: {e}") from e
