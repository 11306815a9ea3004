"""Tracklist web page source.

Streams the page over HTTP straight into the table scanner; the body is
never held in memory as a whole.
"""

import httpx

from ..errors import FetchError
from ..logging import get_logger
from ..models import Track
from ..scraper import ColumnLayout, extract_tracks

logger = get_logger(__name__)


class PageSource:
    """A single HTML page listing tracks in nested tables."""

    def __init__(
        self,
        url: str,
        layout: ColumnLayout | None = None,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the page source.

        Args:
            url: Address of the tracklist page
            layout: Column layout of the track tables
            timeout: Request timeout in seconds
            client: Optional preconfigured HTTP client
        """
        self.url = url
        self.layout = layout or ColumnLayout()
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
        )

    @property
    def name(self) -> str:
        return httpx.URL(self.url).host or self.url

    def fetch_tracks(self) -> list[Track]:
        """Fetch the page and extract its tracks.

        Raises:
            FetchError: If the request fails or the status is not 200
            ExtractionError: If the page holds no usable track table
        """
        logger.info("fetching_page", url=self.url)

        try:
            with self._client.stream("GET", self.url) as response:
                if response.status_code != httpx.codes.OK:
                    raise FetchError(
                        f"unexpected status code: {response.status_code}",
                        {"url": self.url, "status_code": response.status_code},
                    )
                tracks = extract_tracks(response.iter_text(), self.layout)
        except httpx.HTTPError as e:
            logger.error("page_fetch_failed", url=self.url, error=str(e))
            raise FetchError(f"failed to fetch URL: {e}", {"url": self.url}) from e

        logger.info("page_tracks_extracted", url=self.url, count=len(tracks))
        return tracks

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "PageSource":
        return self

    def __exit__(self, *args) -> None:
        self.close()
