"""Log poster that ships log objects to an HTTP collector."""

import httpx

from ..config import DEFAULT_POSTER_TIMEOUT
from ..errors import LogPostError
from ..logging_config import get_logger
from ..models import ServerLogObject

logger = get_logger(__name__)


class HttpLogPoster:
    """POSTs each log object as JSON. No batching, no retry."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_POSTER_TIMEOUT,
        client: httpx.Client | None = None,
        headers: dict[str, str] | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._headers = headers or {}
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def post_log(self, server_log: ServerLogObject) -> None:
        """Send one log object; raises LogPostError when delivery fails."""
        try:
            response = self._client.post(
                self._url,
                json=server_log.to_payload(),
                headers=self._headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Failed to post log %r: %s", server_log.title, e)
            raise LogPostError(f"Log post to {self._url} failed: {e}") from e

        logger.debug("Posted log %r (%s)", server_log.title, response.status_code)

    def close(self) -> None:
        """Close the HTTP client if this poster created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpLogPoster":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
