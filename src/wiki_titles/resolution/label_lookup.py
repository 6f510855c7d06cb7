"""
Client for the label-lookup fuzzy search service.

The service (https://github.com/brmson/label-lookup) is tolerant to wrong
capitalization, omitted interpunction and typos, and returns enwiki article
metadata ranked by edit distance.
"""
import json
import logging
from itertools import islice
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config import DEFAULT_LOOKUP_ENDPOINT
from ..exceptions import LabelLookupError, LookupParseError, LookupTransportError
from ..models import Article
from ..schemas import LookupRecord, LookupResponse

logger = logging.getLogger(__name__)


def encode_label(label: str) -> str:
    """
    Percent-encode a label as a single path segment.

    Only letters, digits and ".-_*" stay literal; spaces become %20 and "~"
    is escaped as well, which is what the label-lookup service expects.
    """
    return quote(label, safe="*").replace("~", "%7E")


class LabelLookupClient:
    """
    Fuzzy label search over HTTP.

    The client keeps no per-call state. Without an injected httpx.Client
    every call opens and closes its own connection; an injected client is
    shared and httpx.Client is safe to use from several threads.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_LOOKUP_ENDPOINT,
        timeout_seconds: float = 5.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the lookup client.

        :param endpoint: Base URL of the service, e.g. http://host:5000
        :param timeout_seconds: Per-request timeout
        :param http_client: Optional httpx.Client for dependency injection (testing)
        """
        self.endpoint = endpoint.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._http_client = http_client

    def search_url(self, label: str) -> str:
        return f"{self.endpoint}/search/{encode_label(label)}"

    def candidates(self, label: str) -> Iterator[Article]:
        """
        Lazily yield all ranked candidates for a label, nearest first.

        The response is fetched in one request; records are validated one
        at a time as they are consumed, so candidates past a caller's limit
        are never parsed.

        :param label: Label to search for
        :return: Iterator of Articles
        :raises LookupTransportError: On connection errors, timeouts and HTTP errors
        :raises LookupParseError: On malformed responses
        """
        for raw in self._fetch_results(label):
            try:
                record = LookupRecord.model_validate(raw)
            except ValidationError as exc:
                raise LookupParseError(f"Invalid lookup record {raw!r}: {exc}") from exc
            article = Article.from_lookup_record(record)
            logger.debug(
                f"Server returned: d{article.dist} ~{article.matched_label} "
                f"[{article.canon_label}] {article.name} {article.page_id}"
            )
            yield article

    def lookup(self, label: str, limit: int = 1) -> List[Article]:
        """
        Return the ``limit`` nearest candidates for a label.

        By default only the single nearest concept is kept. Failures are
        logged and reported as no results.

        :param label: Label to search for
        :param limit: Maximum number of candidates to keep
        :return: List of at most ``limit`` Articles
        """
        try:
            return list(islice(self.candidates(label), limit))
        except LabelLookupError as exc:
            logger.warning(f"Label lookup failed for {label!r}: {exc}")
            return []

    def _fetch_results(self, label: str) -> List[Dict[str, Any]]:
        url = self.search_url(label)

        client = self._http_client
        should_close = False
        if client is None:
            client = httpx.Client(timeout=self.timeout_seconds)
            should_close = True
        try:
            response = client.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.content
        except httpx.TimeoutException as exc:
            raise LookupTransportError(f"Timed out after {self.timeout_seconds}s: {url}") from exc
        except httpx.HTTPStatusError as exc:
            raise LookupTransportError(
                f"HTTP {exc.response.status_code} from {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise LookupTransportError(f"Request to {url} failed: {exc}") from exc
        finally:
            if should_close:
                client.close()

        try:
            envelope = LookupResponse.model_validate(json.loads(payload))
        except (ValueError, ValidationError) as exc:
            raise LookupParseError(f"Malformed lookup response from {url}: {exc}") from exc
        return envelope.results
