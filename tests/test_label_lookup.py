"""
Tests for the label-lookup client.

Uses httpx.MockTransport for deterministic testing with no live network calls.
"""
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from wiki_titles.exceptions import LookupParseError, LookupTransportError
from wiki_titles.resolution import LabelLookupClient, encode_label

from conftest import lookup_record, make_lookup_client

RANKED = [
    lookup_record("Barack Obama", 534366, dist=0),
    lookup_record("Barack Obama Sr.", 2503519, dist=4),
    lookup_record("Michelle Obama", 1426669, dist=6),
]


class TestEncoding:
    """Tests for label percent-encoding."""

    def test_spaces_become_percent_20(self):
        assert encode_label("Barack Obama") == "Barack%20Obama"

    def test_slashes_are_encoded(self):
        assert encode_label("AC/DC") == "AC%2FDC"

    def test_tilde_is_escaped_and_asterisk_kept(self):
        """Test the same reserved-character handling as form encoding."""
        assert encode_label("a~b*c") == "a%7Eb*c"
        assert encode_label("Rock & Roll") == "Rock%20%26%20Roll"

    def test_request_url(self):
        """Test that the request goes to <endpoint>/search/<label>."""
        requests = []
        client = LabelLookupClient(
            endpoint="http://labels.test:5000/",
            http_client=make_lookup_client(RANKED, requests=requests),
        )

        client.lookup("Barack Obama")

        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert str(requests[0].url) == "http://labels.test:5000/search/Barack%20Obama"

    def test_request_uses_configured_timeout(self):
        """Test that timeout_seconds is applied to the request."""
        requests = []
        client = LabelLookupClient(
            endpoint="http://labels.test",
            timeout_seconds=2.5,
            http_client=make_lookup_client(RANKED, requests=requests),
        )

        client.lookup("Obama")

        timeout = requests[0].extensions["timeout"]
        assert timeout["connect"] == 2.5
        assert timeout["read"] == 2.5


class TestLookup:
    """Tests for LabelLookupClient.lookup."""

    def test_keeps_only_nearest_candidate(self):
        """Test that only the first ranked record is returned by default."""
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(RANKED))

        results = client.lookup("Barack Obama")

        assert len(results) == 1
        assert results[0].page_id == 534366
        assert results[0].name == "Barack_Obama"
        assert results[0].dist == 0

    def test_limit_exposes_more_candidates(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(RANKED))

        results = client.lookup("Barack Obama", limit=3)

        assert [a.page_id for a in results] == [534366, 2503519, 1426669]

    def test_empty_results(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client([]))

        assert client.lookup("Nothing") == []

    def test_connection_refused_returns_empty(self):
        """Test that transport failures degrade to no results."""
        http_client = make_lookup_client(raise_error=httpx.ConnectError("Connection refused"))
        client = LabelLookupClient("http://labels.test", http_client=http_client)

        assert client.lookup("Obama") == []

    def test_timeout_returns_empty(self):
        http_client = make_lookup_client(raise_error=httpx.ReadTimeout("timed out"))
        client = LabelLookupClient("http://labels.test", http_client=http_client)

        assert client.lookup("Obama") == []

    def test_http_error_returns_empty(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(status_code=500))

        assert client.lookup("Obama") == []

    def test_malformed_json_returns_empty(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(body=b"{not json"))

        assert client.lookup("Obama") == []

    def test_wrong_shape_returns_empty(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(body=b'{"results": 5}'))

        assert client.lookup("Obama") == []

    def test_later_malformed_record_does_not_affect_first(self):
        """Test that candidates past the kept one are never parsed."""
        results = [RANKED[0], {"pageID": "not-a-number"}]
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(results))

        assert [a.page_id for a in client.lookup("Barack Obama")] == [534366]

    def test_concurrent_lookups_do_not_interfere(self):
        """Test that calls sharing one client each get their own answer."""

        def handler(request: httpx.Request) -> httpx.Response:
            label = request.url.path.rsplit("/", 1)[-1]
            page_id = int(label.split("-")[1])
            return httpx.Response(200, json={"results": [lookup_record(label, page_id)]})

        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = LabelLookupClient("http://labels.test", http_client=http_client)
        labels = [f"label-{i}" for i in range(20)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(client.lookup, labels))

        assert [r[0].page_id for r in results] == list(range(20))


class TestCandidates:
    """Tests for the lazy candidate stream."""

    def test_yields_all_candidates_in_rank_order(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(RANKED))

        assert [a.dist for a in client.candidates("Obama")] == [0, 4, 6]

    def test_transport_error_is_retriable(self):
        http_client = make_lookup_client(raise_error=httpx.ConnectError("Connection refused"))
        client = LabelLookupClient("http://labels.test", http_client=http_client)

        with pytest.raises(LookupTransportError) as exc_info:
            list(client.candidates("Obama"))
        assert exc_info.value.retriable

    def test_parse_error(self):
        client = LabelLookupClient("http://labels.test", http_client=make_lookup_client(body=b"[]"))

        with pytest.raises(LookupParseError):
            list(client.candidates("Obama"))
