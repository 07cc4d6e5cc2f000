"""Unit tests for entry page parsing and the HTTP client."""

import asyncio

import httpx
import pytest

from lexifetch.core import DefinitionLookupError
from lexifetch.lookup import PageParseError, WebstersClient, parse_definition_page, split_lead_paragraph

ENTRY_PAGE = """
<html><body>
<h1>Run</h1>
<meaning><p><i>v. i.</i> <sn><b>1.</b></sn> <def>To move swiftly.</def></p></meaning>
<meaning><p><i>n.</i> <def>The act of running.</def></p></meaning>
</body></html>
"""

NOT_FOUND_PAGE = '<html><body><h1 class="http-status">404</h1><p>Not found</p></body></html>'


class TestSplitLeadParagraph:
    """Breaking the part-of-speech lead off the sense text."""

    def test_splits_before_sense_number(self):
        html = "<p>v. i. <sn><b>1.</b></sn> To move</p>"
        assert split_lead_paragraph(html) == "<p>v. i. </p><p><sn><b>1.</b></sn> To move</p>"

    def test_splits_before_definition_without_sense_number(self):
        html = "<p>n. <def>The act</def></p>"
        assert split_lead_paragraph(html) == "<p>n. </p><p><def>The act</def></p>"

    def test_prefers_sense_number_over_definition(self):
        html = "<p>a <def>x</def> <sn><b>1.</b></sn></p>"
        assert split_lead_paragraph(html).index("</p><p>") == html.index("<sn><b>")

    def test_leaves_plain_text_alone(self):
        assert split_lead_paragraph("<p>plain</p>") == "<p>plain</p>"


class TestParseDefinitionPage:
    """Extracting a Definition from an entry page."""

    def test_one_block_per_meaning(self):
        definition = parse_definition_page(ENTRY_PAGE, "run")

        assert definition.term == "run"
        assert definition.headword == "Run"
        assert len(definition.blocks) == 2
        assert "</p><p><sn><b>1.</b></sn>" in definition.blocks[0]
        assert "</p><p><def>The act of running.</def>" in definition.blocks[1]

    def test_not_found_page(self):
        assert parse_definition_page(NOT_FOUND_PAGE, "xyzzy") is None

    def test_page_without_meanings_is_not_found(self):
        assert parse_definition_page("<html><h1>Xyzzy</h1></html>", "xyzzy") is None

    def test_page_without_headword_is_a_parse_error(self):
        with pytest.raises(PageParseError):
            parse_definition_page("<html><p>maintenance</p></html>", "run")


@pytest.fixture
def no_backoff(monkeypatch):
    monkeypatch.setattr("lexifetch.lookup.client.backoff_delay", lambda attempt: 0)


def lookup_with(handler, term="run", retries=2):
    async def _run():
        async with WebstersClient(
            base_url="https://dict.test",
            retries=retries,
            transport=httpx.MockTransport(handler),
        ) as client:
            return await client.lookup(term)

    return asyncio.run(_run())


class TestWebstersClient:
    """HTTP status handling, retries and error mapping."""

    def test_fetches_and_parses_entry(self):
        requested = []

        def handler(request):
            requested.append(str(request.url))
            return httpx.Response(200, text=ENTRY_PAGE)

        definition = lookup_with(handler)

        assert requested == ["https://dict.test/words/run"]
        assert definition.term == "run"
        assert len(definition.blocks) == 2

    def test_quotes_term_in_url(self):
        requested = []

        def handler(request):
            requested.append(request.url.raw_path.decode())
            return httpx.Response(404)

        lookup_with(handler, term="a/b c")

        assert requested == ["/words/a%2Fb%20c"]

    def test_404_status_is_not_found(self):
        assert lookup_with(lambda request: httpx.Response(404)) is None

    def test_not_found_page_is_not_found(self):
        assert lookup_with(lambda request: httpx.Response(200, text=NOT_FOUND_PAGE)) is None

    def test_retries_server_errors(self, no_backoff):
        """A 503 followed by a good page resolves normally."""
        responses = iter([httpx.Response(503), httpx.Response(200, text=ENTRY_PAGE)])

        definition = lookup_with(lambda request: next(responses))

        assert definition is not None

    def test_gives_up_after_retry_budget(self, no_backoff):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500)

        with pytest.raises(DefinitionLookupError) as exc_info:
            lookup_with(handler, retries=2)

        assert len(calls) == 3
        assert "HTTP 500" in exc_info.value.detail

    def test_transport_error_is_lookup_error(self, no_backoff):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DefinitionLookupError) as exc_info:
            lookup_with(handler, retries=1)

        assert "ConnectError" in exc_info.value.detail

    def test_client_error_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(403)

        with pytest.raises(DefinitionLookupError):
            lookup_with(handler)

        assert len(calls) == 1

    def test_unparseable_page_is_lookup_error(self):
        with pytest.raises(DefinitionLookupError) as exc_info:
            lookup_with(lambda request: httpx.Response(200, text="<html>captcha</html>"))

        assert "unparseable" in exc_info.value.detail
