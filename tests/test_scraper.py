"""
Tests for page fetching and text extraction (no network)
"""

from types import SimpleNamespace

import pytest
import requests

from utils.scraper import ContentFetchError, fetch_page_content, parse_html

HTML = """
<html>
  <head>
    <title>Acme Consulting</title>
    <meta name="Description" content=" We help small businesses grow. ">
    <style>.hero { color: red; }</style>
  </head>
  <body>
    <nav><a href="/">Home</a></nav>
    <main>
      <h1>Our mission</h1>
      <p>Our mission is to empower   small businesses.</p>
      <img src="team.jpg" alt="Team">
      <script>console.log("tracking");</script>
      <a href="/contact">Contact us</a>
    </main>
  </body>
</html>
"""


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def test_parse_html_extracts_main_text_and_metadata():
    page = parse_html("https://acme.test", HTML)
    assert page.title == "Acme Consulting"
    assert page.meta_description == "We help small businesses grow."
    assert page.text == "Our mission Our mission is to empower small businesses. Contact us"
    assert "tracking" not in page.text
    assert "color" not in page.text
    assert page.word_count == len(page.text.split())
    assert page.image_count == 1
    assert page.link_count == 2
    assert page.final_url == "https://acme.test"


def test_parse_html_without_main_uses_body():
    page = parse_html("https://acme.test", "<html><body><p>Just a body</p></body></html>")
    assert page.text == "Just a body"
    assert page.title == ""
    assert page.meta_description == ""


def test_parse_empty_html():
    page = parse_html("https://acme.test", "")
    assert page.text == ""
    assert page.word_count == 0


def test_fetch_page_content_success():
    response = SimpleNamespace(status_code=200, text=HTML, url="https://acme.test/home")
    session = FakeSession(response=response)

    page = fetch_page_content("https://acme.test", timeout=5, session=session)

    assert page.final_url == "https://acme.test/home"
    assert page.status_code == 200
    assert "empower small businesses" in page.text
    url, kwargs = session.requests[0]
    assert url == "https://acme.test"
    assert kwargs["timeout"] == 5
    assert "User-Agent" in kwargs["headers"]


def test_fetch_page_content_non_success_status():
    response = SimpleNamespace(status_code=404, text="Not found", url="https://acme.test/missing")
    with pytest.raises(ContentFetchError) as exc_info:
        fetch_page_content("https://acme.test/missing", session=FakeSession(response=response))
    assert exc_info.value.status_code == 404
    assert "HTTP 404" in str(exc_info.value)


def test_fetch_page_content_network_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("connection refused"))
    with pytest.raises(ContentFetchError) as exc_info:
        fetch_page_content("https://acme.test", session=session)
    assert exc_info.value.status_code is None
    assert exc_info.value.url == "https://acme.test"
