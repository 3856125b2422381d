from unittest import mock

import requests

from studyguide.corpus import load_corpus
from studyguide.links import broken, check_link, check_links, collect_urls


def _response(status):
    response = mock.Mock()
    response.status_code = status
    return response


def test_collect_urls_skips_code_and_dedupes(write_notes):
    root = write_notes({
        "cloud/a.md": "# A\n\nSee https://aws.amazon.com/lambda/, and [gcp](https://cloud.google.com).\n\n"
                      "```bash\ncurl https://placeholder.invalid/api\n```\n",
        "cloud/b.md": "# B\n\n<https://aws.amazon.com/lambda/>\n",
    })
    urls = collect_urls(load_corpus(root))
    assert urls == ["https://aws.amazon.com/lambda/", "https://cloud.google.com"]


def test_check_link_head_ok():
    session = mock.Mock()
    session.head.return_value = _response(200)
    assert check_link("https://example.com", session) == ("https://example.com", 200)
    session.get.assert_not_called()


def test_check_link_falls_back_to_get():
    session = mock.Mock()
    session.head.return_value = _response(405)
    session.get.return_value = _response(200)
    assert check_link("https://example.com", session, timeout=3) == ("https://example.com", 200)
    session.get.assert_called_once_with("https://example.com", timeout=3, allow_redirects=True)


def test_check_link_error_is_reported_as_text():
    session = mock.Mock()
    session.head.side_effect = requests.ConnectionError("refused")
    url, status = check_link("https://down.example", session)
    assert url == "https://down.example"
    assert status == "refused"


def test_check_links_and_broken():
    session = mock.Mock()
    session.head.side_effect = lambda url, **kw: _response(404 if "missing" in url else 200)
    session.get.side_effect = lambda url, **kw: _response(404)
    results = check_links(["https://ok.example", "https://missing.example"], workers=2, session=session)
    assert results == [("https://ok.example", 200), ("https://missing.example", 404)]
    assert broken(results) == [("https://missing.example", 404)]
    assert broken([("u", "timed out")]) == [("u", "timed out")]
    assert check_links([]) == []
