"""
External link checks.

HEAD first for speed, falling back to GET for sites that reject HEAD.
Requests run in a thread pool; results are (url, status code or error text).
"""

import re
from concurrent.futures import ThreadPoolExecutor

import requests

from .config import LINK_TIMEOUT, LINK_WORKERS, USER_AGENT
from .corpus import Corpus

URL_RE = re.compile(r'https?://[^\s<>"\'\]\}\)`]+')


def collect_urls(corpus: Corpus) -> list[str]:
    """Unique http(s) URLs across the corpus, in first-seen order."""
    urls = []
    for doc in corpus:
        # Listings often hold placeholder hosts; only prose URLs count
        prose = doc.text
        for block in doc.code_blocks:
            if block.code:
                prose = prose.replace(block.code, "")
        for url in URL_RE.findall(prose):
            urls.append(url.rstrip(".,;:"))
    return list(dict.fromkeys(urls))


def make_session(user_agent: str = USER_AGENT) -> requests.Session:
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    return session


def check_link(url: str, session: requests.Session | None = None, timeout: float = LINK_TIMEOUT):
    session = session or make_session()
    try:
        response = session.head(url, timeout=timeout, allow_redirects=True)
        if response.status_code >= 400:
            response = session.get(url, timeout=timeout, allow_redirects=True)
        return url, response.status_code
    except requests.RequestException as e:
        return url, str(e)


def check_links(urls, workers: int = LINK_WORKERS, timeout: float = LINK_TIMEOUT,
                session: requests.Session | None = None) -> list[tuple[str, int | str]]:
    urls = list(urls)
    if not urls:
        return []
    session = session or make_session()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda u: check_link(u, session, timeout), urls))


def broken(results) -> list[tuple[str, int | str]]:
    return [r for r in results if not isinstance(r[1], int) or r[1] >= 400]
