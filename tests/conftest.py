# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import pytest
import requests

RSS_TEMPLATE = '''<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
<channel>
<title>Fighter Verses</title>
<link>https://www.fighterverses.com/blog</link>
<description>Memorize Scripture</description>
{items}
</channel>
</rss>'''

ITEM_TEMPLATE = '''<item>
<title>{title}</title>
<link>https://www.fighterverses.com/post/{title}</link>
<description>plain description</description>
<pubDate>Mon, 19 Oct 2026 08:00:00 GMT</pubDate>
<content:encoded><![CDATA[{content}]]></content:encoded>
</item>'''


class FakeResponse:
    def __init__(self, status_code: int = 200, body: bytes = b'', read_error: Exception | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self._read_error = read_error
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.closed = True

    @property
    def content(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body


@pytest.fixture
def make_rss():
    '''
    Build an RSS document, one item per encoded content, newest first.
    '''
    def make(*contents: str) -> bytes:
        items = '\n'.join(
            ITEM_TEMPLATE.format(title=f'week-{i}', content=content) for i, content in enumerate(contents)
        )
        return RSS_TEMPLATE.format(items=items).encode('utf-8')
    return make


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def serve_feed(monkeypatch):
    '''
    Replace `requests.get` so it answers with the given response, or raises the given error.
    '''
    calls: list[dict] = []

    def install(response: FakeResponse | Exception):
        def fake_get(url, **kwargs):
            calls.append({'url': url, **kwargs})
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(requests, 'get', fake_get)
        return calls

    return install
