# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import logging
import xml.etree.ElementTree as et
from functools import cache

import requests

from .errors import EmptyFeedError, FetchError, ParseError
from .extract import extract_verse
from .models import Feed, Item

FEED_URL = 'https://www.fighterverses.com/blog-feed.xml'


@cache
def get_logger() -> logging.Logger:
    return logging.getLogger('verseextractor')

def configure_logger() -> None:
    logging.basicConfig(
        format='%(asctime)s [%(levelname)s] - %(name)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p',
        level=logging.INFO
    )
    get_logger().setLevel(logging.INFO)

def _local_name(tag: str) -> str:
    # `{http://purl.org/rss/1.0/modules/content/}encoded` -> `encoded`
    return tag.rpartition('}')[2]

def _read_element_text(el: et.Element | None) -> str:
    if el is not None and el.text:
        return el.text
    return ''

def _find_by_local_name(parent: et.Element, name: str) -> et.Element | None:
    for child in parent:
        if _local_name(child.tag) == name:
            return child
    return None

def _element_to_item(el: et.Element) -> Item:
    return {
        'title': _read_element_text(el.find('title')),
        'link': _read_element_text(el.find('link')),
        'description': _read_element_text(el.find('description')),
        'pub_date': _read_element_text(el.find('pubDate')),
        'content_encoded': _read_element_text(_find_by_local_name(el, 'encoded')),
    }

def fetch_feed_body(url: str, *, timeout: float | None = None) -> bytes:
    '''
    Download `url` and return the raw body.

    Any status other than 200 is a failure, the body is not read in that case.
    '''
    logger = get_logger().getChild('fetch')

    try:
        r = requests.get(url, stream=True, timeout=timeout)
    except requests.RequestException as error:
        raise FetchError(f'error fetching RSS feed: {error}') from error

    with r:
        logger.info('GET %s returned %s', url, r.status_code)
        if r.status_code != 200:
            raise FetchError(f'received status code {r.status_code}')

        try:
            return r.content
        except requests.RequestException as error:
            raise FetchError(f'error reading response body: {error}') from error

def parse_feed(body: bytes | str) -> Feed:
    # expat raises ValueError for declared multi-byte encodings such as GBK
    try:
        root = et.fromstring(body)
    except (et.ParseError, ValueError) as error:
        raise ParseError(f'error parsing XML: {error}') from error

    if _local_name(root.tag) != 'rss':
        raise ParseError(f'error parsing XML: expected element type <rss> but have <{root.tag}>')

    channel = root.find('channel')
    if channel is None:
        return {'title': '', 'link': '', 'description': '', 'items': []}

    return {
        'title': _read_element_text(channel.find('title')),
        'link': _read_element_text(channel.find('link')),
        'description': _read_element_text(channel.find('description')),
        'items': [_element_to_item(x) for x in channel.findall('item')],
    }

def fetch_latest_item(url: str = FEED_URL, *, timeout: float | None = None) -> Item:
    '''
    Fetch the feed at `url` and return its first (most recent) item.
    '''
    feed = parse_feed(fetch_feed_body(url, timeout=timeout))
    get_logger().info('total found %s items', len(feed['items']))
    if not feed['items']:
        raise EmptyFeedError('no items found in the feed')
    return feed['items'][0]

def fetch_verse(url: str = FEED_URL, *, timeout: float | None = None) -> str:
    item = fetch_latest_item(url, timeout=timeout)
    return extract_verse(item['content_encoded'])
