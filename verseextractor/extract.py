# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import re

from .errors import NoBlockquoteError

# `.` stops at newlines, a blockquote spread over lines never matches
_BLOCKQUOTE_RE = re.compile(r'<blockquote>.*?</blockquote>')
_TAG_RE = re.compile(r'<[^>]*>')

# order matters: `&amp;lt;` must become `<`
_ENTITIES = (
    ('&apos;', "'"),
    ('&quot;', '"'),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
)

_LINE_BREAKS = ('<br>', '<br/>', '<br />')


def find_blockquote(html: str) -> str:
    '''
    Return the first `<blockquote>...</blockquote>` span of `html`, tags included.
    '''
    if match := _BLOCKQUOTE_RE.search(html):
        return match.group(0)
    raise NoBlockquoteError('no blockquote found in the most recent item')

def strip_html(html: str) -> str:
    for entity, char in _ENTITIES:
        html = html.replace(entity, char)
    for br in _LINE_BREAKS:
        html = html.replace(br, '\n')
    return _TAG_RE.sub('', html).strip()

def extract_verse(html: str) -> str:
    return strip_html(find_blockquote(html))
