# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------


class VerseError(Exception):
    pass


class FetchError(VerseError):
    '''
    Raised when the feed cannot be downloaded.
    '''


class ParseError(VerseError):
    '''
    Raised when the downloaded body is not an RSS document.
    '''


class EmptyFeedError(VerseError):
    pass


class NoBlockquoteError(VerseError):
    pass
