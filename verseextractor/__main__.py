# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import sys

import uvicorn
from pydantic import ValidationError

from .core import configure_logger, fetch_verse, get_logger
from .errors import VerseError
from .server import app
from .settings import Settings, load_settings


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ValidationError as e:
        get_logger().error(e)
        exit(1)

def serve() -> int:
    configure_logger()
    settings = _load_settings()

    get_logger().info('Starting verse extractor service on port %s', settings.port)
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level='info')
    server = uvicorn.Server(config)
    # exits with status 1 when the listener cannot bind
    server.run()
    return 0

def print_verse() -> int:
    configure_logger()
    settings = _load_settings()
    try:
        verse = fetch_verse(timeout=settings.fetch_timeout)
    except VerseError as error:
        get_logger().error('fetch verse failure with %s', error)
        return 1
    print(verse)
    return 0

def main(argv: list[str] = sys.argv) -> int:
    if argv[1:] == ['verse']:
        return print_verse()
    return serve()

if __name__ == '__main__':
    exit(main() or 0)
