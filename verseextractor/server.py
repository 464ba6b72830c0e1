# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse

from .core import configure_logger, fetch_verse, get_logger
from .errors import VerseError
from .settings import SettingsDeps


router = APIRouter()


# sync handler, FastAPI runs the blocking fetch in its thread pool
@router.head('/verse')
@router.get('/verse')
def get_verse(settings: SettingsDeps) -> Response:
    verse = fetch_verse(timeout=settings.fetch_timeout)
    return PlainTextResponse(verse)


@router.head('/health')
@router.get('/health')
def health() -> Response:
    return PlainTextResponse('OK')


async def _handle_verse_error(request: Request, exc: Exception) -> Response:
    get_logger().error('%s %s failure with %s', request.method, request.url.path, exc)
    return PlainTextResponse(
        f'Error fetching verse: {exc}',
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logger()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        lifespan=lifespan,
    )
    app.include_router(router)
    app.add_exception_handler(VerseError, _handle_verse_error)
    return app

app = create_app()
