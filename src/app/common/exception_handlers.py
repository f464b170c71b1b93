"""例外をHTTPレスポンスへ変換するハンドラ群."""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.common.exceptions import HeroNotFoundError
from app.common.log_prefix import LogPrefix

logger = logging.getLogger(__name__)


def _status_response(status_code: int) -> JSONResponse:
    """ステータスの理由句だけを本文に持つレスポンスを生成."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": HTTPStatus(status_code).phrase},
    )


async def hero_not_found_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """HeroNotFoundError を 404 に変換する."""
    logger.info(f"{LogPrefix.HERO_API} {request.method} {request.url.path}: {exc}")
    return _status_response(status.HTTP_404_NOT_FOUND)


async def request_validation_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """リクエストの形式不正を 400 に変換する."""
    logger.info(
        f"{LogPrefix.HERO_API} {request.method} {request.url.path}: "
        f"invalid request {exc}"
    )
    return _status_response(status.HTTP_400_BAD_REQUEST)


async def sqlalchemy_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """永続化層の障害を 500 に変換する."""
    logger.error(
        f"{LogPrefix.HERO_API} {request.method} {request.url.path}: "
        f"database error {exc}",
        exc_info=exc,
    )
    return _status_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


async def unhandled_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """その他の想定外の例外を 500 に変換する."""
    logger.error(
        f"{LogPrefix.HERO_API} {request.method} {request.url.path}: "
        f"unhandled error {exc!r}",
        exc_info=exc,
    )
    return _status_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """アプリケーションに例外ハンドラを登録する.

    Args:
    ----
        app: FastAPIアプリケーション

    """
    app.add_exception_handler(HeroNotFoundError, hero_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    # Exception はServerErrorMiddlewareで処理され、応答後に再送出される
    app.add_exception_handler(Exception, unhandled_error_handler)
