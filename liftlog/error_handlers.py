from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from liftlog.repositories.errors import DataImportError, RecordNotFoundError, RepoError
from liftlog.utils.log import logger


def error_response(status_code: int, detail: Any) -> JSONResponse:
    return JSONResponse(
        {"status_code": status_code, "detail": detail}, status_code=status_code
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(exc.status_code, exc.detail)


async def not_found_handler(request: Request, exc: RecordNotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return error_response(404, str(exc))


async def import_error_handler(request: Request, exc: DataImportError):
    logger.warning(f"Rejected import: {exc}")
    return error_response(400, str(exc))


async def repo_error_handler(request: Request, exc: RepoError):
    logger.exception(f"Repository error on {request.method} {request.url.path}")
    return error_response(500, "Storage error")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return error_response(500, "Gremlins.")


def register_error_handlers(app: FastAPI) -> None:
    # handlers take narrower exception types than add_exception_handler declares
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RecordNotFoundError, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DataImportError, import_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RepoError, repo_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
