from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

# auth failures carry no body, only the status (and challenge header)
_BODYLESS_STATUSES = {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in _BODYLESS_STATUSES:
        return Response(status_code=exc.status_code, headers=getattr(exc, 'headers', None))
    return await http_exception_handler(request, exc)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug('validation failed on {} {}: {}', request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            'error': 'validation_error',
            'message': 'Request validation failed',
            'details': jsonable_encoder(exc.errors()),
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error('unhandled error on {} {}', request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            'error': 'internal_server_error',
            'message': 'An unexpected error occurred.',
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
