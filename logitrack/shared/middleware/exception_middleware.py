# logitrack/shared/middleware/exception_middleware.py

"""
Middleware for centralized exception handling.

Intercepts domain exceptions raised by use cases and adapters and formats
the error response, mapping each ``internal_code`` to an HTTP status.
"""

import time
import logging
import traceback
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from jose.exceptions import JWTError, ExpiredSignatureError

from logitrack.domain.exceptions import DomainException
from logitrack.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "RESOURCE_INACTIVE": status.HTTP_400_BAD_REQUEST,
}


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            log = logger.error if status_code >= 500 else logger.warning
            log(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )

            detail = str(exc)
            if status_code >= 500 and settings.ENVIRONMENT == "production":
                detail = "Internal storage error"

            return JSONResponse(
                status_code=status_code,
                content={
                    "detail": detail,
                    "code": exc.internal_code,
                    "errors": exc.details,
                }
            )

        except (JWTError, ExpiredSignatureError) as exc:
            error_type = "Expired token" if isinstance(exc, ExpiredSignatureError) else "Invalid token"
            logger.warning(
                f"Authentication error: {error_type} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "detail": f"{error_type}. Please login again.",
                    "code": "INVALID_TOKEN"
                }
            )

        except Exception as exc:
            # Unhandled exceptions
            if settings.ENVIRONMENT == "production":
                error_message = "Internal server error"
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path}"
                )
            else:
                error_message = str(exc)
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path}\n"
                    f"Traceback: {traceback.format_exc()}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )
