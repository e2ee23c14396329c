"""
Logging delle richieste HTTP: una riga per richiesta, errori non gestiti con
traceback, avviso per le richieste lente.
"""
import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Assegna un X-Request-ID ad ogni richiesta e misura X-Process-Time.

    Le richieste oltre slow_request_threshold secondi vengono loggate a WARNING.
    """

    def __init__(self, app, slow_request_threshold: float = 1.0, verbose: bool = False):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.verbose = verbose

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex
        route = f"{request.method} {request.url.path}"
        started_at = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"{route} failed after {time.perf_counter() - started_at:.3f}s: {type(exc).__name__}",
                extra={"request_id": request_id, "error_type": type(exc).__name__},
                exc_info=True
            )
            raise

        elapsed = time.perf_counter() - started_at
        context = {"request_id": request_id, "status_code": response.status_code, "process_time": elapsed}

        if elapsed > self.slow_request_threshold:
            logger.warning(f"Slow request {route}: {elapsed:.3f}s", extra=context)
        elif self.verbose:
            logger.info(f"{route} -> {response.status_code} ({elapsed:.3f}s)", extra=context)

        response.headers["X-Process-Time"] = f"{elapsed:.6f}"
        response.headers["X-Request-ID"] = request_id
        return response
