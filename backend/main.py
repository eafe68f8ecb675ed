# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
FastAPI application factory.

Responsibilities
----------------
* Instantiate the FastAPI app.
* Register CORS middleware (origins from settings.cors_origins).
* Render every error as ``{"error": <message>}``.
* Mount the three feature routers (auth, passwords, activity).
* Expose a /health endpoint for container liveness checks.

Run from ``backend/``:  uvicorn main:app
"""

import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from auth.router import router as auth_router
from passwords.router import router as passwords_router
from activity.router import router as activity_router
from core.config import settings
from core.errors import VaultError
from core.logger import logger

app = FastAPI(title="TriVault", version="1.0.0")

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# ---------------------------------------------------------------------------
# Request-logging middleware
# ---------------------------------------------------------------------------
# Logs every inbound request: method, path, client IP, status, latency.
# Bodies are never echoed – they carry login and vault passwords.


class _RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, client IP, response status and latency (ms)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        client_ip = request.client.host if request.client else "unknown"

        logger.info(
            "%s %s | client=%s status=%d latency=%.1fms",
            request.method,
            request.url.path,
            client_ip,
            response.status_code,
            elapsed_ms,
        )
        return response


app.add_middleware(_RequestLogMiddleware)

# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------
# Client contract: every non-2xx body is {"error": "<message>"}.


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


@app.exception_handler(VaultError)
async def _vault_error(request: Request, exc: VaultError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error(exc.status_code, exc.message, headers)


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    # Unknown routes, wrong methods, missing bearer token
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def _request_invalid(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    return _error(
        status.HTTP_400_BAD_REQUEST,
        f"{where}: {message}" if where else message,
    )


@app.exception_handler(Exception)
async def _unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(auth_router)
app.include_router(passwords_router)
app.include_router(activity_router)

# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------


@app.on_event("startup")
async def _on_startup():
    logger.info("TriVault service starting up")


@app.on_event("shutdown")
async def _on_shutdown():
    logger.info("TriVault service shutting down")


@app.get("/health")
def health():
    return {"status": "ok"}
