from __future__ import annotations

import time

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemini_proxy.config import S, Settings, logger
from gemini_proxy.errors import ProxyError, is_client_error
from gemini_proxy.generate_routes import router as generate_router
from gemini_proxy.health_routes import router as health_router
from gemini_proxy.proxy import ImageProxy


async def _proxy_error_handler(req: Request, exc: ProxyError) -> JSONResponse:
    if exc.logged:
        logger.debug("%s %s answered %d: %s", req.method, req.url.path, exc.status_code, exc.message)
    elif is_client_error(exc):
        logger.warning("%s %s rejected: %s", req.method, req.url.path, exc.message)
    else:
        logger.error("%s %s failed (%d): %s", req.method, req.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def _http_error_handler(req: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Framework-level errors (unrouted methods, unknown paths) use the same body shape.
    logger.warning("%s %s rejected: %s", req.method, req.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Build the proxy app.

    ``settings`` defaults to the process-wide ``S``; ``transport`` overrides
    the httpx transport used for the upstream call.
    """

    settings = settings or S
    app = FastAPI(title="Gemini Image Proxy", version="0.1")
    app.state.proxy = ImageProxy(settings, transport=transport)

    if not app.state.proxy.configured:
        logger.warning("startup: GEMINI_API_KEY is not set; generate requests will fail with 500")

    @app.middleware("http")
    async def log_requests(req: Request, call_next):
        start = time.time()
        resp = None
        try:
            resp = await call_next(req)
            return resp
        finally:
            dur_ms = (time.time() - start) * 1000.0
            status = resp.status_code if resp is not None else 500
            logger.info("%s %s -> %d (%.1fms)", req.method, req.url.path, status, dur_ms)

    app.add_exception_handler(ProxyError, _proxy_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(health_router)
    app.include_router(generate_router)
    return app


app = create_app()


def serve() -> None:
    import uvicorn

    uvicorn.run("gemini_proxy.main:app", host=S.PROXY_HOST, port=S.PROXY_PORT)
