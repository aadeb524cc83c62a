from contextlib import asynccontextmanager
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from superqi_proxy.config import get_port, load_superqi_settings
from superqi_proxy.logging_config import configure_logging
from superqi_proxy.routes import health_r, superqi_r
from superqi_proxy.services.superqi_client import SuperQiClient

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # missing or malformed credentials abort startup here
    settings = load_superqi_settings()
    client = SuperQiClient.from_settings(settings)
    app.state.superqi_client = client
    logger.info(
        "event=superqi_client_ready base_url=%s client_id=%s timeout_seconds=%s",
        settings.base_url,
        settings.client_id,
        settings.timeout_seconds,
    )
    try:
        yield
    finally:
        client.close()
        app.state.superqi_client = None


app = FastAPI(
    title="SuperQi Proxy",
    version="0.1.0",
    description="Signed proxy for the SuperQi payment provider API.",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await unhandled_exception_handler(request, exc)
    latency_ms = (time.perf_counter() - started) * 1000
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "event=http_request method=%s path=%s status=%s latency_ms=%.1f request_id=%s",
        request.method,
        request.url.path,
        response.status_code,
        latency_ms,
        request_id,
    )
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "event=unhandled_error method=%s path=%s",
        request.method,
        request.url.path,
    )
    return JSONResponse(
        status_code=500,
        content={"message": "server error, check logs"},
    )


app.include_router(health_r.router, prefix="/api/v1")
app.include_router(superqi_r.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=get_port())
