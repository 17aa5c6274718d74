from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from grok_proxy.core.config import settings
from grok_proxy.core.logging import setup_logging
from grok_proxy.core.middleware import (
    BodySizeLimitMiddleware,
    PayloadTooLargeError,
    PermissiveCORSMiddleware,
)
from grok_proxy.api.routes import chat, health
from grok_proxy.llm.utils import grok_client

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    logger.info(f"Grok API Proxy Server running on port {settings.PORT}")
    logger.info(f"CORS enabled for origins: {', '.join(settings.ALLOWED_ORIGINS)}")
    yield
    # Shutdown: release pooled upstream connections
    await grok_client.close()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(BodySizeLimitMiddleware)


@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    # Runs inside the CORS layer, so these 500s keep their CORS headers.
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled error: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(e)},
        )


# Configure CORS (added last so it is the outermost middleware)
app.add_middleware(
    PermissiveCORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
    expose_headers=["Content-Type"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Unreadable request body: {exc.errors()}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
    )


@app.exception_handler(PayloadTooLargeError)
async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    logger.warning(f"Rejected request body over {settings.MAX_BODY_SIZE} bytes")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": exc.detail},
    )


# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(chat.router, tags=["chat"])


def run():
    uvicorn.run(
        "grok_proxy.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
