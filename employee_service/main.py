import structlog
from fastapi import FastAPI

from shared.logging_config import configure_logging
from shared.middleware import RequestLoggingMiddleware

from .config import LOG_FORMAT, LOG_LEVEL
from .routes import router
from .rabbitmq import publisher

configure_logging("employee-service", level=LOG_LEVEL, fmt=LOG_FORMAT)
logger = structlog.get_logger()

app = FastAPI(title="Employee Service")

app.add_middleware(RequestLoggingMiddleware)
app.include_router(router)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "employee-service",
        "events_enabled": publisher.enabled,
    }


@app.on_event("startup")
async def startup():
    # Never crash service if RabbitMQ is temporarily unavailable
    try:
        await publisher.connect()
    except Exception as e:
        logger.warning("rabbitmq unavailable at startup; continuing without events", error=str(e))


@app.on_event("shutdown")
async def shutdown():
    try:
        await publisher.close()
    except Exception as e:
        logger.warning("rabbitmq close failed", error=str(e))
