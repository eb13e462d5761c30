from fastapi import FastAPI

from shared.logging_config import configure_logging
from shared.middleware import RequestLoggingMiddleware

from .config import EMPLOYEE_SERVICE_URL, LOG_FORMAT, LOG_LEVEL
from .routes import router

configure_logging("discovery-service", level=LOG_LEVEL, fmt=LOG_FORMAT)

app = FastAPI(title="Discovery Service")

app.add_middleware(RequestLoggingMiddleware)
app.include_router(router)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "discovery-service",
        "record_store_url": EMPLOYEE_SERVICE_URL,
    }
