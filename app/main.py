# Main application file



import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.database import check_connection, init_db
from app.core.rate_limiter import limiter
from app.core.config import settings
from app.core.error_handlers import register_exception_handlers
from app.core.response import success
from app.routers import (
    categories,
    products,
    checkout,
    reports,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("app")


# STARTUP: the store must be reachable, otherwise the process does not start

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        check_connection()
        init_db()
    except Exception:
        logger.critical("Error connecting to database, aborting startup", exc_info=True)
        raise

    yield


# APP INIT

app = FastAPI(
    title="Kasir API",
    description="Cashier back office: products, categories, checkout and sales reports",
    version="1.0.0",
    lifespan=lifespan,
)



# CORS

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter


# ERROR ENVELOPES (including rate limit and unhandled errors)

register_exception_handlers(app)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

app.include_router(categories.router)
app.include_router(products.router)
app.include_router(checkout.router)
app.include_router(reports.router)



# HEALTH

@app.get("/health")
def health():
    return success("API Running")


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=False)
