"""
Product Service - catalog management with ownership checks
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .db import init_db
from .routes import products
from ..shared.config import settings
from ..shared.handlers import add_request_timeout, register_exception_handlers
from ..shared.logging_config import configure_logging

configure_logging()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database on startup"""
    init_db()
    yield


app = FastAPI(
    title="Product Service",
    description="Product catalog for the catalog platform",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
add_request_timeout(app)
register_exception_handlers(app)

app.include_router(products.router)


@app.get("/health")
def health():
    return {"service": "product-service", "status": "ok"}
