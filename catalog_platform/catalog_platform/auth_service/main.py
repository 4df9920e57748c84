"""
Auth Service - registration, login and user administration
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .db import init_db
from .routes import auth, auth_events, users
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
    title="Auth Service",
    description="User authentication and identity for the catalog platform",
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

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(auth_events.router)


@app.get("/health")
def health():
    return {"service": "auth-service", "status": "ok"}
