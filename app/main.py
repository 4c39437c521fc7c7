from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.client.api_client import ApiClient
from app.config import settings
from app.exception_handlers import register_exception_handlers
from app.imports.orchestrator import ImportOrchestrator
from app.imports.registry import build_default_registry
from app.imports.router import router as imports_router
from app.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    client = ApiClient(timeout_seconds=settings.request_timeout_seconds)
    app.state.registry = build_default_registry(client)
    app.state.orchestrator = ImportOrchestrator(app.state.registry)
    yield
    client.close()


app = FastAPI(
    title="Bulk Import Service",
    description="Validate spreadsheet uploads and load them into the platform API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(imports_router, prefix="/api/v1/imports", tags=["imports"])


@app.get("/api/v1/health")
async def health():
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
