from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from forumserver.core.config import get_settings
from forumserver.core.logging import configure_logging
from forumserver.db.session import AsyncSessionLocal, engine
from forumserver.services.content import ContentService
from forumserver.api.routers import (
    health,
    threads,
    containers,
    messages,
)

settings = get_settings()
configure_logging(settings.log_level, service=settings.app_name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.content_service = await ContentService.start(
        engine, AsyncSessionLocal, auto_migrate=settings.auto_migrate
    )
    yield
    await engine.dispose()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

def _include(router):
    app.include_router(router, prefix=settings.api_prefix)

_include(health.router)
_include(threads.router)
_include(containers.router)
_include(messages.router)

@app.get("/")
async def root():
    return {"service": settings.app_name, "status": "ok"}
