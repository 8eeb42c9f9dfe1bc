"""Blog AI Studio FastAPI entrypoint: AI endpoints and health check."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.ai import add_error_handlers
from api.ai import router as ai_router
from src.core.config import settings
from src.core.llm.router import build_router

logging.basicConfig(level=getattr(logging, settings.log_level))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One router per process, shared by every request
    app.state.llm_router = build_router(settings)
    if not app.state.llm_router.available_providers:
        logger.warning("No LLM API keys configured; AI endpoints will return 503")
    yield


app = FastAPI(title="Blog AI Studio", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(ai_router)
add_error_handlers(app)


@app.get("/health")
async def health():
    llm_router = getattr(app.state, "llm_router", None)
    return {
        "status": "ok",
        "env": settings.app_env,
        "strategy": llm_router.strategy if llm_router else None,
        "providers": llm_router.available_providers if llm_router else [],
    }
