"""
FastAPI backend for the Bafuputsi Trading website chat widget.
Run with: uvicorn support_chat.main:app
"""
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pythonjsonlogger import jsonlogger

from support_chat.api import chat
from support_chat.config import settings

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    """Configure root logger: JSON format to stderr, level from settings (e.g. LOG_LEVEL=INFO)."""
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(settings.log_level)
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(lineno)s  %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)


_setup_logging()


def _log_routes(app: FastAPI) -> None:
    """Log all registered routes at startup."""
    logger.info("Registered routes:")
    for route in app.routes:
        if hasattr(route, "methods") and hasattr(route, "path"):
            for method in sorted(route.methods - {"HEAD", "OPTIONS"}):
                logger.info(f"  {method} {route.path}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.llm_configured:
        logger.warning("OPENAI_API_KEY not set: chat will answer with a static reply")
    _log_routes(app)
    yield


app = FastAPI(
    title="Support Chat API",
    description="Website chat widget backend (OpenAI chat completions with static fallbacks)",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

app.include_router(chat.router, prefix="/api/chat", tags=["chat"])


@app.get("/health")
async def health():
    """Health check for Docker/orchestration."""
    return {"status": "ok", "llm": "configured" if settings.llm_configured else "unconfigured"}
