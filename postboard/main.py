"""
Development content backend.

Serves the two operations the client consumes over HTTP, backed by an
in-memory store. Run with: uvicorn postboard.main:app
"""

from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request
from pydantic import BaseModel, Field

from postboard.backend.memory import InMemoryBackend
from postboard.config import settings
from postboard.utils.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


class PostOut(BaseModel):
    id: int
    title: str
    body: str
    author: str
    timestamp: int


class CreatePostBody(BaseModel):
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not hasattr(app.state, "store"):
        app.state.store = InMemoryBackend()
    logger.info("dev_backend_started", environment=settings.app_env)
    yield
    logger.info("dev_backend_stopped")


app = FastAPI(
    title="Postboard dev backend",
    description="In-memory stand-in for the content service the postboard client talks to.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/posts", response_model=list[PostOut], tags=["Posts"])
async def list_posts(request: Request):
    posts = await request.app.state.store.list_posts()
    return [PostOut(**asdict(post)) for post in posts]


@app.post("/posts", status_code=201, tags=["Posts"])
async def append_post(body: CreatePostBody, request: Request):
    await request.app.state.store.append_post(body.title, body.body, body.author)
    logger.info("dev_backend_post_appended", author=body.author)
    return {"status": "created"}


@app.get("/health", tags=["Health"], openapi_extra={"security": []})
async def health():
    return {
        "status": "ok",
        "service": "postboard-dev-backend",
        "environment": settings.app_env,
    }
