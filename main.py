# In main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from repository.comments import CommentRepository
from repository.posts import PostRepository
from repository.storage import StorageMap
from routers import posts
from routers.responses import json_error
from settings import settings

logger = logging.getLogger('uvicorn.error')


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: Initializing repositories...")
    app.state.post_repository = PostRepository(StorageMap())
    app.state.comment_repository = CommentRepository(StorageMap())
    logger.info("In-memory post and comment repositories initialized.")

    yield
    logger.info(
        f"Application shutdown: dropping {app.state.post_repository.count()} post(s) "
        f"and {app.state.comment_repository.count()} comment(s)."
    )
    app.state.post_repository = None
    app.state.comment_repository = None


app = FastAPI(lifespan=lifespan)
app.include_router(posts.router)

app.add_middleware(
    TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Routing errors and dependency failures use the same envelope as the handlers
    return json_error(str(exc.detail), exc.status_code, headers=exc.headers)


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)


if __name__ == "__main__":
    run()
