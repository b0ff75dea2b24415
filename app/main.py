from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.handlers import register_exception_handlers
from app.api.v1 import movies, reviews, users
from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import create_tables

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
    logger.info("%s %s started (%s)", settings.TITLE, settings.VERSION, settings.ENVIRONMENT)
    yield


app = FastAPI(
    title=settings.TITLE,
    description="API отзывов о фильмах",
    version=settings.VERSION,
    lifespan=lifespan,
)

# CORS (чтобы фронтенд мог стучаться)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], # Для разработки разрешим все
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(users.router, prefix="/api")
app.include_router(movies.router, prefix="/api")
app.include_router(reviews.router, prefix="/api")

@app.get("/health")
def health_check():
    return {"status": "ok"}

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
