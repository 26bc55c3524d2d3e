"""
FastAPI Application - Trend Radar API

Run with:
    uvicorn api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from llm import has_api_key
from utils import logger, init_logging
from .routes import router

APP_NAME = "Trend Radar"
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    rerank = settings.LLM_RERANK_ENABLED and has_api_key()
    logger.info(
        f"{APP_NAME} API up: rerank={'on' if rerank else 'off'} ({settings.LLM_PROVIDER}), "
        f"news={'on' if settings.NEWS_API_KEY else 'off'}, "
        f"pool={settings.POLYMARKET_POOL_SIZE} events / {settings.POLYMARKET_CACHE_SECONDS}s"
    )
    yield
    logger.info(f"{APP_NAME} API stopped")


def create_app() -> FastAPI:
    init_logging(app_name="api")

    application = FastAPI(
        title=APP_NAME,
        description="News trends, marketability scoring and prediction-market event matching",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    application.include_router(router, prefix="/api")

    @application.get("/")
    async def root():
        return {"name": APP_NAME, "version": APP_VERSION, "status": "running"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
