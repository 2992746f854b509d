from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from althy.api.assistant import router as assistant_router
from althy.api.plan import router as plan_router
from althy.config.settings import settings
from althy.core.logger import setup_logger


def create_app() -> FastAPI:
    """Build the FastAPI application with logging, CORS and routers."""
    setup_logger(settings)

    if not settings.llm_configured:
        logger.warning("OPENAI_API_KEY is not set. /api/plan and /api/openai will return 503.")

    application = FastAPI(title="Althy Plan Service")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(plan_router)
    application.include_router(assistant_router)

    @application.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    logger.info("Application created", client_url=settings.client_url)
    return application


app = create_app()
