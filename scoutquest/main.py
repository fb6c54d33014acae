import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scoutquest.api.api_v1.api import api_router
from scoutquest.core.config import get_settings
from scoutquest.core.errors import ScoutQuestError
from scoutquest.core.logging import configure_logging

logger = logging.getLogger(__name__)


async def scoutquest_error_handler(request: Request, exc: ScoutQuestError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    if not settings.JWT_SECRET:
        logger.warning(
            "JWT_SECRET is not set: access token signatures are not verified, "
            "so any well-formed token for an admin's user id is accepted"
        )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        redirect_slashes=False,  # Prevent 307 redirects that break CORS
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ScoutQuestError, scoutquest_error_handler)
    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.PROJECT_NAME} API"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
