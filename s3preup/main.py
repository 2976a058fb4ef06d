from fastapi import FastAPI

from s3preup.api.routers import uploads as uploads_router
from s3preup.core.config import get_settings
from s3preup.core.logging_config import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        debug=settings.debug,
        title="S3 Presigned Upload API",
    )

    app.include_router(uploads_router.router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
