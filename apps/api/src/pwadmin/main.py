from fastapi import FastAPI

from pwadmin.api.v1.router import router as v1_router
from pwadmin.core.config import settings
from pwadmin.core.logging import configure_logging
from pwadmin.db.models import build_registry


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.APP_NAME)
    app.state.registry = build_registry()
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
