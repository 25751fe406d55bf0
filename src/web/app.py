"""
Application FastAPI de Catalogue.

Initialise l'application web avec le Container DI, configure le logging,
enregistre les gestionnaires d'erreurs et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container
from ..core.exceptions import PersistenceError
from ..logging_config import configure_logging
from .routes.content import router as content_router
from .routes.health import router as health_router


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    """Traduit un echec de persistance en reponse 'problem' (RFC 7807) sans detail."""
    logger.opt(exception=exc).error(
        "Echec de persistance", method=request.method, path=request.url.path
    )
    return JSONResponse(
        status_code=500,
        content={
            "type": "about:blank",
            "title": "An error occurred while processing your request.",
            "status": 500,
        },
        media_type="application/problem+json",
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        container: Container DI a utiliser (un nouveau est cree si absent)

    Returns:
        L'application, prete a etre servie par uvicorn
    """
    if container is None:
        container = Container()
    settings = container.config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au démarrage et libère l'engine à l'arrêt."""
        configure_logging(
            log_level=settings.log_level,
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )
        container.database.init()
        logger.info("Démarrage de l'API Catalogue", prefix=settings.api_prefix)
        yield
        container.shutdown_resources()
        container.engine().dispose()
        logger.info("Arrêt de l'API Catalogue")

    app = FastAPI(title="Catalogue", lifespan=lifespan)
    app.state.container = container

    app.add_exception_handler(PersistenceError, persistence_error_handler)

    # Routes
    app.include_router(health_router)
    app.include_router(content_router, prefix=settings.api_prefix)
    return app


app = create_app()
