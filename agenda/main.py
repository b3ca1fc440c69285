"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura e inicia la aplicación con sus routers, archivos
estáticos, manejadores de errores y el ciclo de vida de la base de datos.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from agenda.common.config import settings
from agenda.common.database import AsyncSessionLocal, init_db
from agenda.common.errors import AppError
from agenda.common.logging import setup_logging
from agenda.contacts.handlers import router as contacts_router
from agenda.contacts.seed import seed_contacts
from agenda.contacts.views import STATIC_DIR, render_error

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Iniciando la aplicación...")
    if settings.CREATE_TABLES:
        await init_db()
    if settings.SEED_DATA:
        async with AsyncSessionLocal() as session:
            await seed_contacts(session)

    yield

    logger.info("Apagando la aplicación...")


async def app_error_handler(request: Request, exc: AppError):
    """Pinta la página de error con el código de estado del error."""
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path}: {exc.code} {exc.message}",
            exc_info=exc,
        )
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.code} {exc.message}")
    return render_error(request, exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Errores del propio framework (ruta desconocida, método no permitido) como página HTML."""
    logger.warning(f"{request.method} {request.url.path}: {exc.status_code} {exc.detail}")
    return render_error(request, exc.status_code, str(exc.detail), headers=exc.headers)


def create_app() -> FastAPI:
    """Crea la aplicación FastAPI con todos sus routers."""
    setup_logging(settings.LOG_FILE, settings.log_level_value)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Agenda de contactos con búsqueda",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(contacts_router, tags=["contacts"])

    @app.get("/health", tags=["health"])
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


# Para ejecutar con uvicorn directamente: uvicorn agenda.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "agenda.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info"
    )
