"""Módulo de configuración de la base de datos.

Este módulo proporciona la configuración inicial para SQLAlchemy,
incluyendo la creación de la sesión de base de datos y la clase Base para los modelos.
"""
from typing import Any, AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from agenda.common.config import Settings, settings

# Convenciones de nombres para constraints
# Ver: https://alembic.sqlalchemy.org/en/latest/naming.html
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """Clase base para todos los modelos SQLAlchemy."""

    metadata = metadata

    def update(self, **kwargs: Any) -> None:
        """Actualiza los atributos del modelo con los valores proporcionados."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)


def build_engine(config: Settings) -> AsyncEngine:
    """Crea el motor asíncrono a partir de la configuración.

    SQLite no admite las opciones del pool de conexiones, así que solo se
    pasan para otros motores.
    """
    options: dict[str, Any] = {"echo": config.DATABASE_ECHO}
    if not config.is_sqlite:
        options.update(
            pool_pre_ping=True,
            pool_size=config.DATABASE_POOL_SIZE,
            max_overflow=config.DATABASE_MAX_OVERFLOW,
        )
    return create_async_engine(config.DATABASE_URL, **options)


engine = build_engine(settings)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Importante para operaciones asíncronas
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Obtiene una sesión de base de datos para una petición.

    La sesión se confirma al terminar la petición y se revierte si hubo un error.

    Yields:
        AsyncSession: Sesión de base de datos asíncrona
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine = engine) -> None:
    """Crea las tablas que todavía no existen."""
    # Registrar los modelos en los metadatos
    from agenda.contacts import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
