"""Módulo de configuración de la aplicación.

Este módulo proporciona una forma de cargar y validar la configuración
desde variables de entorno, con valores por defecto y tipos fuertes.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración principal de la aplicación.

    Los valores se leen de variables de entorno o de un archivo ``.env``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )
    # ======================
    # Configuración de la aplicación
    # ======================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    PROJECT_NAME: str = Field(
        "Remix Contacts",
        description="Nombre mostrado en la barra lateral y en el título de la página",
    )

    VERSION: str = Field("0.1.0", description="Versión de la aplicación")

    # ======================
    # Base de datos
    # ======================
    DATABASE_URL: str = Field(
        "sqlite+aiosqlite:///./agenda.db",
        description="URL asíncrona de SQLAlchemy (sqlite+aiosqlite o postgresql+asyncpg)",
    )
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10

    CREATE_TABLES: bool = Field(
        True, description="Crear las tablas al iniciar la aplicación"
    )
    SEED_DATA: bool = Field(
        True, description="Cargar contactos de ejemplo si la agenda está vacía"
    )

    # ======================
    # Logging
    # ======================
    LOG_LEVEL: str = Field("INFO", description="Nivel de logging del logger raíz")
    LOG_FILE: str | None = Field(
        None, description="Archivo de log rotativo (opcional)"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Nivel de logging desconocido: {v}")
        return level

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.LOG_LEVEL]


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración de la aplicación.

    Esta función está decorada con @lru_cache para evitar múltiples lecturas
    del archivo .env y mantener una única instancia de configuración.

    Returns:
        Settings: Instancia de configuración cargada desde las variables de entorno.
    """
    return Settings()


# Instancia de configuración para importación directa
settings = get_settings()
