"""
Logging de la agenda.

Todos los módulos usan ``logging.getLogger(__name__)``; este módulo decide
el formato, el nivel y hacia dónde se escriben los mensajes (consola y,
opcionalmente, un archivo rotativo).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
APP_LOGGER = "agenda"

# Nunca bajan de WARNING, aunque la agenda registre en DEBUG
QUIET_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "sqlalchemy.engine",
    "aiosqlite",
    "multipart",
)

MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUPS = 5


def build_handlers(log_file: Optional[str] = None) -> List[logging.Handler]:
    """Crea los handlers de la agenda, nombrados ``agenda.*``."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.set_name(f"{APP_LOGGER}.console")
    handlers: List[logging.Handler] = [console]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        file_handler.set_name(f"{APP_LOGGER}.file")
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _is_agenda_handler(handler: logging.Handler) -> bool:
    return (handler.get_name() or "").startswith(f"{APP_LOGGER}.")


def setup_logging(
    log_file: Optional[str] = None, log_level: int = logging.INFO
) -> None:
    """
    Configura el logger raíz para la agenda.

    Se puede llamar varias veces (una por cada ``create_app``): los handlers
    de una configuración anterior se reemplazan y los handlers ajenos, como
    los de pytest, se conservan.

    Args:
        log_file: Archivo de log rotativo. Si es None, solo consola.
        log_level: Nivel de la agenda y del logger raíz.
    """
    root_logger = logging.getLogger()

    for handler in [h for h in root_logger.handlers if _is_agenda_handler(h)]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in build_handlers(log_file):
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
    logging.getLogger(APP_LOGGER).setLevel(log_level)

    logging.getLogger(__name__).debug(
        f"Logging configurado: nivel {logging.getLevelName(log_level)}, "
        f"archivo {log_file or '-'}"
    )
