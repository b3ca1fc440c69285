import logging

import pytest

from agenda.common.logging import APP_LOGGER, QUIET_LOGGERS, setup_logging


@pytest.fixture
def root_logger():
    """Restaura el logger raíz después de cada prueba."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def _agenda_handlers(root):
    return [h.get_name() for h in root.handlers if (h.get_name() or "").startswith("agenda.")]


def test_repeated_setup_does_not_duplicate_handlers(root_logger):
    setup_logging()
    setup_logging()

    assert _agenda_handlers(root_logger) == ["agenda.console"]


def test_keeps_foreign_handlers(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)

    setup_logging()

    assert foreign in root_logger.handlers


def test_writes_to_rotating_file(root_logger, tmp_path):
    log_file = tmp_path / "logs" / "agenda.log"

    setup_logging(str(log_file), logging.DEBUG)
    logging.getLogger("agenda.contacts").info("Contacto creado con ID abc1234")
    for handler in root_logger.handlers:
        handler.flush()

    assert _agenda_handlers(root_logger) == ["agenda.console", "agenda.file"]
    content = log_file.read_text(encoding="utf-8")
    assert "agenda.contacts - INFO - Contacto creado con ID abc1234" in content


def test_levels(root_logger):
    setup_logging(log_level=logging.DEBUG)

    assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
    assert all(
        logging.getLogger(name).level == logging.WARNING for name in QUIET_LOGGERS
    )

    setup_logging(log_level=logging.ERROR)

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
