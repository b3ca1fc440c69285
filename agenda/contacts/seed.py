"""Contactos de ejemplo para una agenda recién creada."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from agenda.common.result import get_or_raise
from agenda.contacts.repository import ContactRepository

logger = logging.getLogger(__name__)

SAMPLE_CONTACTS = [
    {
        "first": "Ada",
        "last": "Lovelace",
        "twitter": "@ada",
        "notes": "Wrote the first published algorithm for a machine.",
        "favorite": True,
    },
    {
        "first": "Grace",
        "last": "Hopper",
        "twitter": "@grace",
        "notes": "Found an actual bug in the Mark II.",
    },
    {"first": "Alan", "last": "Turing"},
    {"first": "Edsger", "last": "Dijkstra", "notes": "Shortest paths."},
    {"first": "Barbara", "last": "Liskov"},
]


async def seed_contacts(db: AsyncSession) -> int:
    """Inserta los contactos de ejemplo si la agenda está vacía.

    Returns:
        Número de contactos insertados.
    """
    if get_or_raise(await ContactRepository.count(db)) > 0:
        logger.info("La agenda ya tiene contactos, no se cargan ejemplos")
        return 0

    for data in SAMPLE_CONTACTS:
        get_or_raise(await ContactRepository.create(db, **data))

    logger.info(f"Cargados {len(SAMPLE_CONTACTS)} contactos de ejemplo")
    return len(SAMPLE_CONTACTS)
