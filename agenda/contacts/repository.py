"""
Repositorio para el módulo de contactos.

Este módulo implementa la capa de acceso a datos de la agenda,
utilizando SQLAlchemy con soporte asíncrono y el patrón Result para manejo funcional de errores.
"""

import logging
from typing import Any, List, Optional

from returns.result import Failure, Result, Success
from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.common.errors import DatabaseError
from agenda.common.result import is_failure
from agenda.contacts.errors import ContactNotFoundError
from agenda.contacts.models import Contact
from agenda.contacts.schemas import EDITABLE_FIELDS

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(EDITABLE_FIELDS) | {"favorite"}


def _like_pattern(term: str) -> str:
    """Construye un patrón LIKE de tipo "contiene" escapando los comodines."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ContactRepository:
    """Repositorio para operaciones CRUD de contactos."""

    @staticmethod
    async def list_contacts(
        db: AsyncSession, query: Optional[str] = None
    ) -> Result[List[Contact], DatabaseError]:
        """
        Obtiene los contactos que coinciden con una búsqueda.

        Args:
            db: Sesión de base de datos asíncrona.
            query: Texto a buscar, sin distinguir mayúsculas, dentro del nombre
                o del apellido. Si es None o vacío se devuelven todos.

        Returns:
            Result con la lista ordenada por apellido y fecha de creación.
        """
        try:
            stmt = select(Contact)

            term = (query or "").strip()
            if term:
                pattern = _like_pattern(term)
                stmt = stmt.where(
                    or_(
                        Contact.first.ilike(pattern, escape="\\"),
                        Contact.last.ilike(pattern, escape="\\"),
                    )
                )

            # Los contactos sin apellido van al final
            stmt = stmt.order_by(
                Contact.last.is_(None), Contact.last, Contact.created_at
            )

            result = await db.execute(stmt)
            return Success(list(result.scalars().all()))
        except SQLAlchemyError as e:
            logger.error(f"Error al listar contactos (q={query!r}): {str(e)}")
            return Failure(DatabaseError(str(e)))

    @staticmethod
    async def get_by_id(
        db: AsyncSession, contact_id: str
    ) -> Result[Contact, ContactNotFoundError | DatabaseError]:
        """
        Obtiene un contacto por su ID.

        Args:
            db: Sesión de base de datos asíncrona.
            contact_id: ID del contacto a obtener.

        Returns:
            Result con el contacto si se encuentra, o un error apropiado si no.
        """
        try:
            contact = await db.get(Contact, contact_id)
            if contact is None:
                return Failure(ContactNotFoundError(contact_id))
            return Success(contact)
        except SQLAlchemyError as e:
            logger.error(f"Error al obtener contacto con ID {contact_id}: {str(e)}")
            return Failure(DatabaseError(str(e)))

    @staticmethod
    async def count(db: AsyncSession) -> Result[int, DatabaseError]:
        """Cuenta los contactos almacenados."""
        try:
            result = await db.execute(select(func.count()).select_from(Contact))
            return Success(result.scalar_one())
        except SQLAlchemyError as e:
            logger.error(f"Error al contar contactos: {str(e)}")
            return Failure(DatabaseError(str(e)))

    @staticmethod
    async def create(
        db: AsyncSession, **fields: Any
    ) -> Result[Contact, DatabaseError]:
        """
        Crea un nuevo contacto.

        Args:
            db: Sesión de base de datos asíncrona.
            **fields: Valores iniciales; sin argumentos se crea un contacto vacío.

        Returns:
            Result con el contacto creado si la operación es exitosa.
        """
        try:
            new_contact = Contact(
                **{k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
            )

            db.add(new_contact)
            await db.flush()
            await db.refresh(new_contact)
            await db.commit()

            logger.info(f"Contacto creado con ID {new_contact.id}")
            return Success(new_contact)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error al crear contacto: {str(e)}")
            return Failure(DatabaseError(str(e)))

    @staticmethod
    async def update(
        db: AsyncSession, contact_id: str, **kwargs: Any
    ) -> Result[Contact, ContactNotFoundError | DatabaseError]:
        """
        Actualiza un contacto existente.

        Args:
            db: Sesión de base de datos asíncrona.
            contact_id: ID del contacto a actualizar.
            **kwargs: Campos a actualizar y sus nuevos valores. Se ignoran
                los campos que no son editables.

        Returns:
            Result con el contacto actualizado, o un error apropiado si no.
        """
        contact_result = await ContactRepository.get_by_id(db, contact_id)
        if is_failure(contact_result):
            return contact_result

        contact = contact_result.unwrap()
        try:
            contact.update(
                **{k: v for k, v in kwargs.items() if k in UPDATABLE_FIELDS}
            )

            await db.commit()
            await db.refresh(contact)

            logger.info(f"Contacto {contact_id} actualizado: {sorted(kwargs)}")
            return Success(contact)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error al actualizar contacto {contact_id}: {str(e)}")
            return Failure(DatabaseError(str(e)))

    @staticmethod
    async def delete(
        db: AsyncSession, contact_id: str
    ) -> Result[None, ContactNotFoundError | DatabaseError]:
        """
        Elimina un contacto existente.

        Eliminar un ID que no existe es un error ContactNotFoundError, no una
        operación vacía.

        Args:
            db: Sesión de base de datos asíncrona.
            contact_id: ID del contacto a eliminar.

        Returns:
            Result con None si la eliminación es exitosa, o un error apropiado si no.
        """
        contact_result = await ContactRepository.get_by_id(db, contact_id)
        if is_failure(contact_result):
            return contact_result

        contact = contact_result.unwrap()
        try:
            await db.delete(contact)
            await db.flush()
            await db.commit()

            logger.info(f"Contacto {contact_id} eliminado")
            return Success(None)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error al eliminar contacto {contact_id}: {str(e)}")
            return Failure(DatabaseError(str(e)))
