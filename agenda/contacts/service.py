import logging
from typing import List, Optional

from returns.result import Result
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.common.errors import DatabaseError
from agenda.contacts.errors import ContactNotFoundError
from agenda.contacts.models import Contact
from agenda.contacts.repository import ContactRepository
from agenda.contacts.schemas import ContactUpdate

logger = logging.getLogger(__name__)


class ContactService:
    """
    Servicio para operaciones de negocio relacionadas con contactos.
    Implementa la lógica de negocio utilizando el repositorio para acceder a los datos.
    """

    @staticmethod
    async def get_contacts(
        db: AsyncSession, q: Optional[str] = None
    ) -> Result[List[Contact], DatabaseError]:
        """
        Obtiene los contactos que coinciden con la búsqueda.

        Args:
            db: Sesión de base de datos asíncrona.
            q: Término de búsqueda (opcional).

        Returns:
            Result con la lista de contactos, o un error de base de datos.
        """
        return await ContactRepository.list_contacts(db, q)

    @staticmethod
    async def get_contact(
        db: AsyncSession, contact_id: str
    ) -> Result[Contact, ContactNotFoundError | DatabaseError]:
        return await ContactRepository.get_by_id(db, contact_id)

    @staticmethod
    async def create_empty_contact(
        db: AsyncSession,
    ) -> Result[Contact, DatabaseError]:
        """
        Crea un contacto sin datos.

        Cada llamada crea un registro nuevo; enviar el formulario dos veces
        crea dos contactos.
        """
        return await ContactRepository.create(db)

    @staticmethod
    async def update_contact(
        db: AsyncSession, contact_id: str, contact_data: ContactUpdate
    ) -> Result[Contact, ContactNotFoundError | DatabaseError]:
        """
        Actualiza un contacto con los datos del formulario de edición.

        Solo se escriben los campos enviados: un campo vacío en el formulario
        borra el valor guardado y un campo ausente lo conserva.

        Args:
            db: Sesión de base de datos asíncrona.
            contact_id: ID del contacto a actualizar.
            contact_data: Datos enviados en el formulario.

        Returns:
            Result con el contacto actualizado, o un error apropiado si no.
        """
        return await ContactRepository.update(
            db, contact_id, **contact_data.model_dump(exclude_unset=True)
        )

    @staticmethod
    async def set_favorite(
        db: AsyncSession, contact_id: str, favorite: bool
    ) -> Result[Contact, ContactNotFoundError | DatabaseError]:
        return await ContactRepository.update(db, contact_id, favorite=favorite)

    @staticmethod
    async def delete_contact(
        db: AsyncSession, contact_id: str
    ) -> Result[None, ContactNotFoundError | DatabaseError]:
        """
        Elimina un contacto existente.

        Args:
            db: Sesión de base de datos asíncrona.
            contact_id: ID del contacto a eliminar.

        Returns:
            Result con None si la eliminación es exitosa, o un error apropiado si no.
        """
        return await ContactRepository.delete(db, contact_id)
