"""Modelos SQLAlchemy para el dominio de Contactos.

Este módulo define el modelo de base de datos de un contacto de la agenda,
utilizando SQLAlchemy ORM con soporte asíncrono.
"""

import secrets
import string
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agenda.common.database import Base

_ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 7


def generate_contact_id() -> str:
    """Genera un identificador corto y aleatorio para un contacto."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Contact(Base):
    """Modelo que representa un contacto de la agenda.

    Un contacto se crea vacío y se completa después desde el formulario de edición.
    """

    __tablename__ = "contacts"
    __table_args__ = {
        "comment": "Almacena los contactos de la agenda",
    }

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=generate_contact_id
    )

    # Información básica
    first: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="Nombre del contacto"
    )
    last: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, index=True, comment="Apellido del contacto"
    )
    avatar: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True, comment="URL de la imagen del contacto"
    )
    twitter: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, comment="Usuario de Twitter del contacto"
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="Notas adicionales sobre el contacto"
    )

    favorite: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Indica si el contacto está marcado como favorito",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        comment="Fecha y hora de creación del contacto",
    )

    def __repr__(self) -> str:
        return f"<Contact {self.id} first={self.first!r} last={self.last!r}>"
