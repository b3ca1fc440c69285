"""
Excepciones personalizadas para el módulo de contactos.

Este módulo define las excepciones específicas para manejar
errores relacionados con contactos, siguiendo el patrón de
manejo funcional de errores.
"""

from typing import Any, Dict, Optional

from agenda.common.errors import (
    AppError,
    DatabaseError,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "ContactError",
    "ContactNotFoundError",
    "ContactValidationError",
    "DatabaseError",
]


class ContactError(AppError):
    """Clase base para errores relacionados con contactos."""

    pass


class ContactNotFoundError(ResourceNotFoundError, ContactError):
    """Error lanzado cuando no se encuentra un contacto."""

    def __init__(self, contact_id: str, message: Optional[str] = None):
        self.contact_id = contact_id
        super().__init__(
            resource_name="contacto",
            resource_id=contact_id,
            message=message or f"No se encontró un contacto con ID {contact_id}",
        )


class ContactValidationError(ValidationError, ContactError):
    """Error lanzado cuando los datos enviados para un contacto no son válidos."""

    def __init__(self, errors: Dict[str, Any] | list[Any]):
        self.errors = errors
        super().__init__(detail=errors)
