"""Módulo de errores personalizados para la aplicación.

Este módulo define las clases de error personalizadas utilizadas en toda la aplicación,
proporcionando un manejo de errores consistente y tipado.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Códigos de error estandarizados para la aplicación.

    Los códigos de error siguen el formato: PREFIJO_DESCRIPCION
    """

    # Errores de validación (2000-2999)
    VALIDATION_ERROR = "VALID_2000"

    # Errores de recursos (3000-3999)
    RESOURCE_NOT_FOUND = "RES_3000"

    # Errores de base de datos (4000-4999)
    DATABASE_ERROR = "DB_4000"

    # Errores del servidor (5000-5999)
    INTERNAL_SERVER_ERROR = "SRV_5000"
    INVARIANT_VIOLATION = "SRV_5002"


class AppError(Exception):
    """Clase base para todos los errores de la aplicación.

    Args:
        status_code: Código de estado HTTP
        code: Código de error personalizado
        message: Mensaje de error descriptivo
        detail: Detalles adicionales del error
    """

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: str | ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR,
        message: str = "Ha ocurrido un error inesperado",
        detail: str | dict[str, Any] | list[Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.detail = detail
        super().__init__(self.message)


class ResourceNotFoundError(AppError):
    """Excepción lanzada cuando no se encuentra un recurso solicitado."""

    def __init__(
        self,
        resource_name: str = "recurso",
        resource_id: str | int | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = f"No se encontró el {resource_name}"
            if resource_id is not None:
                message += f" con ID {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=message,
            detail={"resource": resource_name, "id": resource_id},
        )


class ValidationError(AppError):
    """Excepción lanzada cuando falla la validación de datos."""

    def __init__(self, detail: str | dict[str, Any] | list[Any]) -> None:
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            code=ErrorCode.VALIDATION_ERROR,
            message="Error de validación",
            detail=detail,
        )


class DatabaseError(AppError):
    """Excepción lanzada cuando ocurre un error en la base de datos."""

    def __init__(self, detail: str | dict[str, Any] | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.DATABASE_ERROR,
            message="Error en la base de datos",
            detail=detail,
        )


class InvariantError(AppError):
    """Violación de un contrato interno (error de programación o configuración).

    No es un error del usuario: se propaga hasta la página de error como 500.
    """

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.INVARIANT_VIOLATION,
            message=message,
        )


def invariant(condition: Any, message: str) -> None:
    """Lanza InvariantError si la condición no se cumple."""
    if not condition:
        raise InvariantError(message)
