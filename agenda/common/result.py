"""Módulo para manejo de resultados funcionales usando el patrón Result.

Este módulo proporciona utilidades para trabajar con el tipo Result de la biblioteca 'returns',
implementando un enfoque funcional para el manejo de errores en repositorios y servicios.
"""

from __future__ import annotations

from typing import Callable, TypeVar, cast

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

_ValueType = TypeVar("_ValueType", covariant=True)
_ErrorType = TypeVar("_ErrorType", contravariant=True)
_NewErrorType = TypeVar("_NewErrorType")

# Re-export for easier imports
__all__ = [
    "Result",
    "Success",
    "Failure",
    "is_successful",
    "is_failure",
    "map_failure",
    "get_or_raise",
]


def is_failure(result: Result[_ValueType, _ErrorType]) -> bool:
    """Indica si el Result contiene un error."""
    return not is_successful(result)


def map_failure(
    result: Result[_ValueType, _ErrorType],
    mapper: Callable[[_ErrorType], _NewErrorType],
) -> Result[_ValueType, _NewErrorType]:
    """Mapea el error de un Result usando la función proporcionada.

    Args:
        result: El Result a mapear.
        mapper: Función que transforma el error.

    Returns:
        Un nuevo Result con el error mapeado.
    """
    if is_successful(result):
        return cast(Result[_ValueType, _NewErrorType], result)
    return Failure(mapper(cast(_ErrorType, result.failure())))


def get_or_raise(result: Result[_ValueType, Exception]) -> _ValueType:
    """Obtiene el valor de un Result o lanza la excepción si es un Failure.

    Args:
        result: El Result del cual obtener el valor.

    Returns:
        El valor contenido en el Result si es Success.

    Raises:
        Exception: Si el Result es un Failure.
    """
    if is_successful(result):
        return cast(_ValueType, result.unwrap())
    raise cast(Exception, result.failure())
