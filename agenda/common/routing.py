"""Resultados tipados de loaders y actions.

Los loaders y las actions de la aplicación no construyen respuestas HTTP:
devuelven un ``RenderModel`` (qué plantilla pintar y con qué datos) o un
``Redirect``. Los endpoints de FastAPI convierten ese resultado en la
respuesta final.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from fastapi import status
from fastapi.responses import RedirectResponse


@dataclass(frozen=True)
class Redirect:
    """Redirección tras una action (303 para que el navegador haga un GET)."""

    location: str
    status_code: int = status.HTTP_303_SEE_OTHER

    def to_response(self) -> RedirectResponse:
        return RedirectResponse(self.location, status_code=self.status_code)


@dataclass(frozen=True)
class RenderModel:
    """Plantilla a renderizar dentro del layout y sus datos."""

    template: str
    context: Mapping[str, Any] = field(default_factory=dict)
    status_code: int = status.HTTP_200_OK
