"""
Estado de navegación.

Representa de forma explícita si hay una transición de página en curso y
hacia dónde va. La vista solo lo lee para decidir los indicadores de carga. En el servidor
cada render llega con la navegación ya terminada (``Navigation.idle()``);
el despachador del navegador (``static/app.js``) actualiza el estado en
cada evento de navegación y aplica las mismas reglas en el cliente.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import parse_qs, urlsplit


class NavigationState(str, Enum):
    """Estados de una navegación."""

    IDLE = "idle"
    LOADING = "loading"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class Navigation:
    """Navegación actual: estado y destino (None cuando está inactiva)."""

    state: NavigationState = NavigationState.IDLE
    location: Optional[str] = None

    @classmethod
    def idle(cls) -> "Navigation":
        return cls()

    @classmethod
    def loading(cls, location: str) -> "Navigation":
        return cls(NavigationState.LOADING, location)

    @classmethod
    def submitting(cls, location: str) -> "Navigation":
        return cls(NavigationState.SUBMITTING, location)


def is_searching(navigation: Navigation) -> bool:
    """La navegación en curso es una búsqueda si su destino lleva el parámetro ``q``."""
    if not navigation.location:
        return False
    query = urlsplit(navigation.location).query
    return "q" in parse_qs(query, keep_blank_values=True)


def detail_is_loading(navigation: Navigation) -> bool:
    """El panel de detalle se atenúa solo al cargar algo que no sea una búsqueda."""
    return navigation.state is NavigationState.LOADING and not is_searching(
        navigation
    )

