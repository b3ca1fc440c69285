"""
Módulo de gestión de contactos.

Este módulo reúne el modelo, el almacén, los loaders y actions de las rutas
y las vistas HTML de la agenda.
"""

from . import errors, models, schemas

# Importar enrutador
from .handlers import router as contact_router

# Importar modelos
from .models import Contact

# Importar esquemas
from .schemas import ContactLoaderData, ContactRead, ContactUpdate, RootLoaderData

# Importar servicios
from .service import ContactService

__all__ = [
    # Módulos
    "models",
    "schemas",
    "errors",
    # Modelos
    "Contact",
    # Esquemas
    "ContactUpdate",
    "ContactRead",
    "RootLoaderData",
    "ContactLoaderData",
    # Servicios
    "ContactService",
    # Router
    "contact_router",
]
