"""Módulo común con utilidades y configuraciones compartidas.

Este paquete proporciona componentes reutilizables a través de toda la
aplicación, incluyendo:

- Configuración centralizada (``config``)
- Logging (``logging``)
- Manejo de base de datos (``database``)
- Manejo de errores y patrón Result (``errors``, ``result``)
- Resultados de rutas y estado de navegación (``routing``, ``navigation``)
"""

__all__ = [
    "config",
    "database",
    "errors",
    "logging",
    "navigation",
    "result",
    "routing",
]
