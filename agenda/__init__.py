"""
Paquete principal de la aplicación.

Agenda de contactos: barra lateral con búsqueda y panel de detalle para
ver, crear, editar y eliminar contactos.
"""

__version__ = "0.1.0"
