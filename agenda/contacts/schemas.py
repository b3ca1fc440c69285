"""
Esquemas Pydantic para el módulo de contactos.

Este módulo define los esquemas de validación del formulario de edición
y las copias de solo lectura que reciben las vistas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

EDITABLE_FIELDS = ("first", "last", "avatar", "twitter", "notes")


class ContactUpdate(BaseModel):
    """Datos enviados desde el formulario de edición de un contacto.

    Los campos vacíos del formulario se guardan como None.
    """

    first: str | None = Field(default=None, max_length=100, description="Nombre")
    last: str | None = Field(default=None, max_length=100, description="Apellido")
    avatar: str | None = Field(
        default=None, max_length=500, description="URL de la imagen"
    )
    twitter: str | None = Field(
        default=None, max_length=100, description="Usuario de Twitter"
    )
    notes: str | None = Field(default=None, description="Notas")

    @field_validator(*EDITABLE_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class ContactRead(BaseModel):
    """Copia de solo lectura de un contacto para una petición."""

    id: str
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool = False
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def display_name(self) -> str | None:
        if not (self.first or self.last):
            return None
        return f"{self.first or ''} {self.last or ''}".strip()


class RootLoaderData(BaseModel):
    """Datos del loader raíz: la lista de contactos y la búsqueda que la produjo."""

    contacts: list[ContactRead]
    q: str | None = None


class ContactLoaderData(BaseModel):
    """Datos de los loaders de detalle y edición."""

    contact: ContactRead
