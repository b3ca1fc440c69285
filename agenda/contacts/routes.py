"""
Loaders y actions de las rutas de la agenda.

Cada función recibe la sesión de base de datos y los datos de la petición
(URL, parámetros de ruta, formulario) y devuelve un resultado tipado:
``RenderModel`` o ``Redirect``, o los datos del loader raíz. Los errores del
almacén no se capturan aquí: ``get_or_raise`` los relanza y el manejador
global de la aplicación pinta la página de error.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import URL, QueryParams

from agenda.common.errors import invariant
from agenda.common.result import get_or_raise
from agenda.common.routing import Redirect, RenderModel
from agenda.contacts.errors import ContactValidationError
from agenda.contacts.schemas import (
    ContactLoaderData,
    ContactRead,
    ContactUpdate,
    RootLoaderData,
)
from agenda.contacts.service import ContactService

logger = logging.getLogger(__name__)

CONTACT_ID_PARAM = "contact_id"


def search_query(url: URL | str) -> Optional[str]:
    """Devuelve el parámetro ``q`` tal cual: None si falta, "" si viene vacío.

    Si ``q`` se repite en la URL se usa el primer valor.
    """
    values = QueryParams(URL(str(url)).query).getlist("q")
    return values[0] if values else None


def _contact_id(params: Mapping[str, Any]) -> str:
    contact_id = params.get(CONTACT_ID_PARAM)
    invariant(contact_id, f"Missing {CONTACT_ID_PARAM} param")
    return contact_id


# ======================
# Ruta raíz
# ======================


async def root_loader(db: AsyncSession, url: URL | str) -> RootLoaderData:
    """Lista los contactos que coinciden con la búsqueda de la URL."""
    q = search_query(url)
    contacts = get_or_raise(await ContactService.get_contacts(db, q))
    return RootLoaderData(
        contacts=[ContactRead.model_validate(c) for c in contacts], q=q
    )


async def root_action(db: AsyncSession) -> Redirect:
    """Crea un contacto vacío y redirige a su formulario de edición."""
    contact = get_or_raise(await ContactService.create_empty_contact(db))
    return Redirect(f"/contacts/{contact.id}/edit")


def index_page() -> RenderModel:
    return RenderModel("index.html")


# ======================
# Rutas de un contacto
# ======================


async def contact_loader(
    db: AsyncSession, params: Mapping[str, Any]
) -> ContactLoaderData:
    contact_id = _contact_id(params)
    contact = get_or_raise(await ContactService.get_contact(db, contact_id))
    return ContactLoaderData(contact=ContactRead.model_validate(contact))


async def contact_page(db: AsyncSession, params: Mapping[str, Any]) -> RenderModel:
    data = await contact_loader(db, params)
    return RenderModel("contact.html", {"contact": data.contact})


async def favorite_action(
    db: AsyncSession, params: Mapping[str, Any], form: Mapping[str, Any]
) -> Redirect:
    """Marca o desmarca el contacto como favorito según el campo ``favorite``."""
    contact_id = _contact_id(params)
    favorite = form.get("favorite") == "true"
    get_or_raise(await ContactService.set_favorite(db, contact_id, favorite))
    return Redirect(f"/contacts/{contact_id}")


async def edit_page(db: AsyncSession, params: Mapping[str, Any]) -> RenderModel:
    data = await contact_loader(db, params)
    return RenderModel("edit.html", {"contact": data.contact})


async def edit_action(
    db: AsyncSession, params: Mapping[str, Any], form: Mapping[str, Any]
) -> Redirect:
    """Guarda el formulario de edición y vuelve a la ficha del contacto."""
    contact_id = _contact_id(params)
    try:
        updates = ContactUpdate.model_validate(dict(form))
    except PydanticValidationError as e:
        logger.warning(f"Formulario inválido para el contacto {contact_id}")
        errors = {
            ".".join(map(str, err["loc"])): err["msg"] for err in e.errors()
        }
        raise ContactValidationError(errors) from e

    get_or_raise(await ContactService.update_contact(db, contact_id, updates))
    return Redirect(f"/contacts/{contact_id}")


async def destroy_action(db: AsyncSession, params: Mapping[str, Any]) -> Redirect:
    """Elimina el contacto indicado en la ruta y redirige a la raíz.

    Sin parámetro ``contact_id`` falla antes de tocar el almacén.
    """
    contact_id = _contact_id(params)
    get_or_raise(await ContactService.delete_contact(db, contact_id))
    return Redirect("/")
