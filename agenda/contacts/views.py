"""
Vistas HTML de la agenda.

Construye el modelo de la barra lateral (búsqueda y lista de contactos)
a partir de los datos del loader raíz y del estado de navegación, y
renderiza las plantillas Jinja2 dentro del layout.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from agenda.common.config import settings
from agenda.common.navigation import (
    Navigation,
    detail_is_loading,
    is_searching,
)
from agenda.common.routing import RenderModel
from agenda.contacts.schemas import ContactRead, RootLoaderData

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

NO_NAME = "No Name"
NO_CONTACTS = "No contacts"
FAVORITE_MARK = "★"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@dataclass(frozen=True)
class ContactLabel:
    text: str
    placeholder: bool


def contact_label(contact: ContactRead) -> ContactLabel:
    """Etiqueta de un contacto en la lista: "nombre apellido" o el texto "No Name"."""
    name = contact.display_name
    if name is None:
        return ContactLabel(NO_NAME, placeholder=True)
    return ContactLabel(name, placeholder=False)


@dataclass(frozen=True)
class ContactItem:
    """Entrada de la lista de la barra lateral."""

    id: str
    label: ContactLabel
    favorite: bool
    href: str
    css_class: str


@dataclass(frozen=True)
class ShellView:
    """Datos que necesita el layout para pintar la barra lateral y el panel de detalle."""

    title: str
    items: List[ContactItem]
    q: Optional[str]
    searching: bool
    detail_class: str

    @property
    def search_value(self) -> str:
        return self.q or ""

    @property
    def is_first_search(self) -> bool:
        # La primera búsqueda añade una entrada al historial; las siguientes la reemplazan
        return self.q is None

    @classmethod
    def build(
        cls,
        root: RootLoaderData,
        navigation: Navigation,
        path: str = "/",
    ) -> "ShellView":
        pending_path = None
        if navigation.location and not is_searching(navigation):
            pending_path = navigation.location.split("?", 1)[0]

        items = []
        for contact in root.contacts:
            href = f"/contacts/{contact.id}"
            if _is_active(path, href):
                css_class = "active"
            elif pending_path is not None and _is_active(pending_path, href):
                css_class = "pending"
            else:
                css_class = ""
            items.append(
                ContactItem(
                    id=contact.id,
                    label=contact_label(contact),
                    favorite=contact.favorite,
                    href=href,
                    css_class=css_class,
                )
            )

        return cls(
            title=settings.PROJECT_NAME,
            items=items,
            q=root.q,
            searching=is_searching(navigation),
            detail_class="loading" if detail_is_loading(navigation) else "",
        )


def _is_active(path: str, href: str) -> bool:
    return path == href or path.startswith(href + "/")


def render(
    request: Request,
    page: RenderModel,
    root: RootLoaderData,
    navigation: Optional[Navigation] = None,
) -> Response:
    """Renderiza una página dentro del layout raíz."""
    shell = ShellView.build(
        root, navigation or Navigation.idle(), path=request.url.path
    )
    context = {"shell": shell, **page.context}
    return templates.TemplateResponse(
        request, page.template, context, status_code=page.status_code
    )


def render_error(
    request: Request,
    status_code: int,
    message: str,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Página de error independiente del loader raíz (la agenda puede no estar disponible)."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": settings.PROJECT_NAME,
            "status_code": status_code,
            "message": message,
        },
        status_code=status_code,
        headers=headers,
    )


templates.env.globals.update(
    NO_NAME=NO_NAME,
    NO_CONTACTS=NO_CONTACTS,
    FAVORITE_MARK=FAVORITE_MARK,
)
