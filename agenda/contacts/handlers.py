"""
Controladores HTTP de la agenda.

Este módulo asocia cada (método, ruta) a su loader o action y convierte
el resultado tipado en la respuesta: la página renderizada dentro del
layout raíz o una redirección.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from agenda.common.database import get_db
from agenda.common.routing import RenderModel
from agenda.contacts import routes, views

# Crear el router
router = APIRouter()


async def _render_in_layout(
    request: Request, db: AsyncSession, page: RenderModel
) -> Response:
    """Ejecuta el loader raíz y pinta la página hija dentro del layout."""
    root = await routes.root_loader(db, request.url)
    return views.render(request, page, root)


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Lista de contactos",
    description="Pinta la barra lateral con los contactos filtrados por `q`.",
)
async def root(request: Request, db: AsyncSession = Depends(get_db)) -> Response:
    return await _render_in_layout(request, db, routes.index_page())


@router.post(
    "/",
    response_class=RedirectResponse,
    summary="Crear un contacto",
    description="Crea un contacto vacío y redirige a su formulario de edición.",
)
async def create_contact(db: AsyncSession = Depends(get_db)) -> Response:
    result = await routes.root_action(db)
    return result.to_response()


@router.get(
    "/contacts/{contact_id}",
    response_class=HTMLResponse,
    summary="Ficha de un contacto",
)
async def get_contact(request: Request, db: AsyncSession = Depends(get_db)) -> Response:
    page = await routes.contact_page(db, request.path_params)
    return await _render_in_layout(request, db, page)


@router.post(
    "/contacts/{contact_id}",
    response_class=RedirectResponse,
    summary="Marcar o desmarcar como favorito",
)
async def favorite_contact(
    request: Request, db: AsyncSession = Depends(get_db)
) -> Response:
    form = await request.form()
    result = await routes.favorite_action(db, request.path_params, form)
    return result.to_response()


@router.get(
    "/contacts/{contact_id}/edit",
    response_class=HTMLResponse,
    summary="Formulario de edición",
)
async def edit_contact_form(
    request: Request, db: AsyncSession = Depends(get_db)
) -> Response:
    page = await routes.edit_page(db, request.path_params)
    return await _render_in_layout(request, db, page)


@router.post(
    "/contacts/{contact_id}/edit",
    response_class=RedirectResponse,
    summary="Guardar un contacto",
)
async def edit_contact(request: Request, db: AsyncSession = Depends(get_db)) -> Response:
    form = await request.form()
    result = await routes.edit_action(db, request.path_params, form)
    return result.to_response()


@router.post(
    "/contacts/{contact_id}/destroy",
    response_class=RedirectResponse,
    summary="Eliminar un contacto",
    description="Elimina el contacto y redirige a la raíz.",
)
async def destroy_contact(
    request: Request, db: AsyncSession = Depends(get_db)
) -> Response:
    result = await routes.destroy_action(db, request.path_params)
    return result.to_response()
