import pytest

from agenda.common.navigation import (
    Navigation,
    NavigationState,
    detail_is_loading,
    is_searching,
)
from agenda.common.routing import Redirect, RenderModel


def test_idle_navigation_has_no_location():
    nav = Navigation.idle()

    assert nav.state is NavigationState.IDLE
    assert nav.location is None
    assert not is_searching(nav)
    assert not detail_is_loading(nav)


@pytest.mark.parametrize(
    "location, searching",
    [
        ("/?q=ada", True),
        ("/?q=", True),
        ("/?page=2&q=x", True),
        ("/", False),
        ("/contacts/abc", False),
        ("/?query=ada", False),
    ],
)
def test_is_searching_looks_for_q_param(location, searching):
    assert is_searching(Navigation.loading(location)) is searching


def test_detail_loading_only_for_non_search_loads():
    assert detail_is_loading(Navigation.loading("/contacts/abc"))
    assert not detail_is_loading(Navigation.loading("/?q=ada"))
    assert not detail_is_loading(Navigation.submitting("/contacts/abc/edit"))


def test_redirect_response_is_see_other():
    response = Redirect("/contacts/abc/edit").to_response()

    assert response.status_code == 303
    assert response.headers["location"] == "/contacts/abc/edit"


def test_render_model_defaults():
    page = RenderModel("index.html")

    assert page.context == {}
    assert page.status_code == 200
