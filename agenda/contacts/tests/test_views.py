import pytest

from agenda.common.navigation import Navigation
from agenda.contacts.schemas import ContactRead, RootLoaderData
from agenda.contacts.views import NO_NAME, ShellView, contact_label


def _contact(**fields):
    return ContactRead(id=fields.pop("id", "c1"), **fields)


@pytest.mark.parametrize(
    "fields, text",
    [
        ({"first": "Ada", "last": "Lovelace"}, "Ada Lovelace"),
        ({"first": "Ada"}, "Ada"),
        ({"last": "Lovelace"}, "Lovelace"),
    ],
)
def test_contact_label_uses_name_parts(fields, text):
    label = contact_label(_contact(**fields))

    assert label.text == text
    assert label.placeholder is False


@pytest.mark.parametrize("fields", [{}, {"first": "", "last": ""}])
def test_contact_label_without_name_is_placeholder(fields):
    label = contact_label(_contact(**fields))

    assert label.text == NO_NAME
    assert label.placeholder is True


class TestShellView:
    def _root(self, q=None):
        return RootLoaderData(
            contacts=[
                _contact(id="ada", first="Ada", last="Lovelace", favorite=True),
                _contact(id="grace", first="Grace", last="Hopper"),
            ],
            q=q,
        )

    def test_idle_shell(self):
        shell = ShellView.build(self._root(), Navigation.idle(), path="/")

        assert shell.searching is False
        assert shell.detail_class == ""
        assert shell.search_value == ""
        assert shell.is_first_search is True
        assert [item.favorite for item in shell.items] == [True, False]
        assert all(item.css_class == "" for item in shell.items)

    def test_search_value_follows_loaded_query(self):
        shell = ShellView.build(self._root(q="ada"), Navigation.idle())

        assert shell.search_value == "ada"
        assert shell.is_first_search is False

    def test_empty_query_is_not_first_search(self):
        shell = ShellView.build(self._root(q=""), Navigation.idle())

        assert shell.search_value == ""
        assert shell.is_first_search is False

    def test_active_link_includes_nested_pages(self):
        shell = ShellView.build(
            self._root(), Navigation.idle(), path="/contacts/ada/edit"
        )

        assert [item.css_class for item in shell.items] == ["active", ""]

    def test_loading_contact_dims_detail_and_marks_pending(self):
        shell = ShellView.build(
            self._root(), Navigation.loading("/contacts/grace"), path="/contacts/ada"
        )

        assert shell.detail_class == "loading"
        assert shell.searching is False
        assert [item.css_class for item in shell.items] == ["active", "pending"]

    def test_searching_does_not_dim_detail(self):
        shell = ShellView.build(self._root(), Navigation.loading("/?q=gr"))

        assert shell.searching is True
        assert shell.detail_class == ""

    def test_submitting_does_not_dim_detail(self):
        shell = ShellView.build(self._root(), Navigation.submitting("/"))

        assert shell.detail_class == ""
