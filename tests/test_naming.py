import pytest

from dx_vue_generator.codegen.core.naming import (
    remove_extension,
    remove_prefix,
    to_kebab_case,
    uppercase_first,
)


def test_remove_prefix_strips_leading_prefix():
    assert remove_prefix("dxButton", "dx") == "Button"


def test_remove_prefix_leaves_name_without_prefix():
    assert remove_prefix("Button", "dx") == "Button"


def test_remove_prefix_is_case_sensitive():
    assert remove_prefix("DxButton", "dx") == "DxButton"


def test_remove_prefix_only_strips_once():
    assert remove_prefix("dxdxButton", "dx") == "dxButton"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Button", "button"),
        ("DataGrid", "data-grid"),
        ("HtmlEditor", "html-editor"),
        ("TreeList", "tree-list"),
        ("Chart3D", "chart3-d"),
        ("button", "button"),
    ],
)
def test_to_kebab_case(name, expected):
    assert to_kebab_case(name) == expected


def test_uppercase_first_only_touches_first_letter():
    assert uppercase_first("columnChooser") == "ColumnChooser"
    assert uppercase_first("a") == "A"
    assert uppercase_first("") == ""


def test_remove_extension():
    assert remove_extension("components/button.ts") == "components/button"
    assert remove_extension("button.d.ts") == "button.d"
    assert remove_extension("../src/button") == "../src/button"
