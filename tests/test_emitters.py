import pytest

from dx_vue_generator.codegen.core.generator import ReExport
from dx_vue_generator.codegen.core.mapper import map_widget
from dx_vue_generator.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
    indent_lines,
    js_value,
    prop_type,
)
from dx_vue_generator.codegen.vue.emitters import VueEmitter, common_reexports_file_name


@pytest.fixture
def emitter():
    return VueEmitter()


def component_for(model, name):
    widget = model.get_widget(name)
    return map_widget(widget, "./core/index", "./core/index", model.custom_types).component


# ─── Components ─────────────────────────────────────────────────────────────

def test_render_simple_component(emitter, sample_model):
    source = emitter.render_component(component_for(sample_model, "dxButton"), "devextreme")

    assert 'import Button, { Properties } from "devextreme/ui/button";' in source
    assert 'import { createComponent } from "./core/index";' in source
    assert "createConfigurationComponent" not in source
    assert "const DxButton = createComponent({" in source
    assert "    text: String,\n" in source
    assert "    stylingMode: String,\n" in source
    assert (
        'validator: (v) => typeof(v) !== "number" || [1, 2].indexOf(v) !== -1' in source
    )
    assert '"key"' not in source
    assert "export default DxButton;" in source
    assert "export {\n  DxButton\n};" in source


def test_vue3_component_declares_emits(emitter, sample_model):
    source = emitter.render_component(
        component_for(sample_model, "dxButton"), "devextreme", vue_version=3
    )
    assert '"update:isActive": null,' in source
    assert '"update:text": null,' in source
    assert '"update:tabIndex": null\n' in source


def test_vue2_editor_declares_model(emitter, sample_model):
    source = emitter.render_component(
        component_for(sample_model, "dxValidator"), "devextreme", vue_version=2
    )
    assert "emits" not in source
    assert 'model: { prop: "value", event: "update:value" },' in source
    assert "(this as any).$_hasModel = true;" in source
    assert 'import { createExtensionComponent } from "./core/index";' in source


def test_vue3_editor_emits_model_value(emitter, sample_model):
    source = emitter.render_component(component_for(sample_model, "dxValidator"), "devextreme")
    assert '"update:modelValue": null' in source
    assert "model: {" not in source


def test_render_component_with_nested_components(emitter, sample_model):
    source = emitter.render_component(component_for(sample_model, "dxList"), "devextreme")

    assert 'export { ExplicitTypes } from "devextreme/ui/list";' in source
    assert 'import { createConfigurationComponent } from "./core/index";' in source
    assert "    items: Array,\n" in source
    assert "    dataSource: [Array, Object]\n" in source
    assert (
        "    (this as any).$_expectedChildren = {\n"
        '      item: { isCollectionItem: true, optionName: "items" }\n'
        "    };"
    ) in source
    assert "const DxItem = createConfigurationComponent({" in source
    assert "    disabled: Boolean,\n    text: String\n" in source
    assert '(DxItem as any).$_optionName = "items";' in source
    assert "(DxItem as any).$_isCollectionItem = true;" in source
    assert '(DxItem as any).$_predefinedProps = {\n  "kind": "default"\n};' in source
    assert "export {\n  DxList,\n  DxItem\n};" in source


def test_type_reexports_only_when_requested(emitter, sample_model):
    component = component_for(sample_model, "dxList")
    line = 'export type * as ListTypes from "devextreme/ui/list_types";'

    assert line in emitter.render_component(component, "devextreme", generate_reexports=True)
    assert line not in emitter.render_component(component, "devextreme")


def test_no_type_reexports_for_default_only(emitter, sample_model):
    source = emitter.render_component(
        component_for(sample_model, "dxButton"), "devextreme", generate_reexports=True
    )
    assert "export type *" not in source


def test_unsupported_vue_version(emitter, sample_model):
    with pytest.raises(TemplateError):
        emitter.render_component(component_for(sample_model, "dxButton"), "devextreme", 4)


# ─── Index and common re-exports ────────────────────────────────────────────

def test_render_index(emitter):
    source = emitter.render_index(
        [ReExport("DxButton", "./button"), ReExport("DxDataGrid", "./data-grid")]
    )
    assert source == (
        'export { DxButton } from "./button";\n'
        'export { DxDataGrid } from "./data-grid";\n'
    )


def test_render_common_reexports(emitter):
    source = emitter.render_common_reexports("common", ["Format", "Position"], "devextreme")
    assert source == 'export {\n  Format,\n  Position\n} from "devextreme/common";\n'


@pytest.mark.parametrize(
    "key, expected",
    [
        ("common", "index.ts"),
        ("common/charts", "charts.ts"),
        ("data", "data.ts"),
    ],
)
def test_common_reexports_file_name(key, expected):
    assert common_reexports_file_name(key) == expected


# ─── Template engine ────────────────────────────────────────────────────────

def test_custom_template_directory(tmp_path):
    (tmp_path / "index.ts.j2").write_text(
        "{% for entry in reexports %}{{ entry.name }}={{ entry.path | js_value }};{% endfor %}",
        encoding="utf-8",
    )
    emitter = VueEmitter(template_dir=tmp_path)
    assert emitter.render_index([ReExport("DxButton", "./button")]) == 'DxButton="./button";'


def test_missing_template_raises(tmp_path):
    engine = create_template_engine(tmp_path)
    with pytest.raises(TemplateError, match="Template not found"):
        engine.render_template("missing.j2", {})


def test_missing_template_directory_raises(tmp_path):
    with pytest.raises(TemplateError, match="directory not found"):
        TemplateEngine(tmp_path / "missing")


@pytest.mark.parametrize(
    "types, expected",
    [
        ([], "{}"),
        (["String"], "String"),
        (["Number", "String"], "[Number, String]"),
    ],
)
def test_prop_type_filter(types, expected):
    assert prop_type(types) == expected


def test_js_value_filter():
    assert js_value("über") == '"über"'
    assert js_value([1, True, None]) == "[1, true, null]"
    assert js_value({"a": 1}, 2) == '{\n  "a": 1\n}'


def test_indent_lines_filter():
    assert indent_lines("{\n  a\n\n}", 4) == "{\n      a\n\n    }"
    assert indent_lines("x\ny", 2, first=True) == "  x\n  y"
