"""
Vue component source emitter.

Renders component IR into TypeScript modules using the Jinja2
templates shipped in the ``templates`` directory next to this file.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ..core.config import SUPPORTED_VUE_VERSIONS
from ..core.ir import ComponentIR, ExpectedChild, NestedComponentIR, PropIR
from ..core.templates import TemplateEngine, TemplateError, create_template_engine

COMMON_REEXPORTS_KEY = "common"

# Events every widget component emits in Vue 3 besides option updates
WIDGET_EVENTS = ("isActive", "hoveredElement")


class VueEmitter:
    """Emits widget components, the index module and common re-export modules."""

    def __init__(self, template_dir: Optional[Path] = None):
        self._template_engine: TemplateEngine = create_template_engine(
            template_dir or self.get_template_directory()
        )

    def get_template_directory(self) -> Path:
        """Return the Vue templates directory."""
        return Path(__file__).parent / "templates"

    def render_component(
        self,
        component: ComponentIR,
        widgets_package: str,
        vue_version: int = 3,
        generate_reexports: bool = False,
    ) -> str:
        """
        Render the module for one widget component.

        Args:
            component: Component IR produced by map_widget
            widgets_package: Package the widget classes are imported from
            vue_version: Target Vue major version (2 or 3)
            generate_reexports: Whether to re-export the widget's types

        Returns:
            TypeScript source
        """
        if vue_version not in SUPPORTED_VUE_VERSIONS:
            raise TemplateError(f"Unsupported Vue version: {vue_version}")

        widget_path = f"{widgets_package}/{component.widget_component.path}"
        nested_components = component.nested_components or ()

        context = {
            "component": component,
            "widget": component.widget_component,
            "widget_path": widget_path,
            "vue_version": vue_version,
            "props": self._props_data(component.props),
            "emits": self._emits_data(component.props, WIDGET_EVENTS, component.has_model),
            "expected_children": self._expected_children_data(component.expected_children),
            "nested_components": [
                self._nested_component_data(nested, vue_version)
                for nested in nested_components
            ],
            "reexport_types": generate_reexports and component.contains_reexports,
        }

        return self._template_engine.render_template("component.ts.j2", context)

    def render_index(self, reexports: Iterable[Any]) -> str:
        """Render the index module; entries need ``name`` and ``path`` attributes."""
        return self._template_engine.render_template(
            "index.ts.j2", {"reexports": list(reexports)}
        )

    def render_common_reexports(
        self, key: str, names: Sequence[str], widgets_package: str = "devextreme"
    ) -> str:
        """Render one module re-exporting shared names from ``widgets_package/key``."""
        return self._template_engine.render_template(
            "common_reexports.ts.j2",
            {"key": key, "names": list(names), "widgets_package": widgets_package},
        )

    def _props_data(self, props: Sequence[PropIR]) -> List[Dict[str, Any]]:
        props_data = []
        for prop in props:
            prop_data = {"name": prop.name, "types": prop.types, "validator": None}
            if prop.acceptable_values is not None:
                prop_data["validator"] = {
                    "value_type": prop.acceptable_value_type,
                    "values": list(prop.acceptable_values),
                }
            props_data.append(prop_data)
        return props_data

    def _emits_data(
        self, props: Sequence[PropIR], events: Sequence[str], has_model: bool = False
    ) -> List[str]:
        emits = [f"update:{event}" for event in events]
        emits.extend(f"update:{prop.name}" for prop in props)
        if has_model:
            emits.append("update:modelValue")
        return emits

    def _expected_children_data(
        self, expected_children: Optional[Mapping[str, ExpectedChild]]
    ) -> Optional[List[Dict[str, Any]]]:
        if expected_children is None:
            return None
        return [
            {
                "name": name,
                "is_collection_item": child.is_collection_item,
                "option_name": child.option_name,
            }
            for name, child in expected_children.items()
        ]

    def _nested_component_data(
        self, nested: NestedComponentIR, vue_version: int
    ) -> Dict[str, Any]:
        return {
            "name": nested.name,
            "option_name": nested.option_name,
            "is_collection_item": nested.is_collection_item,
            "predefined_props": nested.predefined_props,
            "props": self._props_data(nested.props),
            "emits": (
                self._emits_data(nested.props, WIDGET_EVENTS) if vue_version == 3 else []
            ),
            "expected_children": self._expected_children_data(nested.expected_children),
        }


def common_reexports_file_name(key: str, file_extension: str = ".ts") -> str:
    """
    File name for a common re-export group.

    The ``common`` key targets the index module; other keys are named
    after the key with a leading ``common/`` removed.
    """
    if key == COMMON_REEXPORTS_KEY:
        return f"index{file_extension}"
    prefix = f"{COMMON_REEXPORTS_KEY}/"
    if key.startswith(prefix):
        key = key[len(prefix):]
    return f"{key}{file_extension}"
