"""
Widget metadata model.

Dataclasses mirroring the metadata JSON consumed by the generator.
The loaders are lenient: the model is assumed to be structurally
valid and missing optional keys fall back to empty values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TypeDescriptor:
    """A raw type reference of an option, optionally restricted to literal values."""

    type: str
    acceptable_values: Optional[List[Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeDescriptor":
        return cls(
            type=data["type"],
            acceptable_values=data.get("acceptableValues"),
        )


@dataclass
class OptionDefinition:
    """A configurable option of a widget or nested component."""

    name: str
    types: List[TypeDescriptor] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OptionDefinition":
        return cls(
            name=data["name"],
            types=[TypeDescriptor.from_dict(t) for t in data.get("types") or []],
        )


@dataclass
class ComponentReference:
    """Reference to a nested component that may be placed inside another one."""

    component_name: str
    option_name: str
    is_collection_item: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentReference":
        return cls(
            component_name=data["componentName"],
            option_name=data["optionName"],
            is_collection_item=data.get("isCollectionItem", False),
        )


@dataclass
class ComplexOptionDefinition:
    """An option whose value is a structured sub-component with its own options."""

    name: str
    option_name: str
    props: List[OptionDefinition] = field(default_factory=list)
    is_collection_item: bool = False
    predefined_props: Any = None
    nesteds: List[ComponentReference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplexOptionDefinition":
        return cls(
            name=data["name"],
            option_name=data["optionName"],
            props=[OptionDefinition.from_dict(p) for p in data.get("props") or []],
            is_collection_item=data.get("isCollectionItem", False),
            predefined_props=data.get("predefinedProps"),
            nesteds=[ComponentReference.from_dict(n) for n in data.get("nesteds") or []],
        )


@dataclass
class CustomTypeDefinition:
    """
    Named, reusable type definition.

    Only the type resolver looks inside it: ``types`` aliases other
    type descriptors, ``props`` describes an object shape.
    """

    name: str
    types: List[TypeDescriptor] = field(default_factory=list)
    props: List[OptionDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomTypeDefinition":
        return cls(
            name=data["name"],
            types=[TypeDescriptor.from_dict(t) for t in data.get("types") or []],
            props=[OptionDefinition.from_dict(p) for p in data.get("props") or []],
        )


@dataclass
class WidgetDefinition:
    """Description of one widget in the metadata model."""

    name: str
    export_path: str
    options: List[OptionDefinition] = field(default_factory=list)
    is_extension: bool = False
    is_editor: bool = False
    options_type_params: List[str] = field(default_factory=list)
    # None means the widget has no concept of complex options at all
    complex_options: Optional[List[ComplexOptionDefinition]] = None
    nesteds: List[ComponentReference] = field(default_factory=list)
    reexports: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WidgetDefinition":
        complex_options = data.get("complexOptions")
        return cls(
            name=data["name"],
            export_path=data.get("exportPath", ""),
            options=[OptionDefinition.from_dict(o) for o in data.get("options") or []],
            is_extension=data.get("isExtension", False),
            is_editor=data.get("isEditor", False),
            options_type_params=list(data.get("optionsTypeParams") or []),
            complex_options=(
                [ComplexOptionDefinition.from_dict(c) for c in complex_options]
                if complex_options is not None
                else None
            ),
            nesteds=[ComponentReference.from_dict(n) for n in data.get("nesteds") or []],
            reexports=list(data.get("reexports") or []),
        )


@dataclass
class MetadataModel:
    """The whole metadata document: widgets, custom types and common re-exports."""

    widgets: List[WidgetDefinition] = field(default_factory=list)
    custom_types: List[CustomTypeDefinition] = field(default_factory=list)
    common_reexports: Optional[Dict[str, List[str]]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetadataModel":
        return cls(
            widgets=[WidgetDefinition.from_dict(w) for w in data.get("widgets") or []],
            custom_types=[
                CustomTypeDefinition.from_dict(t) for t in data.get("customTypes") or []
            ],
            common_reexports=data.get("commonReexports"),
        )

    def get_widget(self, name: str) -> Optional[WidgetDefinition]:
        """Get widget by raw name ("dxButton") or stripped name ("Button")."""
        for widget in self.widgets:
            if widget.name == name or widget.name == f"dx{name}":
                return widget
        return None
