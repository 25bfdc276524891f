"""
Widget metadata to component IR mapping.

Turns raw widget definitions into the normalized representation the
emitters consume. Every function here is pure and total over a
structurally valid model: nothing is validated and nothing raises.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from .ir import (
    ComponentDescriptor,
    ComponentIR,
    ExpectedChild,
    NestedComponentIR,
    PropIR,
    ValueRestriction,
    WidgetFile,
)
from .model import (
    ComplexOptionDefinition,
    ComponentReference,
    CustomTypeDefinition,
    OptionDefinition,
    TypeDescriptor,
    WidgetDefinition,
)
from .naming import remove_prefix, to_kebab_case, uppercase_first
from .types import (
    ARRAY_TYPE,
    CustomTypeRegistry,
    TypeResolver,
    build_custom_type_registry,
    get_default_resolver,
)

WIDGET_PREFIX = "dx"
COMPONENT_PREFIX = "Dx"
RESERVED_PROP_NAMES = frozenset({"key"})

BASE_COMPONENT_NAME = "createComponent"
EXTENSION_COMPONENT_NAME = "createExtensionComponent"
CONFIG_COMPONENT_NAME = "createConfigurationComponent"

DEFAULT_REEXPORT = "default"


def build_value_restriction(
    restricted_types: Sequence[TypeDescriptor],
) -> Optional[ValueRestriction]:
    """
    Derive the value restriction of an option.

    Only the first descriptor is consulted. String restrictions are
    left to the typings, so they produce no runtime restriction.

    Args:
        restricted_types: Descriptors that carry non-empty acceptable values

    Returns:
        ValueRestriction or None
    """
    if not restricted_types:
        return None

    first = restricted_types[0]
    value_type = first.type.lower()
    if value_type == "string":
        return None

    return ValueRestriction(value_type=value_type, values=tuple(first.acceptable_values))


def map_prop(
    option: OptionDefinition,
    custom_types: Mapping,
    resolver: Optional[TypeResolver] = None,
) -> PropIR:
    """Map one raw option to a PropIR."""
    resolver = resolver or get_default_resolver()
    types = tuple(resolver.resolve(option.types, custom_types))

    restricted_types = [t for t in option.types if t.acceptable_values]
    restriction = build_value_restriction(restricted_types)

    return PropIR(
        name=option.name,
        types=types,
        is_array=types == (ARRAY_TYPE,),
        acceptable_values=restriction.values if restriction else None,
        acceptable_value_type=restriction.value_type if restriction else None,
    )


def get_props(
    options: Iterable[OptionDefinition],
    custom_types: Mapping,
    resolver: Optional[TypeResolver] = None,
) -> Tuple[PropIR, ...]:
    """Map options to props in order, skipping reserved names."""
    return tuple(
        map_prop(option, custom_types, resolver)
        for option in options
        if option.name not in RESERVED_PROP_NAMES
    )


def map_expected_children(
    nesteds: Optional[Sequence[ComponentReference]],
) -> Optional[Mapping[str, ExpectedChild]]:
    """
    Index child component references by component name.

    Returns None when there are no references, otherwise a read-only
    view. A later reference with the same component name replaces the
    earlier one.
    """
    if not nesteds:
        return None

    expected_children: Dict[str, ExpectedChild] = {}
    for nested in nesteds:
        expected_children[nested.component_name] = ExpectedChild(
            is_collection_item=bool(nested.is_collection_item),
            option_name=nested.option_name,
        )

    return MappingProxyType(expected_children)


def map_nested_component(
    complex_option: ComplexOptionDefinition,
    custom_types: Mapping,
    resolver: Optional[TypeResolver] = None,
) -> NestedComponentIR:
    """Map one complex option to a nested configuration component (one level only)."""
    return NestedComponentIR(
        name=f"{COMPONENT_PREFIX}{uppercase_first(complex_option.name)}",
        option_name=complex_option.option_name,
        props=get_props(complex_option.props, custom_types, resolver),
        is_collection_item=complex_option.is_collection_item,
        predefined_props=complex_option.predefined_props,
        expected_children=map_expected_children(complex_option.nesteds),
    )


def map_widget(
    widget: WidgetDefinition,
    base_component_path: str,
    config_component_path: str,
    custom_types: Union[CustomTypeRegistry, Sequence[CustomTypeDefinition]],
    file_extension: str = ".ts",
    resolver: Optional[TypeResolver] = None,
) -> WidgetFile:
    """
    Map a widget definition to its file name and component IR.

    Args:
        widget: Raw widget definition
        base_component_path: Module exporting the component factories
        config_component_path: Module exporting the configuration component factory
        custom_types: Custom type definitions, or a registry built from them
        file_extension: Extension of the emitted source file
        resolver: Type resolver (default mapping if omitted)

    Returns:
        WidgetFile with file name and ComponentIR
    """
    if not isinstance(custom_types, Mapping):
        custom_types = build_custom_type_registry(custom_types)

    name = remove_prefix(widget.name, WIDGET_PREFIX)

    base_component_name = (
        EXTENSION_COMPONENT_NAME if widget.is_extension else BASE_COMPONENT_NAME
    )

    nested_components = None
    if widget.complex_options is not None:
        nested_components = tuple(
            map_nested_component(complex_option, custom_types, resolver)
            for complex_option in widget.complex_options
        )

    component = ComponentIR(
        name=f"{COMPONENT_PREFIX}{name}",
        widget_component=ComponentDescriptor(name=name, path=widget.export_path),
        base_component=ComponentDescriptor(
            name=base_component_name, path=base_component_path
        ),
        config_component=ComponentDescriptor(
            name=CONFIG_COMPONENT_NAME, path=config_component_path
        ),
        props=get_props(widget.options, custom_types, resolver),
        has_model=bool(widget.is_editor),
        has_explicit_types=bool(widget.options_type_params),
        nested_components=nested_components,
        expected_children=map_expected_children(widget.nesteds),
        contains_reexports=any(r != DEFAULT_REEXPORT for r in widget.reexports),
    )

    return WidgetFile(file_name=f"{to_kebab_case(name)}{file_extension}", component=component)

