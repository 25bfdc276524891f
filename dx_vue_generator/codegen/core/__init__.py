"""
Core code generation components.

Metadata model, IR, the mapping layer and the shared generation
infrastructure (configuration, templates, orchestration).
"""

from .model import (
    MetadataModel,
    WidgetDefinition,
    OptionDefinition,
    TypeDescriptor,
    ComplexOptionDefinition,
    ComponentReference,
    CustomTypeDefinition,
)
from .ir import (
    ComponentIR,
    ComponentDescriptor,
    PropIR,
    NestedComponentIR,
    ExpectedChild,
    ValueRestriction,
    WidgetFile,
)
from .naming import remove_prefix, to_kebab_case, uppercase_first, remove_extension
from .types import (
    CustomTypeRegistry,
    TypeResolver,
    build_custom_type_registry,
    convert_types,
)
from .mapper import (
    build_value_restriction,
    map_prop,
    get_props,
    map_expected_children,
    map_nested_component,
    map_widget,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import (
    VueGenerator,
    GeneratorError,
    GenerationResult,
    ReExport,
    build_reexport_path,
    generate,
)

__all__ = [
    # Metadata model
    "MetadataModel",
    "WidgetDefinition",
    "OptionDefinition",
    "TypeDescriptor",
    "ComplexOptionDefinition",
    "ComponentReference",
    "CustomTypeDefinition",
    # Intermediate representation
    "ComponentIR",
    "ComponentDescriptor",
    "PropIR",
    "NestedComponentIR",
    "ExpectedChild",
    "ValueRestriction",
    "WidgetFile",
    # Naming utilities
    "remove_prefix",
    "to_kebab_case",
    "uppercase_first",
    "remove_extension",
    # Type system
    "CustomTypeRegistry",
    "TypeResolver",
    "build_custom_type_registry",
    "convert_types",
    # Mapping
    "build_value_restriction",
    "map_prop",
    "get_props",
    "map_expected_children",
    "map_nested_component",
    "map_widget",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Orchestration
    "VueGenerator",
    "GeneratorError",
    "GenerationResult",
    "ReExport",
    "build_reexport_path",
    "generate",
]
