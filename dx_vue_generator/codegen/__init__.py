"""
Vue wrapper code generation.

Generates Vue component modules from widget metadata.
"""

from .core import (
    MetadataModel,
    ComponentIR,
    GeneratorConfig,
    GeneratorError,
    GenerationResult,
    VueGenerator,
    generate,
    load_config,
    map_widget,
)
from .vue import VueEmitter


def generate_from_metadata(metadata, config=None):
    """
    Generate Vue components from a raw metadata document.

    Args:
        metadata: Parsed metadata JSON (dict) or MetadataModel
        config: GeneratorConfig, dict of overrides, or None for defaults

    Returns:
        GenerationResult with written files
    """
    if not isinstance(metadata, MetadataModel):
        metadata = MetadataModel.from_dict(metadata)

    if isinstance(config, dict):
        config = load_config(custom_config=config)

    return generate(metadata, config)


__all__ = [
    "MetadataModel",
    "ComponentIR",
    "GeneratorConfig",
    "GeneratorError",
    "GenerationResult",
    "VueGenerator",
    "VueEmitter",
    "generate",
    "generate_from_metadata",
    "load_config",
    "map_widget",
]
