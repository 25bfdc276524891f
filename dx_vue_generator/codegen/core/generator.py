"""
Generation orchestrator.

Maps every widget of a metadata model, renders the component modules,
the index module and optional common re-export modules, and writes
them to disk.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .mapper import map_widget
from .model import MetadataModel
from .naming import remove_extension
from .types import TypeResolver, build_custom_type_registry

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


@dataclass(frozen=True)
class ReExport:
    """Index entry: exported component name and module path relative to the index."""

    name: str
    path: str


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: List[Path],
        reexports: List[ReExport],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Written files, in write order
            reexports: Index entries
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.reexports = reexports
        self.warnings = warnings or []
        self.metadata = metadata or {}


def build_reexport_path(index_file_name: str, component_file_path: str) -> str:
    """
    Path of a component module as seen from the index module.

    Always uses forward slashes and a leading "./", without extension.
    """
    index_dir = os.path.dirname(index_file_name) or "."
    relative = os.path.relpath(component_file_path, index_dir)
    relative = relative.replace(os.sep, "/")
    return "./" + remove_extension(relative)


class VueGenerator:
    """Writes Vue wrapper components for all widgets of a metadata model."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        emitter=None,
        resolver: Optional[TypeResolver] = None,
    ):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        if emitter is None:
            from ..vue.emitters import VueEmitter

            emitter = VueEmitter()
        self.emitter = emitter
        self.resolver = resolver

    def generate(self, model: MetadataModel) -> GenerationResult:
        """
        Generate and write all modules.

        Widgets are processed one by one; the first write failure stops
        the run and is raised as GeneratorError. Files written before the
        failure are left in place.

        Args:
            model: Loaded metadata model

        Returns:
            GenerationResult with written files and index entries
        """
        config = self.config
        registry = build_custom_type_registry(model.custom_types)
        files: List[Path] = []
        reexports: List[ReExport] = []

        logger.info("Generating %d widget components", len(model.widgets))

        for widget in model.widgets:
            widget_file = map_widget(
                widget,
                config.base_component_path,
                config.config_component_path,
                registry,
                config.file_extension,
                self.resolver,
            )
            widget_file_path = os.path.join(config.components_dir, widget_file.file_name)

            source = self.emitter.render_component(
                widget_file.component,
                config.widgets_package,
                config.vue_version,
                config.generate_reexports,
            )
            files.append(self._write(widget_file_path, source))
            reexports.append(
                ReExport(
                    name=widget_file.component.name,
                    path=build_reexport_path(config.index_file_name, widget_file_path),
                )
            )

        files.append(
            self._write(config.index_file_name, self.emitter.render_index(reexports))
        )

        if config.generate_reexports and model.common_reexports:
            files.extend(self._write_common_reexports(model.common_reexports))

        return GenerationResult(
            files,
            reexports,
            metadata={
                "widget_count": len(model.widgets),
                "custom_type_count": len(registry),
                "file_count": len(files),
                "vue_version": config.vue_version,
                "components_dir": config.components_dir,
            },
        )

    def _write_common_reexports(self, common_reexports: Dict[str, List[str]]) -> List[Path]:
        from ..vue.emitters import COMMON_REEXPORTS_KEY, common_reexports_file_name

        common_path = Path(self.config.components_dir) / COMMON_REEXPORTS_KEY
        try:
            common_path.mkdir(exist_ok=True)
        except OSError as e:
            raise GeneratorError(f"Failed to create directory {common_path}: {e}") from e

        written = []
        for key, names in common_reexports.items():
            target = common_path / common_reexports_file_name(key, self.config.file_extension)
            source = self.emitter.render_common_reexports(
                key, names, self.config.widgets_package
            )
            written.append(self._write(target, source))
        return written

    def _write(self, path, content: str) -> Path:
        path = Path(path)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GeneratorError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)
        return path


def generate(
    model: MetadataModel, config: Optional[GeneratorConfig] = None
) -> GenerationResult:
    """
    Generate all modules for a model.

    Args:
        model: Loaded metadata model
        config: Generator configuration (defaults if omitted)

    Returns:
        GenerationResult
    """
    return VueGenerator(config).generate(model)
