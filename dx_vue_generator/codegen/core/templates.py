"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with filters for emitting TypeScript sources.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


# Template filters for code generation


def js_value(value: Any, indent: Optional[int] = None) -> str:
    """Serialize a value as a JavaScript literal."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def prop_type(types: Sequence[str]) -> str:
    """Render Vue prop constructor(s): {} for none, Name for one, [A, B] for many."""
    if not types:
        return "{}"
    if len(types) == 1:
        return types[0]
    return "[" + ", ".join(types) + "]"


def indent_lines(value: str, spaces: int = 2, first: bool = False) -> str:
    """Indent all non-blank lines; the first line only when ``first`` is set."""
    indent = " " * spaces
    lines = str(value).split("\n")
    result = [indent + line if line.strip() else line for line in lines]
    if not first and result:
        result[0] = lines[0]
    return "\n".join(result)


FILTERS = {
    "js_value": js_value,
    "prop_type": prop_type,
    "indent_lines": indent_lines,
}


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Path):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        if not Path(template_dir).is_dir():
            raise TemplateError(f"Template directory not found: {template_dir}")

        self.template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


def create_template_engine(template_dir: Path) -> TemplateEngine:
    """Create a file-backed template engine."""
    return TemplateEngine(template_dir)
