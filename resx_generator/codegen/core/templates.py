"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

import json
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from jinja2.exceptions import TemplateError as JinjaTemplateError

from .errors import GeneratorError


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Path):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing the generator's template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )

        # Add custom filters for code generation
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter
        self._env.filters["string_literal"] = self._string_literal_filter

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
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    # Template filters for code generation

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}".rstrip() for line in lines)

    def _string_literal_filter(self, value: str) -> str:
        """Quote a value as a double-quoted string literal (valid in C# and Python)."""
        literal = json.dumps(str(value), ensure_ascii=False)
        for separator in ("\u0085", "\u2028", "\u2029"):
            literal = literal.replace(separator, f"\\u{ord(separator):04x}")
        return literal


def create_template_engine(template_dir: Path) -> TemplateEngine:
    """Create a template engine loading templates from ``template_dir``."""
    return TemplateEngine(template_dir)
