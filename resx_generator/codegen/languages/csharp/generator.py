"""
C# code generator implementation.

Generates a class exposing each string resource as a property backed by
``System.Resources.ResourceManager``.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from ...core.config import GeneratorOptions
from ...core.generator import AUTO_GENERATED_HEADER, CodeGenerator
from ...core.naming import IdentifierSanitizer, SanitizedEntry
from .naming import create_csharp_sanitizer

SUMMARY_PREFIX = "Looks up a localized string similar to "

# Members the generated class declares next to the accessors
GENERATED_MEMBERS = {"s_resourceManager", "ResourceManager", "CultureInfo"}

# Every character sequence that ends a C# single-line comment
LINE_TERMINATORS = re.compile(r"\r\n|[\r\n\u0085\u2028\u2029]")


class CSharpGenerator(CodeGenerator):
    """Code generator for strongly typed C# resource classes."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def create_sanitizer(self) -> IdentifierSanitizer:
        return create_csharp_sanitizer()

    def get_template_directory(self) -> Path:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def reserved_members(self, options: GeneratorOptions) -> Set[str]:
        # A member may not share the name of its enclosing type
        return GENERATED_MEMBERS | {self.type_name(options)}

    def render(self, entries: List[SanitizedEntry], options: GeneratorOptions) -> str:
        """Render the class declaration and wrap it in its namespace."""
        type_name = self.type_name(options)

        context = {
            "header": AUTO_GENERATED_HEADER,
            "namespace": options.namespace,
            "identity": options.identity,
            "type_name": type_name,
            "visibility": "public" if options.public_class else "internal",
            "static_class": options.static_class,
            "null_forgiving": options.null_forgiving_operators,
            "entries": [self._entry_data(entry) for entry in entries],
        }

        context["body"] = self.render_template("class.cs.j2", context)
        return self.render_template("file.cs.j2", context)

    def _entry_data(self, entry: SanitizedEntry) -> Dict[str, Any]:
        """Generate accessor data for template."""
        summary = f"{SUMMARY_PREFIX}{entry.summary}."

        return {
            "identifier": entry.identifier,
            "key": entry.key,
            "summary_lines": LINE_TERMINATORS.split(summary),
            "remarks_lines": (
                LINE_TERMINATORS.split(entry.escaped_comment)
                if entry.escaped_comment
                else []
            ),
        }


def create_csharp_generator(config: Optional[Dict[str, Any]] = None) -> CSharpGenerator:
    """Create a C# generator with default configuration."""
    default_config = {"line_ending": "\n"}

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return CSharpGenerator(merged_config)
