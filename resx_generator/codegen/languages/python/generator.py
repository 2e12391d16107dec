"""
Python code generator implementation.

Generates a module with one class whose properties look resources up
through a lookup provider created by a configurable factory.
"""

import re
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional, Set

from ...core.config import ConfigError, GeneratorOptions
from ...core.generator import AUTO_GENERATED_HEADER, CodeGenerator
from ...core.naming import IdentifierSanitizer, SanitizedEntry
from .naming import create_python_sanitizer

SUMMARY_PREFIX = "Looks up a localized string similar to "

DEFAULT_LOOKUP_FACTORY = "resource_lookup:get_lookup"

# "package.module:callable"
LOOKUP_FACTORY_PATTERN = re.compile(
    r"^(?P<module>[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*):(?P<callable>[A-Za-z_]\w*)$"
)

# Attributes of the generated class and of ``type`` itself
GENERATED_MEMBERS = {"locale", "mro"}

LINE_TERMINATORS = re.compile(r"\r\n|[\r\n\u0085\u2028\u2029]")


class PythonGenerator(CodeGenerator):
    """Code generator for Python resource accessor modules."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize Python generator with configuration."""
        super().__init__(config)

        lookup_factory = self.config.get("lookup_factory", DEFAULT_LOOKUP_FACTORY)
        match = LOOKUP_FACTORY_PATTERN.match(lookup_factory)
        if not match:
            raise ConfigError(
                f"Invalid lookup_factory '{lookup_factory}', expected 'module:callable'"
            )
        self.lookup_module = match.group("module")
        self.lookup_callable = match.group("callable")

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def create_sanitizer(self) -> IdentifierSanitizer:
        return create_python_sanitizer()

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def reserved_members(self, options: GeneratorOptions) -> Set[str]:
        return set(GENERATED_MEMBERS)

    def output_file_name(self, options: GeneratorOptions) -> str:
        """Place the module in a package path mirroring its namespace."""
        segments = [part for part in options.namespace.split(".") if part]
        return str(
            PurePosixPath(*segments, f"{self.type_name(options)}{self.file_extension}")
        )

    def render(self, entries: List[SanitizedEntry], options: GeneratorOptions) -> str:
        """Render the accessor module."""
        context = {
            "header": AUTO_GENERATED_HEADER,
            "identity": options.identity,
            "type_name": self.type_name(options),
            "public_class": options.public_class,
            "static_class": options.static_class,
            "null_forgiving": options.null_forgiving_operators,
            "return_type": "str" if options.null_forgiving_operators else "Optional[str]",
            "lookup_module": self.lookup_module,
            "lookup_callable": self.lookup_callable,
            "entries": [self._entry_data(entry) for entry in entries],
        }

        return self.render_template("module.py.j2", context)

    def _entry_data(self, entry: SanitizedEntry) -> Dict[str, Any]:
        """Generate accessor data for template."""
        doc_lines = LINE_TERMINATORS.split(f"{SUMMARY_PREFIX}{entry.summary}.")

        if entry.escaped_comment:
            doc_lines.append("")
            doc_lines.extend(LINE_TERMINATORS.split(entry.escaped_comment))

        return {
            "identifier": entry.identifier,
            "key": entry.key,
            "doc_lines": doc_lines,
        }


def create_python_generator(config: Optional[Dict[str, Any]] = None) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    default_config = {
        "line_ending": "\n",
        "lookup_factory": DEFAULT_LOOKUP_FACTORY,
    }

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return PythonGenerator(merged_config)
