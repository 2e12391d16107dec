"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and the
pipeline they share: parse, sanitize, render, format.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Set

from ...logging_config import get_logger
from .config import GeneratorOptions
from .errors import GeneratorError
from .naming import IdentifierSanitizer, SanitizedEntry
from .resources import ResourceEntry, ResourceParser, string_entries
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

AUTO_GENERATED_HEADER = """\
------------------------------------------------------------------------------
<auto-generated>
    This code was generated by a tool.

    Changes to this file may cause incorrect behavior and will be lost if
    the code is regenerated.
</auto-generated>
------------------------------------------------------------------------------"""


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize generator with optional language configuration."""
        self.config = config or {}
        self.line_ending = self.config.get("line_ending", "\n")
        self.parser = ResourceParser()
        self.sanitizer = self.create_sanitizer()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs', '.py')."""
        pass

    @abstractmethod
    def create_sanitizer(self) -> IdentifierSanitizer:
        """Return the identifier sanitizer for the target language."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def reserved_members(self, options: GeneratorOptions) -> Set[str]:
        """Names of members the generated type declares besides the accessors."""
        return set()

    def type_name(self, options: GeneratorOptions) -> str:
        """Identifier used to declare the generated type."""
        if self.sanitizer.is_valid_identifier(options.class_name):
            return options.class_name
        return self.sanitizer.sanitize_name(options.class_name)

    def output_file_name(self, options: GeneratorOptions) -> str:
        """Suggested file name for the generated source."""
        return f"{options.identity}.g{self.file_extension}"

    def generate(
        self,
        resource_stream: BinaryIO,
        options: GeneratorOptions,
        source: Optional[str] = None,
    ) -> str:
        """
        Generate accessor source for one resource file.

        Args:
            resource_stream: Byte stream with the resource document
            options: Resolved options for this file
            source: Optional name of the stream used in diagnostics

        Returns:
            Generated source text
        """
        entries = self.parser.parse(resource_stream, source)
        return self.generate_from_entries(entries, options)

    def generate_from_entries(
        self, entries: List[ResourceEntry], options: GeneratorOptions
    ) -> str:
        """Generate accessor source from already parsed entries."""
        sanitized = self.sanitizer.sanitize_entries(
            string_entries(entries), self.reserved_members(options)
        )
        return self.format_code(self.render(sanitized, options))

    @abstractmethod
    def render(self, entries: List[SanitizedEntry], options: GeneratorOptions) -> str:
        """
        Render the complete source file.

        Args:
            entries: Sanitized string resources in file order
            options: Resolved options for this file

        Returns:
            Unformatted source text
        """
        pass

    def validate_entries(self, entries: List[ResourceEntry]) -> List[str]:
        """
        Collect warnings about a parsed resource file.

        Args:
            entries: All entries of the file, including non-string ones

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for entry in entries:
            if not entry.is_string_type:
                warnings.append(
                    f"Resource '{entry.key}' of type '{entry.type_name}' is not a "
                    "string and has no accessor"
                )
            elif not self.sanitizer.is_valid_identifier(entry.key):
                warnings.append(
                    f"Resource '{entry.key}' exposed as "
                    f"'{self.sanitizer.sanitize_name(entry.key)}'"
                )

        if not string_entries(entries):
            warnings.append("Resource file has no string resources")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Normalize generated code.

        Strips trailing whitespace, collapses long runs of blank lines, and ends
        the text with exactly one line ending.
        """
        lines = code.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[0]:
            formatted_lines.pop(0)
        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        return self.line_ending.join(formatted_lines) + self.line_ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    resource_stream: BinaryIO,
    options: GeneratorOptions,
    source: Optional[str] = None,
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Failures never produce partial output: the result is either the full
    source text or an error with an empty ``code``.

    Args:
        generator: Code generator instance
        resource_stream: Byte stream with the resource document
        options: Resolved options for this file
        source: Optional name of the stream used in diagnostics

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        entries = generator.parser.parse(resource_stream, source)
        warnings = generator.validate_entries(entries)
        code = generator.generate_from_entries(entries, options)

    except GeneratorError as e:
        logger.error("Generation failed for %s: %s", source or options.identity, e)
        return GenerationResult.error(str(e), exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "identity": options.identity,
        "output_file": generator.output_file_name(options),
        "entry_count": sum(1 for entry in entries if entry.is_string_type),
        "skipped_count": sum(1 for entry in entries if not entry.is_string_type),
    }

    return GenerationResult(code, warnings, metadata)
