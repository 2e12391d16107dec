"""
Core code generation components.

Provides the resource model, naming, location and configuration utilities
and the base generator used by all language generators.
"""

from .errors import GeneratorError, ResourceParseError, IdentifierCollisionError
from .generator import CodeGenerator, GenerationResult, generate_code
from .resources import ResourceEntry, ResourceParser, parse_resources, string_entries
from .naming import IdentifierSanitizer, SanitizedEntry, escape_xml_documentation
from .locations import (
    LocaleTagKind,
    classify_locale_tag,
    get_base_name,
    get_locale_tag,
    get_local_namespace,
    is_locale_variant,
)
from .config import (
    BuildSettings,
    ConfigError,
    ConfigManager,
    GeneratorOptions,
    ResourceFileMetadata,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "ResourceParseError",
    "IdentifierCollisionError",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Resource model
    "ResourceEntry",
    "ResourceParser",
    "parse_resources",
    "string_entries",
    # Naming utilities
    "IdentifierSanitizer",
    "SanitizedEntry",
    "escape_xml_documentation",
    # Location metadata
    "LocaleTagKind",
    "classify_locale_tag",
    "get_base_name",
    "get_locale_tag",
    "get_local_namespace",
    "is_locale_variant",
    # Configuration system
    "BuildSettings",
    "ConfigError",
    "ConfigManager",
    "GeneratorOptions",
    "ResourceFileMetadata",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
