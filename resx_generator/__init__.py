"""
resx_generator - strongly typed accessors for .resx resource files.

Parses XML resource files and generates one accessor class per resource
set, in C# or Python, with every string resource exposed as a member.
"""

__version__ = "0.3.0"

from .builder import FileOutcome, ResourceBuilder, select_generation_inputs, write_outputs
from .codegen import (
    BuildSettings,
    CodeGenerator,
    ConfigError,
    GenerationResult,
    GeneratorError,
    GeneratorOptions,
    IdentifierCollisionError,
    RegistryError,
    ResourceEntry,
    ResourceParseError,
    ResourceParser,
    generate_code,
    generate_from_stream,
    get_generator,
    list_supported_languages,
    load_config,
)
from .codegen.core.locations import get_base_name, get_local_namespace, is_locale_variant

__all__ = [
    "__version__",
    "BuildSettings",
    "CodeGenerator",
    "ConfigError",
    "FileOutcome",
    "GenerationResult",
    "GeneratorError",
    "GeneratorOptions",
    "IdentifierCollisionError",
    "RegistryError",
    "ResourceBuilder",
    "ResourceEntry",
    "ResourceParseError",
    "ResourceParser",
    "generate_code",
    "generate_from_stream",
    "get_base_name",
    "get_generator",
    "get_local_namespace",
    "is_locale_variant",
    "list_supported_languages",
    "load_config",
    "select_generation_inputs",
    "write_outputs",
]
