"""
Resource Code Generation Module

Generates strongly typed accessor classes from ``.resx`` resource files.
"""

import io
from typing import Any, BinaryIO, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import GeneratorError, IdentifierCollisionError, ResourceParseError
from .core.resources import ResourceEntry, ResourceParser
from .core.config import (
    BuildSettings,
    ConfigError,
    ConfigManager,
    GeneratorOptions,
    ResourceFileMetadata,
    load_config,
)


def generate_from_stream(
    resource_stream: Union[BinaryIO, bytes],
    options: GeneratorOptions,
    language: str = "csharp",
    config: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Generate accessor source for one resource document.

    Args:
        resource_stream: Byte stream (or bytes) with the resource document
        options: Resolved options for this file
        language: Target language name
        config: Language configuration

    Returns:
        Generated source text

    Raises:
        GeneratorError: If the document is malformed or identifiers collide
    """
    generator = get_generator(language, config)

    if isinstance(resource_stream, bytes):
        with io.BytesIO(resource_stream) as stream:
            return generator.generate(stream, options)

    return generator.generate(resource_stream, options)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "IdentifierCollisionError",
    "ResourceParseError",
    "ResourceEntry",
    "ResourceParser",
    "BuildSettings",
    "ConfigError",
    "ConfigManager",
    "GeneratorOptions",
    "ResourceFileMetadata",
    "generate_code",
    "generate_from_stream",
    "get_generator",
    "get_registry",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
]
