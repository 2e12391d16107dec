"""
Language registry for the accessor generators.

Maps target language names and their aliases to generator classes.
"""

from typing import Any, Dict, List, Optional, Type, Union

from .core.config import BuildSettings, ConfigError
from .core.generator import CodeGenerator


class RegistryError(Exception):
    """Raised for unknown languages and generators that cannot be created."""

    pass


class GeneratorRegistry:
    """Target languages known to the command line and the builder."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        # Every accepted name, primary names included, mapped to its language
        self._names: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator under a language name and its aliases.

        Raises:
            RegistryError: If the class is not a generator or a name is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        language_key = language.lower()
        names = {language_key} | {alias.lower() for alias in aliases or []}

        for name in sorted(names):
            owner = self._names.get(name)
            if owner is not None and owner != language_key:
                raise RegistryError(f"Language name '{name}' is already used by '{owner}'")

        self._generators[language_key] = generator_class
        for name in names:
            self._names[name] = language_key

    def resolve_language(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If the language is unknown
        """
        try:
            return self._names[language.lower()]
        except KeyError:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            ) from None

    def create_generator(
        self,
        language: str,
        config: Optional[Union[BuildSettings, Dict[str, Any]]] = None,
    ) -> CodeGenerator:
        """
        Create a generator for a language name or alias.

        Args:
            language: Language name or alias
            config: Language configuration dict, or build settings carrying one

        Raises:
            RegistryError: If the language is unknown or its configuration invalid
        """
        generator_class = self._generators[self.resolve_language(language)]

        if isinstance(config, BuildSettings):
            language_config = dict(config.language_config)
        elif isinstance(config, dict):
            language_config = dict(config)
        elif config is None:
            language_config = {}
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            return generator_class(language_config)
        except ConfigError as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Primary language names, sorted."""
        return sorted(self._generators)

    def describe(self, language: str) -> Dict[str, Any]:
        """Summarize a registered language for listings."""
        language_key = self.resolve_language(language)
        generator = self._generators[language_key]({})

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": sorted(
                name
                for name, owner in self._names.items()
                if owner == language_key and name != language_key
            ),
            "module": type(generator).__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the shared registry with the built-in languages."""
    global _global_registry
    if _global_registry is None:
        from .languages.csharp import CSharpGenerator
        from .languages.python import PythonGenerator

        _global_registry = GeneratorRegistry()
        _global_registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
        _global_registry.register("python", PythonGenerator, aliases=["py"])
    return _global_registry


def get_generator(
    language: str,
    config: Optional[Union[BuildSettings, Dict[str, Any]]] = None,
) -> CodeGenerator:
    """Create a generator from the shared registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Describe every built-in language, keyed by primary name."""
    registry = get_registry()
    return {language: registry.describe(language) for language in registry.list_languages()}
