"""
Batch driver for resource code generation.

Selects the resource files that get accessors, resolves their options from
the build settings, and generates them concurrently. Each file succeeds or
fails on its own; a failed file never affects its siblings.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .codegen.core.config import (
    BuildSettings,
    ConfigError,
    GeneratorOptions,
    get_config_manager,
)
from .codegen.core.generator import CodeGenerator, GenerationResult, generate_code
from .codegen.core.locations import is_locale_variant
from .codegen.registry import get_generator
from .logging_config import get_logger

logger = get_logger(__name__)

RESOURCE_EXTENSION = ".resx"


def is_resource_file(path: Union[str, Path]) -> bool:
    """Check whether a path names a ``.resx`` resource file."""
    return Path(path).suffix.lower() == RESOURCE_EXTENSION


def select_generation_inputs(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """
    Pick the files accessors are generated for.

    Only resource files qualify, and locale variants such as
    ``Messages.fr.resx`` are dropped: their values are found at runtime
    through the base file's accessors.
    """
    selected = []

    for path in paths:
        if not is_resource_file(path):
            continue
        if is_locale_variant(str(path)):
            logger.debug("Skipping locale variant %s", path)
            continue
        selected.append(Path(path))

    return selected


@dataclass
class FileOutcome:
    """Result of generating one resource file."""

    path: Path
    result: GenerationResult
    options: Optional[GeneratorOptions] = None

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def identity(self) -> Optional[str]:
        return self.options.identity if self.options else None

    @property
    def output_file(self) -> Optional[str]:
        return self.result.metadata.get("output_file")


class ResourceBuilder:
    """Generates accessors for the resource files of one project."""

    def __init__(
        self,
        settings: BuildSettings,
        language: Optional[str] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the builder.

        Args:
            settings: Resolved build settings
            language: Target language, defaults to ``settings.language``
            max_workers: Worker pool size, defaults to the CPU count

        Raises:
            RegistryError: If the language is not supported
        """
        self.settings = settings
        self.language = language or settings.language
        self.max_workers = max_workers or os.cpu_count() or 1
        self.config_manager = get_config_manager()
        self.generator: CodeGenerator = get_generator(
            self.language, settings.language_config
        )

    def build(self, paths: Iterable[Union[str, Path]]) -> List[FileOutcome]:
        """
        Generate every eligible file.

        Args:
            paths: Candidate files; non-resource files and locale variants
                are ignored

        Returns:
            One outcome per generated file, sorted by path. Empty when the
            project directory or root namespace is unknown.
        """
        if not self.settings.has_required_metadata:
            logger.warning(
                "Project directory or root namespace unknown; nothing to generate"
            )
            return []

        inputs = select_generation_inputs(paths)
        if not inputs:
            logger.info("No resource files to generate")
            return []

        workers = min(self.max_workers, len(inputs))
        logger.info(
            "Generating %d resource file(s) with %d worker(s)", len(inputs), workers
        )

        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(self.build_file, inputs))

        return sorted(outcomes, key=lambda outcome: outcome.path.as_posix())

    def build_file(self, path: Path) -> FileOutcome:
        """Generate a single resource file."""
        logger.info("Generating %s", path)

        try:
            options = self.config_manager.resolve_options(self.settings, path)
        except ConfigError as e:
            logger.error("Cannot resolve options for %s: %s", path, e)
            return FileOutcome(path, GenerationResult.error(str(e), exception=e))

        try:
            with open(path, "rb") as stream:
                result = generate_code(self.generator, stream, options, str(path))
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            result = GenerationResult.error(f"Failed to read {path}: {e}", exception=e)

        if result.success:
            logger.info("Generated %s from %s", options.identity, path)
            for warning in result.warnings:
                logger.warning("%s: %s", path, warning)

        return FileOutcome(path, result, options)


def write_outputs(
    outcomes: Iterable[FileOutcome], output_dir: Union[str, Path]
) -> List[Path]:
    """
    Write the generated source of successful outcomes.

    Files are written byte for byte, keeping the generator's line endings.

    Returns:
        Paths of the written files
    """
    output_dir = Path(output_dir)
    written = []

    for outcome in outcomes:
        if not outcome.success or not outcome.output_file:
            continue

        target = output_dir / outcome.output_file
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(outcome.result.code)

        logger.debug("Wrote %s", target)
        written.append(target)

    return written
