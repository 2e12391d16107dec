"""
Configuration management for code generation.

Holds the per-file GeneratorOptions consumed by generators and the
project-wide BuildSettings the driver resolves them from. Settings can be
loaded from a JSON file and merged with programmatic overrides.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Optional, Union

from ...logging_config import get_logger
from .locations import get_base_name, get_local_namespace

logger = get_logger(__name__)

Switch = Union[bool, str, None]


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


def is_switch_on(value: Switch) -> bool:
    """A switch that is off unless explicitly set to ``true``."""
    if isinstance(value, bool):
        return value
    return bool(value) and value.strip().lower() == "true"


def is_switch_not_off(value: Switch) -> bool:
    """A switch that is on unless explicitly set to ``false``."""
    if isinstance(value, bool):
        return value
    return not (bool(value) and value.strip().lower() == "false")


def _has_value(value: Switch) -> bool:
    if isinstance(value, bool):
        return True
    return bool(value and value.strip())


@dataclass(frozen=True)
class GeneratorOptions:
    """Fully resolved options for generating one resource file."""

    local_namespace: str
    class_name: str
    custom_tool_namespace: Optional[str] = None
    public_class: bool = False
    null_forgiving_operators: bool = False
    static_class: bool = True

    @property
    def namespace(self) -> str:
        """Custom tool namespace when set, otherwise the local namespace."""
        return self.custom_tool_namespace or self.local_namespace

    @property
    def identity(self) -> str:
        """Fully qualified name of the resource set (``{namespace}.{class}``)."""
        if not self.namespace:
            return self.class_name
        return f"{self.namespace}.{self.class_name}"


@dataclass
class ResourceFileMetadata:
    """Per-file overrides; empty values defer to the global switches."""

    target_path: Optional[str] = None
    custom_tool_namespace: Optional[str] = None
    public_class: Switch = None
    static_class: Switch = None


@dataclass
class BuildSettings:
    """Project-wide settings resolved by the driver."""

    project_dir: Optional[str] = None
    root_namespace: Optional[str] = None

    # Global switches
    public_class: Switch = False
    null_forgiving_operators: Switch = False
    static_class: Switch = True

    # Output settings
    language: str = "csharp"
    language_config: Dict[str, Any] = field(default_factory=dict)

    # Keyed by path relative to project_dir, using forward slashes
    files: Dict[str, ResourceFileMetadata] = field(default_factory=dict)

    @property
    def has_required_metadata(self) -> bool:
        return self.project_dir is not None and self.root_namespace is not None

    def metadata_for(self, resource_path: Union[str, Path]) -> ResourceFileMetadata:
        """Return the per-file metadata for a resource file (empty when absent)."""
        path = Path(resource_path)
        candidates = [path.as_posix()]

        if self.project_dir:
            try:
                relative = os.path.relpath(path, self.project_dir)
                candidates.insert(0, PurePosixPath(*Path(relative).parts).as_posix())
            except ValueError:
                pass

        for candidate in candidates:
            if candidate in self.files:
                return self.files[candidate]
        return ResourceFileMetadata()


class ConfigManager:
    """Loads build settings and resolves generator options from them."""

    SETTING_KEYS = {
        "project_dir",
        "root_namespace",
        "public_class",
        "null_forgiving_operators",
        "static_class",
        "language",
        "language_config",
        "files",
    }

    def get_settings(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
        defaults: Optional[Dict[str, Any]] = None,
    ) -> BuildSettings:
        """
        Get build settings, merging a config file with overrides.

        Args:
            custom_config: Overrides applied on top of the file
            config_file: Path to JSON configuration file
            defaults: Settings the file and the overrides are applied on top of
                (e.g. read from a project file)

        Returns:
            Merged build settings
        """
        base_config: Dict[str, Any] = dict(defaults or {})

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        return self._dict_to_settings(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        # Relative project locations are relative to the config file
        for key in ("project_dir", "project_path"):
            if config.get(key):
                config[key] = str((path.parent / config[key]).resolve())

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_settings(self, config_dict: Dict[str, Any]) -> BuildSettings:
        """Convert dictionary to BuildSettings instance."""
        config_dict = dict(config_dict)

        project_path = config_dict.pop("project_path", None)
        if project_path and not config_dict.get("project_dir"):
            config_dict["project_dir"] = str(Path(project_path).parent)

        unknown = set(config_dict) - self.SETTING_KEYS
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        files = config_dict.get("files") or {}
        if not isinstance(files, dict):
            raise ConfigError("'files' must map resource paths to metadata objects")

        parsed_files = {}
        for file_key, metadata in files.items():
            if isinstance(metadata, ResourceFileMetadata):
                parsed_files[file_key] = metadata
                continue
            if not isinstance(metadata, dict):
                raise ConfigError(f"Metadata for '{file_key}' must be an object")
            try:
                parsed_files[file_key] = ResourceFileMetadata(**metadata)
            except TypeError as e:
                raise ConfigError(f"Invalid metadata for '{file_key}': {e}") from e

        config_dict["files"] = {
            PurePosixPath(key.replace("\\", "/")).as_posix(): value
            for key, value in parsed_files.items()
        }
        return BuildSettings(**config_dict)

    def resolve_options(
        self, settings: BuildSettings, resource_path: Union[str, Path]
    ) -> GeneratorOptions:
        """
        Resolve generator options for one resource file.

        Raises:
            ConfigError: If the project directory or root namespace is unknown
        """
        if not settings.has_required_metadata:
            raise ConfigError(
                "Project directory and root namespace are required to resolve options"
            )

        path = str(resource_path)
        metadata = settings.metadata_for(resource_path)

        public_class = (
            is_switch_on(metadata.public_class)
            if _has_value(metadata.public_class)
            else is_switch_on(settings.public_class)
        )
        static_class = (
            is_switch_not_off(metadata.static_class)
            if _has_value(metadata.static_class)
            else is_switch_not_off(settings.static_class)
        )

        return GeneratorOptions(
            local_namespace=get_local_namespace(
                path,
                metadata.target_path or None,
                settings.project_dir,
                settings.root_namespace,
            ),
            custom_tool_namespace=metadata.custom_tool_namespace or None,
            class_name=get_base_name(path),
            public_class=public_class,
            null_forgiving_operators=is_switch_on(settings.null_forgiving_operators),
            static_class=static_class,
        )


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
    defaults: Optional[Dict[str, Any]] = None,
) -> BuildSettings:
    """
    Convenience function to load build settings.

    Args:
        custom_config: Overrides applied on top of the file
        config_file: Path to JSON configuration file
        defaults: Settings the file and the overrides are applied on top of

    Returns:
        Merged build settings
    """
    return get_config_manager().get_settings(custom_config, config_file, defaults)
