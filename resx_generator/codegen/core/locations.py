"""
Location metadata for resource files.

Derives the class base name and the output namespace of a resource file
from its path. Locale variants (``Messages.fr.resx``) are detected here so
the driver can leave them to the runtime lookup provider.
"""

import functools
from enum import Enum
from pathlib import PurePosixPath
from typing import List, Optional, Sequence

from babel import Locale, UnknownLocaleError
from babel.core import parse_locale

from ...logging_config import get_logger

logger = get_logger(__name__)

PSEUDO_LOCALE_PREFIX = "qps-"

# Neutral languages that stand for "no particular culture"
INVARIANT_LANGUAGES = frozenset({"root", "und"})


class LocaleTagKind(Enum):
    """Classification of a candidate locale tag."""

    SPECIFIC = "specific"
    PSEUDO = "pseudo"
    INVALID = "invalid"

    @property
    def is_valid(self) -> bool:
        return self is not LocaleTagKind.INVALID


@functools.lru_cache(maxsize=256)
def classify_locale_tag(tag: Optional[str]) -> LocaleTagKind:
    """
    Classify a file-name segment as a locale tag.

    ``qps-`` pseudo-locales are always accepted. Other tags must resolve to
    a language known to CLDR whose neutral language is not an invariant
    placeholder. Every parse failure classifies the tag as invalid.
    """
    if not tag:
        return LocaleTagKind.INVALID

    if tag.startswith(PSEUDO_LOCALE_PREFIX):
        return LocaleTagKind.PSEUDO

    try:
        # Checked before parsing, which expands "und" to a likely language
        if parse_locale(tag, sep="-")[0].lower() in INVARIANT_LANGUAGES:
            return LocaleTagKind.INVALID
        locale = Locale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("'%s' is not a locale tag: %s", tag, e)
        return LocaleTagKind.INVALID

    if locale.language in INVARIANT_LANGUAGES:
        return LocaleTagKind.INVALID

    return LocaleTagKind.SPECIFIC


def _normalize(path: str) -> PurePosixPath:
    return PurePosixPath(str(path).replace("\\", "/"))


def get_base_name(file_path: str) -> str:
    """
    Return the file name without its extension and locale segment.

    ``Messages.fr.resx`` gives ``Messages``; ``Messages.Util.resx`` gives
    ``Messages.Util`` because ``Util`` is not a locale.
    """
    name = PurePosixPath(_normalize(file_path).stem)
    language_name = name.suffix.lstrip(".")

    if classify_locale_tag(language_name).is_valid:
        return name.stem
    return str(name)


def get_locale_tag(file_path: str) -> Optional[str]:
    """Return the locale segment of a variant file name, or None."""
    name = PurePosixPath(_normalize(file_path).stem)
    language_name = name.suffix.lstrip(".")
    return language_name if classify_locale_tag(language_name).is_valid else None


def is_locale_variant(file_path: str) -> bool:
    """Whether the file supplies localized values for another resource file."""
    return get_locale_tag(file_path) is not None


def _segments(parts: Sequence[str]) -> List[str]:
    return [part.replace(" ", "") for part in parts if part not in ("", ".", "/")]


def _relative_parts(
    directory: PurePosixPath, ancestor: PurePosixPath
) -> Optional[Sequence[str]]:
    """Parts of ``directory`` below ``ancestor`` (compared case-insensitively)."""
    parts = directory.parts
    ancestor_parts = ancestor.parts

    if len(parts) < len(ancestor_parts):
        return None

    for own, expected in zip(parts, ancestor_parts):
        if own.casefold() != expected.casefold():
            return None

    return parts[len(ancestor_parts):]


def _join_namespace(root_namespace: str, segments: Sequence[str]) -> str:
    return ".".join(part for part in [root_namespace, *segments] if part)


def get_local_namespace(
    resx_path: Optional[str],
    target_path: Optional[str],
    project_dir: Optional[str],
    root_namespace: Optional[str],
) -> str:
    """
    Resolve the namespace for a resource file.

    An explicit target path wins; otherwise the resource directory relative
    to the project directory is used. Directory separators become dots and
    spaces are dropped. Returns an empty string when no namespace can be
    derived; this function never raises.

    Args:
        resx_path: Path of the resource file
        target_path: Optional project-relative path the resource is embedded as
        project_dir: Directory of the owning project
        root_namespace: Namespace of the project

    Returns:
        Dotted namespace, or ``""``
    """
    try:
        if not resx_path or not project_dir:
            return ""

        root_namespace = root_namespace or ""

        if target_path and target_path.strip():
            segments = _segments(_normalize(target_path).parent.parts)
            return _join_namespace(root_namespace, segments)

        relative = _relative_parts(_normalize(resx_path).parent, _normalize(project_dir))
        if relative is None:
            logger.debug(
                "%s is outside project directory %s; no namespace",
                resx_path,
                project_dir,
            )
            return ""

        return _join_namespace(root_namespace, _segments(relative))

    except (TypeError, ValueError, AttributeError) as e:
        logger.debug("Could not resolve namespace for %s: %s", resx_path, e)
        return ""
