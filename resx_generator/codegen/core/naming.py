"""
Naming utilities for safe code generation.

Turns raw resource keys into identifiers that are valid in the target
language, detects collisions between them, and escapes resource text for
use inside documentation comments.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Set

from markupsafe import escape

from ...logging_config import get_logger
from .errors import IdentifierCollisionError
from .resources import ResourceEntry

logger = get_logger(__name__)


@dataclass(frozen=True)
class SanitizedEntry:
    """A string resource together with the names derived from it."""

    key: str
    value: str
    comment: Optional[str]
    identifier: str
    summary: str
    escaped_comment: Optional[str] = None


def escape_xml_documentation(text: str) -> str:
    """Escape text for an XML documentation comment (``&``, ``<``, ``>``, quotes)."""
    return str(escape(text))


def _is_identifier_start(char: str) -> bool:
    return char == "_" or char.isalpha()


def _is_identifier_part(char: str) -> bool:
    return char == "_" or char.isalpha() or char.isdecimal()


class IdentifierSanitizer:
    """Maps resource keys to identifiers and escapes documentation text."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        documentation_escaper: Optional[Callable[[str], str]] = None,
        suffix_on_conflict: str = "_",
    ):
        """
        Initialize identifier sanitizer.

        Args:
            reserved_words: Language keywords that cannot be used as identifiers
            documentation_escaper: Escapes text embedded in doc comments
            suffix_on_conflict: Appended to identifiers that are keywords
        """
        self.reserved_words = reserved_words or set()
        self.documentation_escaper = documentation_escaper or escape_xml_documentation
        self.suffix_on_conflict = suffix_on_conflict

    def sanitize_name(self, key: str) -> str:
        """
        Sanitize a raw key for use as an identifier.

        Every character that is not allowed in an identifier is replaced by
        one underscore, so ``"Invalid identifier {0}"`` becomes
        ``"Invalid_identifier__0_"``.
        """
        name = "".join(char if _is_identifier_part(char) else "_" for char in key)

        if not name:
            return "_"

        if not _is_identifier_start(name[0]):
            name = f"_{name}"

        if name in self.reserved_words:
            name = f"{name}{self.suffix_on_conflict}"

        return name

    def is_valid_identifier(self, name: str) -> bool:
        """Check a name against the identifier grammar and the keyword list."""
        return (
            bool(name)
            and _is_identifier_start(name[0])
            and all(_is_identifier_part(char) for char in name[1:])
            and name not in self.reserved_words
        )

    def escape_documentation(self, text: str) -> str:
        """Escape resource text for embedding in a documentation comment."""
        return self.documentation_escaper(text)

    def sanitize_entries(
        self,
        entries: Iterable[ResourceEntry],
        reserved_members: Iterable[str] = (),
    ) -> List[SanitizedEntry]:
        """
        Attach identifiers and escaped documentation to string resources.

        Args:
            entries: String resources in file order
            reserved_members: Names of members the generator emits itself

        Returns:
            Sanitized entries in the same order

        Raises:
            IdentifierCollisionError: If two keys share an identifier or a key
                lands on a reserved member name
        """
        reserved = set(reserved_members)
        owners: Dict[str, str] = {}
        sanitized = []

        for entry in entries:
            identifier = self.sanitize_name(entry.key)

            if identifier in reserved:
                raise IdentifierCollisionError(
                    identifier, entry.key, reserved_member=identifier
                )

            if identifier in owners:
                raise IdentifierCollisionError(
                    identifier, entry.key, other_key=owners[identifier]
                )
            owners[identifier] = entry.key

            if identifier != entry.key:
                logger.debug("Resource '%s' exposed as '%s'", entry.key, identifier)

            sanitized.append(
                SanitizedEntry(
                    key=entry.key,
                    value=entry.value,
                    comment=entry.comment,
                    identifier=identifier,
                    summary=self.escape_documentation(entry.value),
                    escaped_comment=(
                        self.escape_documentation(entry.comment)
                        if entry.comment
                        else None
                    ),
                )
            )

        return sanitized
