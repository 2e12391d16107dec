"""
Resource file parsing.

Reads a ``.resx`` document into an ordered list of ResourceEntry records.
The parser is lenient about content and strict about structure: any
well-formed document yields entries, anything lxml cannot parse fails the
whole file.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from lxml import etree

from ...logging_config import get_logger
from .errors import ResourceParseError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResourceEntry:
    """A single ``<data>`` element of a resource file."""

    key: str
    value: str
    comment: Optional[str] = None
    is_string_type: bool = True

    # Non-string resources keep their declared type for diagnostics
    type_name: Optional[str] = None


def create_secure_parser() -> etree.XMLParser:
    """Create an XML parser that never touches the network or external entities."""
    return etree.XMLParser(
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
        huge_tree=False,
        remove_comments=True,
        remove_pis=True,
    )


def _element_text(element) -> str:
    """Concatenated text content of an element, ignoring markup."""
    return "".join(element.itertext())


class ResourceParser:
    """Parser for XML resource (``.resx``) documents."""

    DATA_TAG = "data"
    VALUE_TAG = "value"
    COMMENT_TAG = "comment"

    def parse(
        self, stream: BinaryIO, source: Optional[str] = None
    ) -> List[ResourceEntry]:
        """
        Parse a resource document from a binary stream.

        Args:
            stream: Readable byte stream positioned at the document start
            source: Optional name used in diagnostics

        Returns:
            Entries in document order, including non-string ones

        Raises:
            ResourceParseError: If the document is not well-formed
        """
        try:
            tree = etree.parse(stream, create_secure_parser())
        except etree.XMLSyntaxError as e:
            raise ResourceParseError(f"Malformed resource XML: {e}", source) from e

        root = tree.getroot()
        entries = []

        for index, element in enumerate(root.iterchildren(self.DATA_TAG)):
            entries.append(self._parse_data_element(element, index, source))

        skipped = sum(1 for entry in entries if not entry.is_string_type)
        logger.debug(
            "Parsed %d resource entries (%d non-string) from %s",
            len(entries),
            skipped,
            source or "<stream>",
        )
        return entries

    def parse_bytes(
        self, content: bytes, source: Optional[str] = None
    ) -> List[ResourceEntry]:
        """Parse a resource document held in memory."""
        with io.BytesIO(content) as stream:
            return self.parse(stream, source)

    def parse_file(self, path: Union[str, Path]) -> List[ResourceEntry]:
        """Parse a resource document from disk."""
        path = Path(path)
        with path.open("rb") as stream:
            return self.parse(stream, str(path))

    def _parse_data_element(
        self, element, index: int, source: Optional[str]
    ) -> ResourceEntry:
        key = element.get("name")
        if key is None:
            raise ResourceParseError(
                f"<data> element #{index + 1} (line {element.sourceline}) "
                "has no 'name' attribute",
                source,
            )

        type_name = element.get("type") or element.get("mimetype")

        value_element = element.find(self.VALUE_TAG)
        value = _element_text(value_element) if value_element is not None else ""
        if not value.strip():
            value = ""

        comment_element = element.find(self.COMMENT_TAG)
        comment = (
            _element_text(comment_element) if comment_element is not None else None
        )

        if type_name:
            logger.debug("Resource '%s' has type '%s'; not a string", key, type_name)

        return ResourceEntry(
            key=key,
            value=value,
            comment=comment or None,
            is_string_type=not type_name,
            type_name=type_name or None,
        )


def string_entries(entries: List[ResourceEntry]) -> List[ResourceEntry]:
    """Keep only the entries accessors are generated for, preserving order."""
    return [entry for entry in entries if entry.is_string_type]


def parse_resources(
    stream: BinaryIO, source: Optional[str] = None
) -> List[ResourceEntry]:
    """Convenience wrapper around :meth:`ResourceParser.parse`."""
    return ResourceParser().parse(stream, source)
