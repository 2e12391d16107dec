"""
Exceptions raised while turning a resource file into generated code.

Every error below is scoped to a single resource file: the batch driver
reports it for that file and keeps processing the others.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ResourceParseError(GeneratorError):
    """Raised when a resource document is not well-formed."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class IdentifierCollisionError(GeneratorError):
    """
    Raised when a resource key cannot get a unique identifier.

    Either two keys sanitize to the same identifier, or a key lands on a
    name reserved for a member the generator emits itself. In the latter
    case ``other_key`` is ``None`` and ``reserved_member`` names the member.
    """

    def __init__(
        self,
        identifier: str,
        key: str,
        other_key: Optional[str] = None,
        reserved_member: Optional[str] = None,
    ):
        self.identifier = identifier
        self.key = key
        self.other_key = other_key
        self.reserved_member = reserved_member

        if other_key is not None:
            message = (
                f"Resource keys '{other_key}' and '{key}' both map to "
                f"identifier '{identifier}'"
            )
        else:
            message = (
                f"Resource key '{key}' maps to identifier '{identifier}', "
                f"which is reserved for the generated member '{reserved_member}'"
            )
        super().__init__(message)
