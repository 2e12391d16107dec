"""
Python-specific naming utilities and sanitization.

Handles Python reserved words and docstring escaping.
"""

from ...core.naming import IdentifierSanitizer


# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}


def escape_docstring(text: str) -> str:
    """Escape text for a double-quoted docstring."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


class PythonIdentifierSanitizer(IdentifierSanitizer):
    """Identifier sanitizer that avoids class-private name mangling."""

    MANGLED_PREFIX = "resource"

    def sanitize_name(self, key: str) -> str:
        name = super().sanitize_name(key)
        # Names starting with two underscores are mangled inside class bodies
        if name.startswith("__"):
            name = f"{self.MANGLED_PREFIX}{name}"
        return name

    def is_valid_identifier(self, name: str) -> bool:
        return super().is_valid_identifier(name) and not name.startswith("__")


def create_python_sanitizer() -> IdentifierSanitizer:
    """Create an identifier sanitizer configured for Python."""
    return PythonIdentifierSanitizer(
        PYTHON_RESERVED_WORDS, documentation_escaper=escape_docstring
    )
