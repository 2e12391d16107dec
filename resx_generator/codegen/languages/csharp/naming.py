"""
C#-specific naming utilities and sanitization.

Handles C# reserved keywords. Contextual keywords (``value``, ``var``,
``async`` ...) are valid identifiers and are left alone.
"""

from ...core.naming import IdentifierSanitizer, escape_xml_documentation


# C# reserved keywords
CSHARP_RESERVED_WORDS = {
    "abstract",
    "as",
    "base",
    "bool",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "checked",
    "class",
    "const",
    "continue",
    "decimal",
    "default",
    "delegate",
    "do",
    "double",
    "else",
    "enum",
    "event",
    "explicit",
    "extern",
    "false",
    "finally",
    "fixed",
    "float",
    "for",
    "foreach",
    "goto",
    "if",
    "implicit",
    "in",
    "int",
    "interface",
    "internal",
    "is",
    "lock",
    "long",
    "namespace",
    "new",
    "null",
    "object",
    "operator",
    "out",
    "override",
    "params",
    "private",
    "protected",
    "public",
    "readonly",
    "ref",
    "return",
    "sbyte",
    "sealed",
    "short",
    "sizeof",
    "stackalloc",
    "static",
    "string",
    "struct",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "uint",
    "ulong",
    "unchecked",
    "unsafe",
    "ushort",
    "using",
    "virtual",
    "void",
    "volatile",
    "while",
}


def create_csharp_sanitizer() -> IdentifierSanitizer:
    """Create an identifier sanitizer configured for C#."""
    return IdentifierSanitizer(
        CSHARP_RESERVED_WORDS, documentation_escaper=escape_xml_documentation
    )
