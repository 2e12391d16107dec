"""
C# code generator module.

Generates strongly typed resource classes for ``.resx`` files.
"""

from .generator import CSharpGenerator, create_csharp_generator
from .naming import CSHARP_RESERVED_WORDS, create_csharp_sanitizer

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "create_csharp_sanitizer",
    "CSHARP_RESERVED_WORDS",
]
