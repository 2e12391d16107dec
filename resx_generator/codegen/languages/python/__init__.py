"""
Python code generator module.

Generates Python modules exposing string resources as typed properties.
"""

from .generator import PythonGenerator, create_python_generator
from .naming import PYTHON_RESERVED_WORDS, create_python_sanitizer

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "create_python_sanitizer",
    "PYTHON_RESERVED_WORDS",
]
