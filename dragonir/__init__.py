"""Linear intermediate representation: types, values, instructions, code blocks and functions with textual output."""

__version__ = "1.0.1"
__all__ = ["types", "values", "instruction", "operations", "code", "function"]