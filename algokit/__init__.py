"""Small algorithmic routines for searching, arrays, numbers, strings and palindromes."""

__version__ = "0.1.0"
__all__ = ["search", "arrays", "numbers", "strings", "palindromes"]