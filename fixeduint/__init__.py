"""Fixed-width unsigned big integers with overflow-aware arithmetic."""

__version__ = "0.1.0"
__all__ = ["errors", "words", "uint", "types", "reference", "modular"]