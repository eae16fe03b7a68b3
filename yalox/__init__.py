"""A tree-walking interpreter for a subset of the Lox scripting language."""

__version__ = "0.1.0"
__all__ = ["__version__"]