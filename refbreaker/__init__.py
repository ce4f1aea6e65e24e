"""Find known titles in text and report them as positioned references."""

__version__ = "1.0.0"
__all__ = ["__version__"]