"""Employee and project assignments ordered by priority, with undo and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]