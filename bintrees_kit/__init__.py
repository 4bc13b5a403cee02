"""Binary tree nodes with parent links, traversals, measurements, ASCII drawing and demo scenarios."""

__version__ = "0.1.0"
__all__ = ["__version__"]