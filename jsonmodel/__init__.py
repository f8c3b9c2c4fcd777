"""In-memory JSON value model: type tags and flags, typed values, object iteration."""

__version__ = "0.1.0"
__all__ = ["encoding", "value", "iterator"]