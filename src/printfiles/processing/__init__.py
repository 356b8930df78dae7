"""Public API surface for printfiles.processing."""
__all__ = [
    "line_ops",
]
