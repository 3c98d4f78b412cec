"""Public API surface for krokiprep.processing."""
__all__ = [
    "blocks",
    "includes",
    "vegalite",
]
