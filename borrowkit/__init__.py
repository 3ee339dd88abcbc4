"""Runtime-checked optionals, panics, string views, cells, containers and synchronisation primitives."""

__version__ = "0.1.0"
__all__ = ["cell", "containers", "optional", "panic", "string_view", "sync", "text"]