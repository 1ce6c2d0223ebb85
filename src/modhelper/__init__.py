"""modhelper - metadata and packaging helper for NeoForge mod builds."""

__version__ = "1.0.0"
