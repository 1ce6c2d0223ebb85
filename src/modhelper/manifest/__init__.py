"""Mod-loader manifest generation."""

from .generator import ManifestGenerator
from .models import ManifestDocument, McPublish, ModEntry

__all__ = ["ManifestGenerator", "ManifestDocument", "McPublish", "ModEntry"]
