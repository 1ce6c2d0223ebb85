"""Archive manifest attributes."""
