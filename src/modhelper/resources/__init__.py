"""Resource processing before packaging."""
