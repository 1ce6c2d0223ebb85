"""Javadoc tool configuration."""
