"""CLI progress renderers."""
