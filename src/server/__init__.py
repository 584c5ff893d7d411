"""Reference navigation service."""
