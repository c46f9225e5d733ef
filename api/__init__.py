"""API package - HTTP surface of the application."""
