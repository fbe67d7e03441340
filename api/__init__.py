"""API package - HTTP routes, middleware and response models."""
