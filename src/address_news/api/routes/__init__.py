"""API route modules mounted under the configured API prefix."""
