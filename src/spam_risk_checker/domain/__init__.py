"""Domain models for content and links."""
