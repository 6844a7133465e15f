"""Post-discovery transforms for page data."""
