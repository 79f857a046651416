"""Application services for health entries and charts."""
